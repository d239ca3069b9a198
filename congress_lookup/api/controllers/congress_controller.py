"""Congress controller for handling member lookup endpoints."""

from typing import Optional

from fastapi import Depends, Query

from congress_lookup.api.dependencies import get_upstreams
from congress_lookup.core.congress_service import CongressService
from congress_lookup.core.normalizer import normalize_congress
from congress_lookup.schemas.congress import CongressResponse
from congress_lookup.services.upstream_client import Upstreams


class CongressController:
    """Controller for congress operations."""

    @staticmethod
    async def congress_from_district(
        district_id: Optional[str] = Query(None, alias="id", description="District id, e.g. CA-12 or AK-0"),
        upstreams: Upstreams = Depends(get_upstreams),
    ) -> CongressResponse:
        """Get the representative and senators for a district."""
        service = CongressService(upstreams)
        result = await service.resolve(district_id)
        return normalize_congress(result)
