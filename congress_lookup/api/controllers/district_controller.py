"""District controller for handling district lookup endpoints."""

from typing import Optional

from fastapi import Depends, Query

from congress_lookup.api.dependencies import get_upstreams
from congress_lookup.core.district_service import DistrictService
from congress_lookup.core.normalizer import normalize_districts
from congress_lookup.schemas.districts import DistrictLookupResponse
from congress_lookup.services.upstream_client import Upstreams


class DistrictController:
    """Controller for district operations."""

    @staticmethod
    async def district_from_address(
        street: Optional[str] = Query(None, description="Street address, e.g. 1600 Pennsylvania Ave"),
        zip_code: Optional[str] = Query(None, alias="zip", description="5-digit or ZIP+4 postal code"),
        upstreams: Upstreams = Depends(get_upstreams),
    ) -> DistrictLookupResponse:
        """Resolve the congressional district(s) for an address or zip."""
        service = DistrictService(upstreams)
        districts = await service.resolve(street=street, zip_code=zip_code)
        return normalize_districts(districts)
