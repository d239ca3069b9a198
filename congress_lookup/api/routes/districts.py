"""District routes."""

from fastapi import APIRouter

from congress_lookup.api.controllers.district_controller import DistrictController
from congress_lookup.schemas.districts import DistrictLookupResponse, ErrorResponse

router = APIRouter(tags=["districts"])

# District from address or zip
router.get(
    "/district-from-address",
    response_model=DistrictLookupResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)(DistrictController.district_from_address)
