"""Congress routes."""

from fastapi import APIRouter

from congress_lookup.api.controllers.congress_controller import CongressController
from congress_lookup.schemas.congress import CongressResponse
from congress_lookup.schemas.districts import ErrorResponse

router = APIRouter(tags=["congress"])

# Members of Congress for a district
router.get(
    "/congress-from-district",
    response_model=CongressResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)(CongressController.congress_from_district)
