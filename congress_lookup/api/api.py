"""Main API router."""

from fastapi import APIRouter

from congress_lookup.api.routes.congress import router as congress_router
from congress_lookup.api.routes.districts import router as districts_router

api_router = APIRouter()

# Include all route modules
api_router.include_router(districts_router)
api_router.include_router(congress_router)
