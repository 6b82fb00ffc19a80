# healthfinder/routes/facilities.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from healthfinder.models.responses import ErrorResponse, FacilitySearchResponse
from healthfinder.routes.dependencies import get_directory
from healthfinder.services.facility_directory import FacilityDirectory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get(
    "/search-facilities",
    response_model=FacilitySearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_facilities(
    query: Optional[str] = Query(None, description="Free-text facility search"),
    location: Optional[str] = Query(None, description='"lat,lng" or a free-text place to search near'),
    type: Optional[str] = Query(None, description="Only hospital, pharmacy or clinic results"),
    directory: FacilityDirectory = Depends(get_directory),
):
    """Search healthcare facilities and store each result by its place id."""
    logger.info("[API] Facility search query=%r location=%r type=%r", query, location, type)

    facilities = await directory.search_facilities(query, location, type)
    return FacilitySearchResponse(facilities=facilities)
