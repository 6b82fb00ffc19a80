# healthfinder/routes/history.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from healthfinder.errors import HistoryValidationError
from healthfinder.models.responses import ErrorResponse
from healthfinder.models.search_history import SearchHistoryList, SearchHistorySaved
from healthfinder.routes.dependencies import get_directory
from healthfinder.services.facility_directory import FacilityDirectory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/search-history", response_model=SearchHistoryList, responses={500: {"model": ErrorResponse}})
async def get_search_history(
    user_id: Optional[str] = Query(None, alias="userId"),
    directory: FacilityDirectory = Depends(get_directory),
):
    """Ten most recent searches, each with its facility (or null)."""
    try:
        history = directory.list_history(user_id)
    except Exception as e:
        logger.exception("[API] Get search history error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch search history"})

    return SearchHistoryList(history=history)


@router.post("/search-history", response_model=SearchHistorySaved, responses={500: {"model": ErrorResponse}})
async def save_search_history(
    request: Request,
    directory: FacilityDirectory = Depends(get_directory),
):
    """
    Save a search to history.
    Body: {userId?, facilityId?, searchQuery}. The body is validated here rather than by
    FastAPI so that a malformed write reports 500 {error} like every other failure.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        raise HistoryValidationError(f"Body is not valid JSON: {e}") from e

    search = directory.append_history(payload)
    logger.info("[API] Saved search %r (facility=%s)", search.search_query, search.facility_id)
    return SearchHistorySaved(search=search)
