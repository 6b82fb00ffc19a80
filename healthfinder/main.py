"""
HealthFinder API - FastAPI backend for healthcare facility search
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from healthfinder.data.store import MemoryStore
from healthfinder.errors import FacilityDirectoryError
from healthfinder.routes.facilities import router as facilities_router
from healthfinder.routes.history import router as history_router
from healthfinder.services.facility_directory import FacilityDirectory
from healthfinder.tools import build_lookup_tool
from healthfinder.tools.base_tool import BaseLookupTool
from healthfinder.utils.settings import get_log_level

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def directory_error_handler(request: Request, exc: FacilityDirectoryError) -> JSONResponse:
    # Full detail stays in the server log; callers get the public message only.
    log = logger.warning if exc.status_code < 500 else logger.error
    log("[API] %s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


def create_app(store: Optional[MemoryStore] = None, lookup_tool: Optional[BaseLookupTool] = None) -> FastAPI:
    """Build the API with one store for the life of the process."""
    store = store if store is not None else MemoryStore()
    lookup_tool = lookup_tool if lookup_tool is not None else build_lookup_tool()

    app = FastAPI(
        title="HealthFinder API",
        description="Search for hospitals, pharmacies and clinics",
        version="1.0.0",
    )
    app.state.store = store
    app.state.directory = FacilityDirectory(store, lookup_tool)

    app.add_exception_handler(FacilityDirectoryError, directory_error_handler)
    app.include_router(facilities_router)
    app.include_router(history_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "message": "API is working", "facilitySource": lookup_tool.name}

    logger.info("[API] Facility source: %s", lookup_tool.name)
    return app


app = create_app()
