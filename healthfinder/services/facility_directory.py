"""Facility directory: facility search with upsert-by-place-id, and search history."""

import asyncio
import logging
from functools import partial
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from healthfinder.data.store import HISTORY_PAGE_SIZE, MemoryStore
from healthfinder.errors import HistoryValidationError, InvalidInputError
from healthfinder.models.facility import Facility
from healthfinder.models.search_history import (
    SearchHistoryCreate,
    SearchHistoryEntry,
    SearchHistoryWithFacility,
)
from healthfinder.tools.base_tool import MAX_RESULTS, BaseLookupTool

logger = logging.getLogger(__name__)


class FacilityDirectory:
    def __init__(self, store: MemoryStore, lookup_tool: BaseLookupTool):
        self.store = store
        self.lookup_tool = lookup_tool

    async def search_facilities(
        self, query: Optional[str], location: Optional[str] = None, place_type: Optional[str] = None
    ) -> List[Facility]:
        """
        Look up facilities matching `query`, optionally only of `place_type`, and store them.

        The lookup runs in a worker thread. Upserts happen back on the event loop, one
        synchronous store call per result, so two searches resolving the same place id
        end up sharing a single stored record.

        Raises:
            InvalidInputError: query missing or blank, or unknown place_type
            ConfigurationError: lookup source not configured
            UpstreamError: provider failure
        """
        if not query or not isinstance(query, str) or not query.strip():
            raise InvalidInputError("Missing required field: query")

        input_payload = {"query": query, "location": location, "type": place_type}
        loop = asyncio.get_running_loop()
        results = await loop.run_in_executor(None, partial(self.lookup_tool, input_payload))

        facilities = [self.store.upsert_facility(data) for data in results[:MAX_RESULTS]]
        logger.info("[DIRECTORY] %r via %s -> %d facilities", query, self.lookup_tool.name, len(facilities))
        return facilities

    def append_history(self, payload: Any) -> SearchHistoryEntry:
        """Record a search. The facility reference is not checked; dangling ids read back as null."""
        if not isinstance(payload, dict):
            raise HistoryValidationError("Search history payload must be a JSON object")
        try:
            data = SearchHistoryCreate.model_validate(payload)
        except ValidationError as e:
            raise HistoryValidationError(f"Invalid search history payload: {e}") from e
        return self.store.create_search_history(data)

    def list_history(self, user_id: Optional[str] = None) -> List[SearchHistoryWithFacility]:
        """Most recent entries first, at most 10, each joined with its facility."""
        history = self.store.get_search_history(user_id, limit=HISTORY_PAGE_SIZE)
        return [
            SearchHistoryWithFacility(
                **entry.model_dump(),
                facility=self.store.get_facility(entry.facility_id) if entry.facility_id else None,
            )
            for entry in history
        ]
