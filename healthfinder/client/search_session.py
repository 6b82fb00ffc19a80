"""
Search-as-you-type session for the facility search box.

Keystrokes restart a debounce timer; when it fires the settled text becomes the
debounced query and, if long enough, a search is sent. Every request remembers the
query it was built for, and its response is applied only while that query is still
the current debounced query. A slow response for an older query is dropped.
"""

import asyncio
import logging
from enum import Enum
from functools import partial
from typing import Dict, List, Optional
from urllib.parse import quote

from healthfinder.errors import GENERIC_SEARCH_ERROR, FacilityDirectoryError
from healthfinder.models.facility import Facility
from healthfinder.models.search_history import SearchHistoryWithFacility

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.5
MIN_QUERY_LENGTH = 2
RECENT_SEARCHES_SHOWN = 6


class SearchState(str, Enum):
    IDLE = "idle"
    TYPING = "typing"
    PENDING = "pending"
    LOADING = "loading"
    SHOWING_RESULTS = "showing-results"
    NO_RESULTS = "no-results"
    ERROR = "error"


def directions_url(facility: Optional[Facility]) -> Optional[str]:
    """Maps link: directions by coordinates when both are known, else a search by address."""
    if facility is None:
        return None
    if facility.latitude and facility.longitude:
        return f"https://www.google.com/maps/dir/?api=1&destination={facility.latitude},{facility.longitude}"
    return f"https://www.google.com/maps/search/?api=1&query={quote(facility.address, safe='')}"


def detail_form(facility: Optional[Facility]) -> Dict[str, str]:
    """Read-only form values auto-filled from the selected facility."""
    if facility is None:
        return {"name": "", "type": "", "address": "", "phone": "", "hours": ""}
    return {
        "name": facility.name,
        "type": facility.type.capitalize(),
        "address": facility.address,
        "phone": facility.phone or "",
        "hours": facility.hours or "",
    }


class SearchSession:
    """
    State of one search box. Must be driven from inside a running event loop.
    `client` is a blocking DirectoryClient (or anything with the same methods); its calls
    run in the default executor.
    """

    def __init__(self, client, debounce_seconds: float = DEBOUNCE_SECONDS, user_id: Optional[str] = None):
        self.client = client
        self.debounce_seconds = debounce_seconds
        self.user_id = user_id

        self.query = ""
        self.debounced_query = ""
        self.results: List[Facility] = []
        self.selected: Optional[Facility] = None
        self.error: Optional[str] = None
        self.show_results = False
        self.state = SearchState.IDLE

        self._timer: Optional[asyncio.Task] = None
        self._tasks: set = set()

    # --- input ---

    def set_query(self, text: str) -> None:
        """Input changed: restart the debounce timer for the new text."""
        self.query = text
        self._cancel_timer()
        self.state = SearchState.PENDING if len(text.strip()) >= MIN_QUERY_LENGTH else SearchState.TYPING
        self._timer = asyncio.get_running_loop().create_task(self._debounce(text))

    async def _debounce(self, text: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        self._timer = None
        self._apply_debounced(text)

    def _apply_debounced(self, value: str) -> None:
        self.debounced_query = value
        query = value.strip()
        if len(query) < MIN_QUERY_LENGTH:
            self.show_results = False
            self.results = []
            self.error = None
            self.state = SearchState.TYPING if query else SearchState.IDLE
            return

        self.show_results = True
        self.error = None
        self.state = SearchState.LOADING
        self._spawn(self._run_search(value))

    async def _run_search(self, value: str) -> None:
        loop = asyncio.get_running_loop()
        try:
            facilities = await loop.run_in_executor(None, partial(self.client.search_facilities, value.strip()))
        except FacilityDirectoryError as e:
            if self._is_stale(value):
                return
            logger.warning("[CLIENT] Search for %r failed: %s", value, e)
            self.results = []
            self.error = e.public_message
            self.state = SearchState.ERROR
            return
        except Exception:
            if self._is_stale(value):
                return
            logger.exception("[CLIENT] Search for %r failed unexpectedly", value)
            self.results = []
            self.error = GENERIC_SEARCH_ERROR
            self.state = SearchState.ERROR
            return

        if self._is_stale(value):
            return
        self.results = facilities
        self.state = SearchState.SHOWING_RESULTS if facilities else SearchState.NO_RESULTS

    def _is_stale(self, value: str) -> bool:
        if value != self.debounced_query:
            logger.debug("[CLIENT] Dropping response for superseded query %r", value)
            return True
        return False

    # --- actions ---

    def select(self, facility: Facility) -> None:
        """Fill the form from `facility`, close the dropdown and log the pick to history."""
        typed = self.query
        self._cancel_timer()
        self.selected = facility
        self.query = facility.name
        # Settles the box on the name; any in-flight search becomes stale.
        self.debounced_query = facility.name
        self.show_results = False
        self.error = None
        self.state = SearchState.IDLE
        self._spawn(self._save_history(facility, typed.strip() or facility.name))

    async def _save_history(self, facility: Facility, search_query: str) -> None:
        loop = asyncio.get_running_loop()
        call = partial(self.client.append_history, search_query, facility_id=facility.id, user_id=self.user_id)
        try:
            await loop.run_in_executor(None, call)
        except FacilityDirectoryError as e:
            logger.warning("[CLIENT] Could not save search history: %s", e)
        except Exception:
            logger.exception("[CLIENT] Could not save search history")

    def clear(self) -> None:
        self._cancel_timer()
        self.query = ""
        self.debounced_query = ""
        self.selected = None
        self.results = []
        self.error = None
        self.show_results = False
        self.state = SearchState.IDLE

    def directions_url(self) -> Optional[str]:
        return directions_url(self.selected)

    def save(self) -> Optional[str]:
        """Local acknowledgement only; nothing is persisted."""
        if self.selected is None:
            return None
        return f"{self.selected.name} has been saved to your locations."

    def detail_form(self) -> Dict[str, str]:
        return detail_form(self.selected)

    async def recent_searches(self) -> List[SearchHistoryWithFacility]:
        loop = asyncio.get_running_loop()
        history = await loop.run_in_executor(None, partial(self.client.list_history, self.user_id))
        return history[:RECENT_SEARCHES_SHOWN]

    # --- task bookkeeping ---

    def _spawn(self, coro) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def settle(self) -> None:
        """Wait until no timer is pending and every request has finished."""
        while self._timer is not None or self._tasks:
            pending = list(self._tasks) + ([self._timer] if self._timer is not None else [])
            await asyncio.gather(*pending, return_exceptions=True)
