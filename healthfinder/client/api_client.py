# healthfinder/client/api_client.py
from typing import Any, Dict, List, Optional

import requests

from healthfinder.errors import GENERIC_SEARCH_ERROR, UpstreamError
from healthfinder.models.facility import Facility
from healthfinder.models.search_history import SearchHistoryEntry, SearchHistoryWithFacility
from healthfinder.utils.settings import get_api_url


class DirectoryClient:
    """
    Blocking HTTP client for the HealthFinder API.
    Non-2xx responses and transport failures raise UpstreamError carrying the server's `error` text.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10):
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self.timeout = timeout

    def search_facilities(self, query: str, location: Optional[str] = None, place_type: Optional[str] = None) -> List[Facility]:
        params = {"query": query}
        if location:
            params["location"] = location
        if place_type:
            params["type"] = place_type
        data = self._request("GET", "/api/search-facilities", params=params)
        return [Facility.model_validate(f) for f in data.get("facilities", [])]

    def append_history(self, search_query: str, facility_id: Optional[str] = None, user_id: Optional[str] = None) -> SearchHistoryEntry:
        body = {"searchQuery": search_query, "facilityId": facility_id, "userId": user_id}
        data = self._request("POST", "/api/search-history", json={k: v for k, v in body.items() if v is not None})
        return SearchHistoryEntry.model_validate(data["search"])

    def list_history(self, user_id: Optional[str] = None) -> List[SearchHistoryWithFacility]:
        params = {"userId": user_id} if user_id else None
        data = self._request("GET", "/api/search-history", params=params)
        return [SearchHistoryWithFacility.model_validate(h) for h in data.get("history", [])]

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            res = requests.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise UpstreamError(f"{method} {path} failed: {e}") from e

        try:
            data = res.json()
        except ValueError:
            data = {}

        if not res.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise UpstreamError(f"{method} {path} returned {res.status_code}", public_message=message or GENERIC_SEARCH_ERROR)
        return data
