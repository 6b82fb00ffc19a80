import logging
from typing import Any, Dict, List, Optional

import requests

from healthfinder.errors import ConfigurationError, UpstreamError
from healthfinder.models.facility import FacilityCreate
from healthfinder.utils.geocode import distance_miles, format_distance, resolve_location
from healthfinder.utils.settings import get_places_api_key, get_places_timeout, get_search_radius
from .base_tool import BaseLookupTool, MAX_RESULTS, infer_category

logger = logging.getLogger(__name__)

SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"
DETAIL_FIELDS = "place_id,name,formatted_address,formatted_phone_number,opening_hours,rating,types,geometry"

# Statuses that mean "answered": anything else is a provider failure.
OK_STATUSES = ("OK", "ZERO_RESULTS")
# A place that disappeared between text search and details; the result is skipped.
DETAILS_SKIP_STATUSES = ("NOT_FOUND", "ZERO_RESULTS")

# Facility type -> Places API `type` filter.
PLACE_TYPE_FILTERS = {"hospital": "hospital", "pharmacy": "pharmacy", "clinic": "doctor"}


class GooglePlacesTool(BaseLookupTool):
    """
    Tool for finding healthcare facilities with the Google Places API.
    Runs a text search, then fetches details for each result.
    Input: {"query": str, "location": str (optional, "lat,lng" or free text), "type": hospital|pharmacy|clinic (optional)}
    Output: up to 10 FacilityCreate records.
    """

    name = "google"

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None, radius: Optional[int] = None):
        self.api_key = api_key if api_key is not None else get_places_api_key()
        self.timeout = timeout if timeout is not None else get_places_timeout()
        self.radius = radius if radius is not None else get_search_radius()

    def search(self, query: str, location: Optional[str] = None, place_type: Optional[str] = None) -> List[FacilityCreate]:
        if not self.api_key:
            raise ConfigurationError("Missing GOOGLE_PLACES_API_KEY")

        origin = self._resolve_origin(location)

        search_params = {"query": query, "key": self.api_key}
        if origin:
            search_params["location"] = f"{origin[0]},{origin[1]}"
            search_params["radius"] = self.radius
        if place_type:
            search_params["type"] = PLACE_TYPE_FILTERS[place_type]

        data = self._get(SEARCH_URL, search_params)

        facilities = []
        for result in data.get("results", [])[:MAX_RESULTS]:
            place_id = result.get("place_id")
            if not place_id:
                continue
            details = self._get_details(place_id)
            if details is None:
                continue
            facilities.append(self._to_facility(place_id, {**result, **details}, origin))

        logger.info("[PLACES] %d facilities for %r", len(facilities), query)
        return facilities

    def _resolve_origin(self, location: Optional[str]) -> Optional[tuple]:
        try:
            return resolve_location(location)
        except (requests.RequestException, ValueError) as e:
            logger.warning("[PLACES] Could not resolve location %r: %s", location, e)
            raise UpstreamError(f"Geocoding failed for {location!r}: {e}") from e

    def _get_details(self, place_id: str) -> Optional[Dict[str, Any]]:
        details_params = {"place_id": place_id, "fields": DETAIL_FIELDS, "key": self.api_key}
        data = self._get(DETAILS_URL, details_params, ok_statuses=("OK",) + DETAILS_SKIP_STATUSES)
        if data.get("status") in DETAILS_SKIP_STATUSES:
            logger.warning("[PLACES] Skipping %s: details status %s", place_id, data.get("status"))
            return None
        return data.get("result", {})

    def _get(self, url: str, params: Dict[str, Any], ok_statuses: tuple = OK_STATUSES) -> Dict[str, Any]:
        try:
            res = requests.get(url, params=params, timeout=self.timeout)
            res.raise_for_status()
            data = res.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("[PLACES] Request to %s failed: %s", url, e)
            raise UpstreamError(f"Places request failed: {e}") from e

        status = data.get("status")
        if status not in ok_statuses:
            logger.error("[PLACES] Places API error: %s %s", status, data.get("error_message", ""))
            raise UpstreamError(f"Places API status {status}")
        return data

    def _to_facility(self, place_id: str, place: Dict[str, Any], origin: Optional[tuple]) -> FacilityCreate:
        location = place.get("geometry", {}).get("location", {})
        lat, lng = location.get("lat"), location.get("lng")

        weekday_text = place.get("opening_hours", {}).get("weekday_text")
        hours = "; ".join(weekday_text) if weekday_text else None

        distance = None
        if origin and lat is not None and lng is not None:
            distance = format_distance(distance_miles(origin, lat, lng))

        rating = place.get("rating")
        return FacilityCreate(
            place_id=place_id,
            name=place.get("name", "Unnamed Facility"),
            type=infer_category(place.get("types")),
            address=place.get("formatted_address", "Unknown address"),
            phone=place.get("formatted_phone_number"),
            hours=hours,
            rating=str(rating) if rating is not None else None,
            distance=distance,
            latitude=str(lat) if lat is not None else None,
            longitude=str(lng) if lng is not None else None,
        )
