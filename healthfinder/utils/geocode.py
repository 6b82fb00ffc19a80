# healthfinder/utils/geocode.py

import math
import re

import requests

from healthfinder.utils.settings import get_places_timeout

GEOCODE_URL = "https://nominatim.openstreetmap.org/search"
EARTH_RADIUS_MILES = 3958.8

_LAT_LNG_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")


def parse_lat_lng(location: str) -> tuple | None:
    """Return (lat, lon) for a "lat,lng" string, None for anything else."""
    match = _LAT_LNG_RE.match(location or "")
    if not match:
        return None
    lat, lon = float(match.group(1)), float(match.group(2))
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return None
    return lat, lon


def geocode_address(address: str) -> dict:
    params = {"q": address, "format": "json", "limit": 1}
    headers = {"User-Agent": "healthfinder/1.0"}

    response = requests.get(GEOCODE_URL, params=params, headers=headers, timeout=get_places_timeout())
    response.raise_for_status()

    results = response.json()
    if not results:
        raise ValueError(f"Could not geocode address: {address}")

    return {
        "lat": float(results[0]["lat"]),
        "lon": float(results[0]["lon"]),
    }


def resolve_location(location: str | None) -> tuple | None:
    """Coordinates for an optional search location: parsed if already "lat,lng", geocoded otherwise."""
    if not location or not location.strip():
        return None
    coords = parse_lat_lng(location)
    if coords:
        return coords
    result = geocode_address(location.strip())
    return result["lat"], result["lon"]


def distance_miles(origin: tuple, lat: float, lon: float) -> float:
    """Great-circle distance between origin (lat, lon) and a point."""
    lat1, lon1 = map(math.radians, origin)
    lat2, lon2 = math.radians(lat), math.radians(lon)
    a = math.sin((lat2 - lat1) / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(a))


def format_distance(miles: float) -> str:
    return f"{miles:.1f} miles"
