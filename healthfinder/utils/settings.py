# healthfinder/utils/settings.py
import os

from dotenv import load_dotenv

# Local settings file (.env) first; real environment variables win.
load_dotenv()

FACILITY_SOURCES = ("google", "catalog")
DEFAULT_API_URL = "http://localhost:8000"


def get_facility_source() -> str:
    return os.getenv("FACILITY_SOURCE", "google").strip().lower()


def get_places_api_key() -> str | None:
    return os.getenv("GOOGLE_PLACES_API_KEY") or None


def get_places_timeout() -> float:
    return float(os.getenv("PLACES_TIMEOUT_SECONDS", "10"))


def get_search_radius() -> int:
    """Search radius in meters around a known location."""
    return int(os.getenv("PLACES_SEARCH_RADIUS", "5000"))


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_url() -> str:
    return os.getenv("HEALTHFINDER_API_URL", DEFAULT_API_URL).rstrip("/")
