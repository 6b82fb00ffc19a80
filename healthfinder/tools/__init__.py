from typing import Optional

from healthfinder.errors import ConfigurationError
from healthfinder.utils.settings import FACILITY_SOURCES, get_facility_source
from .base_tool import BaseLookupTool
from .catalog_search import CatalogSearchTool
from .google_places import GooglePlacesTool


def build_lookup_tool(source: Optional[str] = None) -> BaseLookupTool:
    """Lookup tool for the configured FACILITY_SOURCE. There is no fallback between sources."""
    source = (source or get_facility_source()).lower()
    if source == "google":
        return GooglePlacesTool()
    if source == "catalog":
        return CatalogSearchTool()
    raise ConfigurationError(f"Unknown FACILITY_SOURCE {source!r}, expected one of {', '.join(FACILITY_SOURCES)}")
