from typing import Any, Dict, List, Optional

from healthfinder.errors import InvalidInputError
from healthfinder.models.facility import FACILITY_TYPES, FacilityCreate

MAX_RESULTS = 10

# Provider type tags checked in priority order; anything unmatched is a clinic.
CATEGORY_TAGS = (
    ("hospital", ("hospital",)),
    ("pharmacy", ("pharmacy", "drugstore")),
    ("clinic", ("doctor", "health", "dentist", "physiotherapist", "clinic")),
)


def infer_category(types: Optional[List[str]]) -> str:
    """Map provider type tags to hospital/pharmacy/clinic with priority hospital > pharmacy > clinic."""
    tags = {t.lower() for t in types or []}
    for category, names in CATEGORY_TAGS:
        if tags & set(names):
            return category
    return "clinic"


class BaseLookupTool:
    """
    Base class for facility lookup tools.
    A tool turns a free-text query (plus optional location and facility type) into normalized FacilityCreate records.
    Errors are raised, not returned, so callers can map them to HTTP responses.
    """

    name = "base"

    def __call__(self, input_data: Dict[str, Any]) -> List[FacilityCreate]:
        self.validate_input(input_data)
        return self.search(input_data["query"].strip(), input_data.get("location"), input_data.get("type"))

    def validate_input(self, input_data: Dict[str, Any]) -> None:
        """Raise InvalidInputError when the query is missing or blank, or the type filter is unknown."""
        query = input_data.get("query")
        if not query or not isinstance(query, str) or not query.strip():
            raise InvalidInputError("Missing required field: query")
        place_type = input_data.get("type")
        if place_type is not None and place_type not in FACILITY_TYPES:
            raise InvalidInputError(
                f"Unknown facility type: {place_type!r}",
                public_message=f"Facility type must be one of: {', '.join(FACILITY_TYPES)}",
            )

    def search(self, query: str, location: Optional[str] = None, place_type: Optional[str] = None) -> List[FacilityCreate]:
        raise NotImplementedError("Lookup tool must implement search(query, location, place_type).")
