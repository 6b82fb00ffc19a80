from typing import List, Optional

from healthfinder.data.catalog import FACILITY_CATALOG
from healthfinder.models.facility import FacilityCreate
from .base_tool import BaseLookupTool, MAX_RESULTS


class CatalogSearchTool(BaseLookupTool):
    """
    Case-insensitive substring search over the local facility catalog (name, type, address).
    Input: {"query": str, "location": str (ignored), "type": str (optional)}
    Output: up to 10 FacilityCreate records in catalog order.
    """

    name = "catalog"

    def __init__(self, catalog: Optional[List[dict]] = None):
        self.catalog = FACILITY_CATALOG if catalog is None else catalog

    def search(self, query: str, location: Optional[str] = None, place_type: Optional[str] = None) -> List[FacilityCreate]:
        term = query.lower()
        matches = [
            entry for entry in self.catalog
            if (place_type is None or entry["type"] == place_type)
            and any(term in entry[field].lower() for field in ("name", "type", "address"))
        ]
        return [FacilityCreate.model_validate(entry) for entry in matches[:MAX_RESULTS]]
