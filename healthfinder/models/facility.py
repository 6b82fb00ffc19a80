# healthfinder/models/facility.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

FacilityType = Literal["hospital", "pharmacy", "clinic"]
FACILITY_TYPES = ("hospital", "pharmacy", "clinic")


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FacilityCreate(CamelModel):
    place_id: str
    name: str
    type: FacilityType
    address: str
    phone: Optional[str] = None
    hours: Optional[str] = None
    rating: Optional[str] = None
    distance: Optional[str] = None  # e.g. "0.8 miles"
    latitude: Optional[str] = None
    longitude: Optional[str] = None


class Facility(FacilityCreate):
    id: str
    created_at: datetime
