# healthfinder/models/responses.py
from typing import List

from .facility import CamelModel, Facility


class FacilitySearchResponse(CamelModel):
    facilities: List[Facility]


class ErrorResponse(CamelModel):
    error: str
