# healthfinder/models/search_history.py
from datetime import datetime
from typing import List, Optional

from .facility import CamelModel, Facility


class SearchHistoryCreate(CamelModel):
    user_id: Optional[str] = None
    facility_id: Optional[str] = None
    search_query: str


class SearchHistoryEntry(SearchHistoryCreate):
    id: str
    created_at: datetime


class SearchHistoryWithFacility(SearchHistoryEntry):
    facility: Optional[Facility] = None


class SearchHistoryList(CamelModel):
    history: List[SearchHistoryWithFacility]


class SearchHistorySaved(CamelModel):
    search: SearchHistoryEntry
