# healthfinder/data/store.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from passlib.context import CryptContext

from healthfinder.errors import FacilityNotFoundError, UserExistsError
from healthfinder.models.facility import Facility, FacilityCreate
from healthfinder.models.search_history import SearchHistoryCreate, SearchHistoryEntry
from healthfinder.models.user import User, UserCreate

logger = logging.getLogger(__name__)

HISTORY_PAGE_SIZE = 10

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class MemoryStore:
    """
    In-memory keyed maps for users, facilities and search history.

    Every method is synchronous and never awaits, so on a single event loop each call runs
    to completion before another request can touch the maps.
    """

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.facilities: Dict[str, Facility] = {}
        self.search_history: Dict[str, SearchHistoryEntry] = {}
        # placeId -> facility id
        self._place_index: Dict[str, str] = {}
        # history id -> insertion sequence, breaks created_at ties
        self._history_seq: Dict[str, int] = {}

    # --- users ---

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, data: UserCreate) -> User:
        if self.get_user_by_username(data.username) is not None:
            raise UserExistsError(f"Username already exists: {data.username}")
        user = User(id=str(uuid.uuid4()), username=data.username, password=pwd_context.hash(data.password))
        self.users[user.id] = user
        return user

    def verify_user_password(self, user: User, password: str) -> bool:
        return pwd_context.verify(password, user.password)

    # --- facilities ---

    def get_facility(self, facility_id: str) -> Optional[Facility]:
        return self.facilities.get(facility_id)

    def get_facility_by_place_id(self, place_id: str) -> Optional[Facility]:
        facility_id = self._place_index.get(place_id)
        return self.facilities.get(facility_id) if facility_id else None

    def create_facility(self, data: FacilityCreate) -> Facility:
        facility = Facility(
            **data.model_dump(),
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        self.facilities[facility.id] = facility
        self._place_index[facility.place_id] = facility.id
        return facility

    def upsert_facility(self, data: FacilityCreate) -> Facility:
        """Insert if the place id is new, otherwise return the stored record unchanged."""
        existing = self.get_facility_by_place_id(data.place_id)
        if existing is not None:
            logger.debug("[STORE] Facility %s already stored as %s", data.place_id, existing.id)
            return existing
        return self.create_facility(data)

    def update_facility(self, facility_id: str, updates: dict) -> Facility:
        existing = self.facilities.get(facility_id)
        if existing is None:
            raise FacilityNotFoundError(f"Facility not found: {facility_id}")
        updates = {k: v for k, v in updates.items() if k not in ("id", "created_at")}
        updated = existing.model_copy(update=updates)
        if updated.place_id != existing.place_id:
            self._place_index.pop(existing.place_id, None)
            self._place_index[updated.place_id] = facility_id
        self.facilities[facility_id] = updated
        return updated

    def facility_count(self) -> int:
        return len(self.facilities)

    # --- search history ---

    def get_search_history(self, user_id: Optional[str] = None, limit: int = HISTORY_PAGE_SIZE) -> List[SearchHistoryEntry]:
        entries = [e for e in self.search_history.values() if not user_id or e.user_id == user_id]
        entries.sort(key=lambda e: (e.created_at, self._history_seq[e.id]), reverse=True)
        return entries[:limit]

    def create_search_history(self, data: SearchHistoryCreate) -> SearchHistoryEntry:
        entry = SearchHistoryEntry(
            **data.model_dump(),
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        self.search_history[entry.id] = entry
        self._history_seq[entry.id] = len(self._history_seq)
        return entry
