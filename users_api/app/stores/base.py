"""
Storage interface for user records.

A ``UserStore`` owns the user table and implements lookup and mutation
on it.  Deleted users are never removed: ``soft_delete`` only raises the
``is_deleted`` flag, and every read method skips flagged records.

Stores do no locking of their own.  The in-memory store relies on the
single event loop serving requests; SQLite serializes writes itself.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Optional

from ..schemas.user import UserRecord


# Demo users loaded when ``SEED_USERS`` is enabled.
DEMO_USERS: List[UserRecord] = [
    UserRecord(id="403357.1108310962", login="Asteriks", age=90, password="g4G"),
    UserRecord(id="403353.9108310968", login="Varmid", age=9, password="g4G"),
    UserRecord(id="8687296.470471686", login="Olaf", age=9, password="g4G"),
    UserRecord(id="8489232.1256684", login="Hold", age=9, password="g4G"),
    UserRecord(id="912165.7183257148", login="Tor", age=9, password="g4G"),
    UserRecord(id="5938013.000591949", login="Goro", age=9, password="g4G"),
    UserRecord(id="2758694.634640233", login="Valhen", age=9, password="g4G"),
    UserRecord(id="4539556.105923821", login="Valder", age=9, password="g4G"),
    UserRecord(id="2336200.519486169", login="Varmin", age=9, password="g4G"),
]


# Fields a caller may change through ``update``; ``id`` and ``is_deleted``
# are owned by the store.
UPDATABLE_FIELDS = ("login", "age", "password")


class UserStore(ABC):
    """Abstract user table."""

    @abstractmethod
    def contains(self, user_id: str) -> bool:
        """Return True if a record with this id exists, deleted or not."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[UserRecord]:
        """Return the visible record with this id, or None."""

    @abstractmethod
    def list(self) -> List[UserRecord]:
        """Return all visible records in insertion order."""

    @abstractmethod
    def find_by_login(self, login: str) -> Optional[UserRecord]:
        """Return the visible record with exactly this login, or None."""

    @abstractmethod
    def list_by_login_substring(self, fragment: str, limit: Optional[int] = None) -> List[UserRecord]:
        """Return visible records whose login contains ``fragment``.

        Matching is case sensitive.  Results are sorted by login and cut
        to the first ``limit`` entries when ``limit`` is given.
        """

    @abstractmethod
    def insert(self, record: UserRecord) -> None:
        """Store a new record as is."""

    @abstractmethod
    def update(self, user_id: str, fields: Mapping[str, Any]) -> Optional[UserRecord]:
        """Merge ``fields`` into a visible record and return the result."""

    @abstractmethod
    def soft_delete(self, user_id: str) -> Optional[UserRecord]:
        """Flag a visible record as deleted.

        Returns the record as it was before deletion, or None when the
        id is unknown or already deleted.
        """

    def create(self, data: Mapping[str, Any]) -> UserRecord:
        """Assign a fresh id, store the record and return it."""
        record = UserRecord(id=str(uuid.uuid4()), is_deleted=False, **data)
        self.insert(record)
        return record

    def seed(self, records: Iterable[UserRecord] = DEMO_USERS) -> int:
        """Insert records whose ids are not present yet; return how many were added."""
        added = 0
        for record in records:
            if not self.contains(record.id):
                self.insert(record.model_copy())
                added += 1
        return added
