"""In-memory user store backed by a dict owned by the store instance."""

from typing import Any, Dict, List, Mapping, Optional

from ..schemas.user import UserRecord
from .base import UPDATABLE_FIELDS, UserStore


class MemoryUserStore(UserStore):
    """Keeps users in a dict keyed by id.

    Records are copied on the way in and out so callers cannot mutate
    the table behind the store's back.
    """

    def __init__(self) -> None:
        self._users: Dict[str, UserRecord] = {}

    def contains(self, user_id: str) -> bool:
        return user_id in self._users

    def _visible(self, user_id: str) -> Optional[UserRecord]:
        user = self._users.get(user_id)
        if user is None or user.is_deleted:
            return None
        return user

    def get(self, user_id: str) -> Optional[UserRecord]:
        user = self._visible(user_id)
        return user.model_copy() if user else None

    def list(self) -> List[UserRecord]:
        return [u.model_copy() for u in self._users.values() if not u.is_deleted]

    def find_by_login(self, login: str) -> Optional[UserRecord]:
        for user in self._users.values():
            if not user.is_deleted and user.login == login:
                return user.model_copy()
        return None

    def list_by_login_substring(self, fragment: str, limit: Optional[int] = None) -> List[UserRecord]:
        matches = sorted(
            (u for u in self._users.values() if not u.is_deleted and fragment in u.login),
            key=lambda u: u.login,
        )
        if limit is not None:
            matches = matches[:limit]
        return [u.model_copy() for u in matches]

    def insert(self, record: UserRecord) -> None:
        if record.id in self._users:
            raise KeyError(f"User {record.id} already stored")
        self._users[record.id] = record.model_copy()

    def update(self, user_id: str, fields: Mapping[str, Any]) -> Optional[UserRecord]:
        user = self._visible(user_id)
        if user is None:
            return None
        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        updated = user.model_copy(update=changes)
        self._users[user_id] = updated
        return updated.model_copy()

    def soft_delete(self, user_id: str) -> Optional[UserRecord]:
        user = self._visible(user_id)
        if user is None:
            return None
        self._users[user_id] = user.model_copy(update={"is_deleted": True})
        return user.model_copy()
