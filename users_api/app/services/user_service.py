"""
Business logic for users.

``UserService`` wraps a ``UserStore`` and enforces the rules the store
itself does not know about: logins are unique among visible users,
missing records are reported as ``UserNotFoundError`` and deletion is
always soft.  Passwords are stored and returned as given; this API has
no authentication layer.
"""

import logging
from typing import List, Optional

from ..core.exceptions import DuplicateUserError, UserNotFoundError
from ..schemas.user import UserCreate, UserRead, UserUpdate
from ..stores.base import UserStore


logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями поверх выбранного хранилища."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def get_user(self, user_id: str) -> UserRead:
        """Return the client view of a visible user."""
        user = self.store.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_client()

    async def list_users(self) -> List[UserRead]:
        """Return all visible users; an empty list means the table is empty."""
        return [user.to_client() for user in self.store.list()]

    async def list_users_by_login(self, fragment: str, limit: Optional[int] = None) -> List[UserRead]:
        """Return users whose login contains ``fragment``, sorted by login."""
        users = self.store.list_by_login_substring(fragment, limit)
        return [user.to_client() for user in users]

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create a new user.

        Raises ``DuplicateUserError`` if the login belongs to a user
        that has not been deleted.
        """
        if self.store.find_by_login(data.login) is not None:
            raise DuplicateUserError(data.login)
        user = self.store.create(data.model_dump())
        logger.info("Created user %s (%s)", user.id, user.login)
        return user.to_client()

    async def update_user(self, user_id: str, data: UserUpdate) -> UserRead:
        """Merge the supplied fields into a visible user and return it."""
        if self.store.get(user_id) is None:
            raise UserNotFoundError(user_id)
        changes = data.changes()
        new_login = changes.get("login")
        if new_login is not None:
            holder = self.store.find_by_login(new_login)
            if holder is not None and holder.id != user_id:
                raise DuplicateUserError(new_login)
        user = self.store.update(user_id, changes)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Updated user %s: %s", user_id, sorted(changes))
        return user.to_client()

    async def delete_user(self, user_id: str) -> UserRead:
        """Soft-delete a user and return it as it was before deletion."""
        user = self.store.soft_delete(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Soft-deleted user %s (%s)", user_id, user.login)
        return user.to_client()
