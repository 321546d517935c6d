"""
User storage back ends.

``build_user_store`` picks the implementation named by
``settings.user_store`` and optionally loads the demo users.
"""

import logging
from typing import Optional

from ..core.config import Settings, settings as default_settings
from .base import DEMO_USERS, UserStore
from .memory import MemoryUserStore
from .sqlite import SqliteUserStore

__all__ = ["DEMO_USERS", "UserStore", "MemoryUserStore", "SqliteUserStore", "build_user_store"]


def build_user_store(settings: Optional[Settings] = None) -> UserStore:
    """Create the configured user store.

    Raises ``ValueError`` for an unknown ``user_store`` name.
    """
    settings = settings or default_settings
    kind = settings.user_store.lower()
    if kind == "memory":
        store: UserStore = MemoryUserStore()
    elif kind == "sqlite":
        store = SqliteUserStore(settings.database_url)
    else:
        raise ValueError(f"Unknown user store {settings.user_store!r}; expected 'memory' or 'sqlite'")

    if settings.seed_users:
        added = store.seed()
        logging.getLogger(__name__).info("Seeded %s demo users", added)
    return store
