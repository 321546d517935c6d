"""
SQLite-backed user store.

Each operation opens its own connection through ``core.db`` and closes
it before returning.  All queries use parameterized statements.  The
schema is created by ``init_db`` when the store is constructed.
"""

import logging
import sqlite3
from typing import Any, List, Mapping, Optional

from ..core.db import get_cursor, get_database_path, init_db
from ..schemas.user import UserRecord
from .base import UPDATABLE_FIELDS, UserStore


logger = logging.getLogger(__name__)

_COLUMNS = "id, login, age, password, is_deleted"


def _row_to_record(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        login=row["login"],
        age=row["age"],
        password=row["password"],
        is_deleted=bool(row["is_deleted"]),
    )


class SqliteUserStore(UserStore):
    """Persists users in the ``users`` table of an SQLite database."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.db_path = get_database_path(database_url)
        version = init_db(self.db_path)
        logger.info("Using SQLite user store at %s (schema version %s)", self.db_path, version)

    def contains(self, user_id: str) -> bool:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
        return row is not None

    def get(self, user_id: str) -> Optional[UserRecord]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE id = ? AND is_deleted = 0",
                (user_id,),
            ).fetchone()
        return _row_to_record(row) if row else None

    def list(self) -> List[UserRecord]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE is_deleted = 0 ORDER BY rowid"
            ).fetchall()
        return [_row_to_record(row) for row in rows]

    def find_by_login(self, login: str) -> Optional[UserRecord]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE login = ? AND is_deleted = 0",
                (login,),
            ).fetchone()
        return _row_to_record(row) if row else None

    def list_by_login_substring(self, fragment: str, limit: Optional[int] = None) -> List[UserRecord]:
        # instr() is case sensitive, unlike LIKE.  ORDER BY uses the
        # BINARY collation, i.e. code point order.
        sql = (
            f"SELECT {_COLUMNS} FROM users "
            "WHERE is_deleted = 0 AND instr(login, ?) > 0 ORDER BY login"
        )
        params: tuple = (fragment,)
        if limit is not None:
            sql += " LIMIT ?"
            params += (limit,)
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(sql, params).fetchall()
        return [_row_to_record(row) for row in rows]

    def insert(self, record: UserRecord) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT INTO users (id, login, age, password, is_deleted) VALUES (?, ?, ?, ?, ?)",
                (record.id, record.login, record.age, record.password, int(record.is_deleted)),
            )

    def update(self, user_id: str, fields: Mapping[str, Any]) -> Optional[UserRecord]:
        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        with get_cursor(self.db_path) as cursor:
            if changes:
                assignments = ", ".join(f"{key} = ?" for key in changes)
                cursor.execute(
                    f"UPDATE users SET {assignments}, updated_at = CURRENT_TIMESTAMP "
                    "WHERE id = ? AND is_deleted = 0",
                    (*changes.values(), user_id),
                )
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE id = ? AND is_deleted = 0",
                (user_id,),
            ).fetchone()
        return _row_to_record(row) if row else None

    def soft_delete(self, user_id: str) -> Optional[UserRecord]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE id = ? AND is_deleted = 0",
                (user_id,),
            ).fetchone()
            if row is None:
                return None
            cursor.execute(
                "UPDATE users SET is_deleted = 1, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (user_id,),
            )
        return _row_to_record(row)
