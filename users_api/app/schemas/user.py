"""
Pydantic models for user data.

Defines schemas for creating and updating users, the stored record and
the client view returned by the API.  The stored record carries the
``is_deleted`` flag; the client view never does.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


_PASSWORD_RULES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[0-9]"),
)


def check_password_strength(value: str) -> str:
    """Require at least one lowercase letter, one uppercase letter and one digit."""
    if not all(rule.search(value) for rule in _PASSWORD_RULES):
        raise ValueError(
            "password must contain a lowercase letter, an uppercase letter and a digit"
        )
    return value


def reject_bool_age(value: Any) -> Any:
    """JSON booleans are not ages, even though pydantic would coerce them to 0 or 1."""
    if isinstance(value, bool):
        raise ValueError("age must be an integer, not a boolean")
    return value


class UserCreate(BaseModel):
    """Schema for registering a user.

    Unknown fields are rejected, so clients cannot smuggle ``id`` or
    ``isDeleted`` into a new record.
    """

    login: str = Field(..., min_length=1, examples=["Neo"])
    age: int = Field(..., ge=0, examples=[30])
    password: str = Field(..., examples=["aB1"])

    model_config = {"extra": "forbid"}

    @field_validator("age", mode="before")
    @classmethod
    def validate_age(cls, v: Any) -> Any:
        return reject_bool_age(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_strength(v)


class UserUpdate(BaseModel):
    """Schema for a partial update.

    Every field is optional but the same constraints as in
    ``UserCreate`` apply to the fields that are present.
    """

    login: Optional[str] = Field(None, min_length=1)
    age: Optional[int] = Field(None, ge=0)
    password: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("age", mode="before")
    @classmethod
    def validate_age(cls, v: Any) -> Any:
        return reject_bool_age(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return check_password_strength(v)

    @model_validator(mode="after")
    def require_some_field(self) -> "UserUpdate":
        if not self.changes():
            raise ValueError("at least one of login, age or password is required")
        return self

    def changes(self) -> dict:
        """Fields the client actually sent; explicit nulls are ignored."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserRead(BaseModel):
    """Client view of a user."""

    id: str
    login: str
    age: int
    password: str

    model_config = {
        "from_attributes": True,
    }


class UserRecord(UserRead):
    """A stored user including the soft-deletion flag."""

    is_deleted: bool = False

    def to_client(self) -> UserRead:
        return UserRead(id=self.id, login=self.login, age=self.age, password=self.password)
