"""
Payload validation for user requests.

``validate_user`` and ``validate_user_update`` run the pydantic schemas
in collect-all mode: every violated constraint is reported as a
``{"message", "path"}`` pair instead of stopping at the first one.
Nothing here touches storage.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..schemas.user import UserCreate, UserUpdate


ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ValidationResult:
    """Outcome of a validation: either ``value`` or a non-empty ``errors`` list."""

    value: Optional[BaseModel] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def map_errors(details: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce pydantic error details to ``{"message", "path"}`` pairs."""
    return [{"message": item["msg"], "path": list(item["loc"])} for item in details]


def _validate(schema: Type[ModelT], payload: Any) -> ValidationResult:
    try:
        value = schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=map_errors(exc.errors()))
    return ValidationResult(value=value)


def validate_user(payload: Any) -> ValidationResult:
    """Validate a full user payload for creation."""
    return _validate(UserCreate, payload)


def validate_user_update(payload: Any) -> ValidationResult:
    """Validate a partial user payload for an update."""
    return _validate(UserUpdate, payload)
