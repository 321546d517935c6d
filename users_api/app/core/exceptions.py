"""
Domain exceptions raised by the service layer.

Each exception knows the HTTP status it maps to; the global handlers
in ``api.error_handlers`` turn them into JSON responses so endpoints
never have to catch them.
"""

from typing import Any, Dict, List


class UserServiceError(Exception):
    """Base class for errors reported back to API clients."""

    http_status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message}


class UserNotFoundError(UserServiceError):
    """Raised when an id is unknown or belongs to a deleted user."""

    http_status = 404

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found.")
        self.user_id = user_id


class DuplicateUserError(UserServiceError):
    """Raised when a login is already taken by a visible user."""

    http_status = 409

    def __init__(self, login: str) -> None:
        super().__init__("User already exist")
        self.login = login


class UserValidationError(UserServiceError):
    """Raised when a payload violates one or more schema constraints.

    ``errors`` holds every violation as ``{"message", "path"}`` pairs.
    """

    http_status = 400

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__("Validation failed")
        self.errors = errors

    def to_response(self) -> Dict[str, Any]:
        return {"status": "failed", "errors": self.errors}
