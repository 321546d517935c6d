"""
Global exception handlers.

* ``UserServiceError`` subclasses are rendered with their own status and
  body (``{"error": ...}`` or the structured validation failure).
* ``RequestValidationError`` (malformed JSON, bad path or query values)
  uses the same ``{"status": "failed", "errors": [...]}`` shape.
* Anything else becomes a 500 without internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import UserServiceError
from ..services.validation import map_errors

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        errors = map_errors(exc.errors())
        logger.warning("Invalid request on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": "failed", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
