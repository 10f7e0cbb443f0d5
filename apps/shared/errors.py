"""
Secure Error Handling

Domain error taxonomy plus the exception handlers that translate it into
`{"error": "..."}` JSON responses without leaking internal details.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto a client-facing status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Request failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed field in a request payload."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class Unauthorized(AppError):
    """Missing, invalid or expired session, or a bad reset key."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidCredentials(Unauthorized):
    """Login failure. Unknown email and wrong password are indistinguishable."""

    default_message = "Invalid credentials"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class AlreadyExists(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"


class InternalError(AppError):
    """Persistence or runtime failure. The cause is logged, never returned."""

    default_message = "An unexpected server error occurred. Please try again later."


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "GET /api/projects")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Generate unique error ID for correlation
    error_id = str(uuid.uuid4())[:8]

    # Log full error server-side
    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error
    )

    # Return sanitized message for client
    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


def error_response(message: str, status_code: int) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # Drop the "body"/"query"/"path" prefix, keep the field path
        loc = [str(p) for p in err.get("loc", ())[1:]]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else err.get("msg", "Invalid request"))
    return "; ".join(parts) or "Invalid request."


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers mapping every failure onto `{"error": ...}`."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, InternalError):
            message, _ = log_and_sanitize_error(
                exc, f"{request.method} {request.url.path}", exc.message
            )
            return error_response(message, exc.status_code)
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(
            _describe_validation_error(exc),
            status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        detail = exc.detail
        message = (
            detail.get("message") if isinstance(detail, dict) else str(detail)
        ) or "Request failed."
        return error_response(message, exc.status_code)

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        message, _ = log_and_sanitize_error(
            exc,
            f"{request.method} {request.url.path}",
            "A database error occurred while processing the request.",
        )
        return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        message, _ = log_and_sanitize_error(
            exc,
            f"{request.method} {request.url.path}",
            InternalError.default_message,
        )
        return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
