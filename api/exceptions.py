"""
Custom exceptions and error handlers for the API.

Error responses are plain-text messages, not structured objects.
"""

from fastapi import HTTPException, Request
from fastapi.responses import PlainTextResponse

from api.logging_config import logger
from flickfinder.exceptions import (
    FlickFinderError,
    NotFoundError as CoreNotFoundError,
    StoreError,
    ValidationError as CoreValidationError,
)


class APIError(HTTPException):
    """Base API error rendered as a plain-text body."""

    def __init__(self, status_code: int, message: str):
        self.message = message
        super().__init__(status_code=status_code, detail=message)


class BadRequestError(APIError):
    """Malformed path parameter."""

    def __init__(self, message: str):
        super().__init__(status_code=400, message=message)


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(self, message: str):
        super().__init__(status_code=404, message=message)


class DatabaseError(APIError):
    """Database connection/operation error."""

    def __init__(self, message: str = "Database error"):
        super().__init__(status_code=500, message=message)


def to_api_error(exc: FlickFinderError) -> APIError:
    """Map a core error onto its HTTP counterpart."""
    if isinstance(exc, CoreValidationError):
        return BadRequestError(exc.message)
    if isinstance(exc, CoreNotFoundError):
        return NotFoundError(exc.message)
    # StoreError and anything unforeseen: no internal detail in the body
    return DatabaseError()


async def api_error_handler(request: Request, exc: APIError) -> PlainTextResponse:
    """Handle APIError exceptions and return a plain-text response."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def core_error_handler(request: Request, exc: FlickFinderError) -> PlainTextResponse:
    """Handle errors raised by the query core."""
    if isinstance(exc, StoreError):
        logger.error(f"Store failure on {request.url.path}: {exc.operation}")
    return await api_error_handler(request, to_api_error(exc))


async def generic_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled error on {request.url.path}: {exc!r}")
    return PlainTextResponse("Internal server error", status_code=500)
