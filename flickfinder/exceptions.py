"""
Error taxonomy for the query core.

The HTTP layer maps these onto status codes (see ``api.exceptions``).
"""

from typing import Optional


class FlickFinderError(Exception):
    """Base class for errors raised by the query core."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(FlickFinderError):
    """A required path parameter is malformed or out of range."""

    def __init__(self, message: str, parameter: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message)


class NotFoundError(FlickFinderError):
    """A well-formed request matched zero rows."""


class StoreError(FlickFinderError):
    """The underlying data store failed. Never retried."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Store operation failed: {operation}")
