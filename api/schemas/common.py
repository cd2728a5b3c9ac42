"""
Common schemas shared across API endpoints.
"""

from typing import Dict

from pydantic import BaseModel

TEXT_PLAIN = {"text/plain": {"schema": {"type": "string"}}}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


def text_error(description: str) -> Dict:
    """OpenAPI entry for a plain-text error response."""
    return {"description": description, "content": TEXT_PLAIN}


DATABASE_ERROR = {500: text_error("Database error")}
