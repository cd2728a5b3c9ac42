"""
Person-related Pydantic schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonOut(BaseModel):
    """A person as returned by the list and detail endpoints."""

    id: int = Field(..., ge=1)
    name: str
    birth: Optional[int] = Field(None, description="Birth year")
