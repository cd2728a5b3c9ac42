"""
Movie-related Pydantic schemas.
"""

from pydantic import BaseModel, Field


class MovieOut(BaseModel):
    """A movie as returned by the list and detail endpoints."""

    id: int = Field(..., ge=1)
    title: str
    year: int


class MovieRatingOut(MovieOut):
    """A movie with its rating, for the ratings-by-year endpoint."""

    rating: float = Field(..., ge=0, le=10)
    votes: int = Field(..., ge=0)
