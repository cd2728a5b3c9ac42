"""Pydantic schemas for API responses."""

from api.schemas.common import DATABASE_ERROR, HealthResponse, text_error
from api.schemas.movie import MovieOut, MovieRatingOut
from api.schemas.person import PersonOut

__all__ = [
    # Common
    "DATABASE_ERROR",
    "HealthResponse",
    "text_error",
    # Movie
    "MovieOut",
    "MovieRatingOut",
    # Person
    "PersonOut",
]
