"""
Data models for FlickFinder.

Provides read-only dataclasses for the rows the service returns.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Movie:
    """A movie row."""

    id: int
    title: str
    year: int

    def to_dict(self) -> dict:
        """Convert to dictionary for the JSON response."""
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Movie":
        """Create Movie from a database row mapping."""
        return cls(
            id=row["id"],
            title=row["title"],
            year=row["year"],
        )


@dataclass(frozen=True)
class Person:
    """A person row (actor, director, etc.)."""

    id: int
    name: str
    birth_year: int

    def to_dict(self) -> dict:
        """Convert to dictionary for the JSON response."""
        return {
            "id": self.id,
            "name": self.name,
            "birth": self.birth_year,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Person":
        """Create Person from a database row mapping."""
        return cls(
            id=row["id"],
            name=row["name"],
            birth_year=row["birth"],
        )


@dataclass(frozen=True)
class MovieRating(Movie):
    """A movie together with its rating and vote count."""

    rating: float = 0.0
    votes: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for the JSON response."""
        return {
            "id": self.id,
            "title": self.title,
            "rating": self.rating,
            "votes": self.votes,
            "year": self.year,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "MovieRating":
        """Create MovieRating from a movies/ratings join row."""
        return cls(
            id=row["id"],
            title=row["title"],
            year=row["year"],
            rating=float(row["rating"]),
            votes=row["votes"],
        )
