"""
Database manager for FlickFinder.

Runs the bounded read-only queries behind every endpoint:
- Connection management with a pooled SQLAlchemy engine
- Movie, person, cast and rating lookups
- Translation of driver failures into StoreError

All numeric bounds are bound parameters and are clamped before use.
"""

from typing import List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .config import Config
from .exceptions import StoreError
from .filters import QueryVariant, clamp_limit, clamp_min_votes
from .models import Movie, MovieRating, Person
from .utils import setup_logger


class DatabaseManager:
    """
    Handles all store access.

    Responsibilities:
    - Connection pooling (one connection checked out per query)
    - The predefined bounded queries
    - Failure translation (SQLAlchemyError -> StoreError), never retried
    """

    TABLES = ["movies", "people", "stars", "ratings"]

    def __init__(self, config: Config, engine: Optional[Engine] = None):
        self.config = config
        self.engine = engine if engine is not None else self._create_engine()
        self.logger = setup_logger(__name__, config.log_dir)

    def _create_engine(self) -> Engine:
        """Create SQLAlchemy engine with connection pooling."""
        url = self.config.database_url
        if self.config.is_sqlite:
            if url in ("sqlite://", "sqlite:///:memory:"):
                # A single shared connection, otherwise every checkout is a new empty db
                return create_engine(
                    url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            return create_engine(url, connect_args={"check_same_thread": False})

        return create_engine(
            url,
            pool_size=self.config.pool_size,
            max_overflow=self.config.max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    def _execute(self, operation: str, query: str, params: Optional[dict] = None) -> list:
        """Execute a read query and return its rows as mappings."""
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(query), params or {})
                return list(result.mappings().fetchall())
        except SQLAlchemyError as e:
            self.logger.error(f"Store error during {operation}: {e}", exc_info=True)
            raise StoreError(operation) from e

    def dispose(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()

    # ============ MOVIES ============

    def get_movies(self, limit: Optional[int] = None) -> List[Movie]:
        """Get movies ordered by id, at most ``limit`` of them."""
        rows = self._execute(
            "get_movies",
            "SELECT id, title, year FROM movies ORDER BY id LIMIT :limit",
            {"limit": clamp_limit(limit, self.config.default_limit)},
        )
        return [Movie.from_row(row) for row in rows]

    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """Get a single movie, or None if no movie has this id."""
        rows = self._execute(
            "get_movie",
            "SELECT id, title, year FROM movies WHERE id = :id",
            {"id": movie_id},
        )
        return Movie.from_row(rows[0]) if rows else None

    def get_stars_by_movie_id(self, movie_id: int) -> List[Person]:
        """Get the people starring in a movie."""
        rows = self._execute(
            "get_stars_by_movie_id",
            """
                SELECT p.id, p.name, p.birth
                FROM people p
                INNER JOIN stars s ON p.id = s.person_id
                WHERE s.movie_id = :movie_id
                ORDER BY p.id
            """,
            {"movie_id": movie_id},
        )
        return [Person.from_row(row) for row in rows]

    def get_ratings_by_year(
        self,
        year: int,
        limit: Optional[int] = None,
        min_votes: Optional[int] = None,
        variant: QueryVariant = QueryVariant.base,
    ) -> List[MovieRating]:
        """
        Get rated movies released in ``year``, best rated first.

        Args:
            year: Release year
            limit: Maximum number of rows (clamped, default from config)
            min_votes: Minimum vote count, inclusive (clamped, default from config)
            variant: Which filters the request supplied; logged with the bounds

        Returns:
            List of MovieRating sorted by rating descending, ties by id
        """
        limit = clamp_limit(limit, self.config.default_limit)
        min_votes = clamp_min_votes(min_votes, self.config.default_min_votes)
        self.logger.debug(
            f"Ratings query ({variant.value}): year={year} limit={limit} min_votes={min_votes}"
        )
        rows = self._execute(
            "get_ratings_by_year",
            """
                SELECT m.id, m.title, m.year, r.rating, r.votes
                FROM movies m
                INNER JOIN ratings r ON m.id = r.movie_id
                WHERE m.year = :year
                  AND r.votes >= :min_votes
                ORDER BY r.rating DESC, m.id ASC
                LIMIT :limit
            """,
            {
                "year": year,
                "limit": limit,
                "min_votes": min_votes,
            },
        )
        return [MovieRating.from_row(row) for row in rows]

    # ============ PEOPLE ============

    def get_people(self, limit: Optional[int] = None) -> List[Person]:
        """Get people ordered by id, at most ``limit`` of them."""
        rows = self._execute(
            "get_people",
            "SELECT id, name, birth FROM people ORDER BY id LIMIT :limit",
            {"limit": clamp_limit(limit, self.config.default_limit)},
        )
        return [Person.from_row(row) for row in rows]

    def get_person(self, person_id: int) -> Optional[Person]:
        """Get a single person, or None if no person has this id."""
        rows = self._execute(
            "get_person",
            "SELECT id, name, birth FROM people WHERE id = :id",
            {"id": person_id},
        )
        return Person.from_row(rows[0]) if rows else None

    def get_movies_by_person_id(self, person_id: int) -> List[Movie]:
        """Get the movies a person starred in."""
        rows = self._execute(
            "get_movies_by_person_id",
            """
                SELECT m.id, m.title, m.year
                FROM movies m
                INNER JOIN stars s ON m.id = s.movie_id
                WHERE s.person_id = :person_id
                ORDER BY m.id
            """,
            {"person_id": person_id},
        )
        return [Movie.from_row(row) for row in rows]

    # ============ STATUS ============

    def get_status(self) -> dict:
        """Get row counts for every table."""
        status = {}
        for table in self.TABLES:
            # Table names come from the fixed TABLES list
            rows = self._execute("get_status", f"SELECT COUNT(*) AS cnt FROM {table}")
            status[table] = rows[0]["cnt"]
        return status
