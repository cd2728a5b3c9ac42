"""
Shared fixtures for FlickFinder tests.

Provides in-memory SQLite stores (seeded, empty, and without tables),
a recording store for asserting on store access, and an API test client.
"""

import pytest
from typing import List, Tuple
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from flickfinder.config import Config
from flickfinder.database import DatabaseManager
from flickfinder.models import Movie, MovieRating, Person
from flickfinder.seed import create_tables, seed_reference_data


# =============================================================================
# SAMPLE DATA
# =============================================================================

SHAWSHANK = Movie(id=1, title="The Shawshank Redemption", year=1994)
DARK_KNIGHT_RATING = MovieRating(
    id=4, title="The Dark Knight", year=2008, rating=8.8, votes=2000000
)
TIM_ROBBINS = Person(id=1, name="Tim Robbins", birth_year=1958)


def make_config(tmp_path, **overrides) -> Config:
    """Config pointing at a private in-memory database."""
    values = {"database_url": "sqlite://", "log_dir": tmp_path / "logs"}
    values.update(overrides)
    return Config(**values)


# =============================================================================
# RECORDING STORE
# =============================================================================

class RecordingDatabase:
    """DatabaseManager stand-in that records every query it is asked for."""

    def __init__(self, movies: List[Movie] = None, people: List[Person] = None):
        self.calls: List[Tuple[str, tuple]] = []
        self.variants = []
        self.movies = movies if movies is not None else [SHAWSHANK]
        self.people = people if people is not None else [TIM_ROBBINS]

    def _record(self, name: str, *args):
        self.calls.append((name, args))

    def get_movies(self, limit=None):
        self._record("get_movies", limit)
        return self.movies[:limit]

    def get_movie(self, movie_id):
        self._record("get_movie", movie_id)
        return next((m for m in self.movies if m.id == movie_id), None)

    def get_stars_by_movie_id(self, movie_id):
        self._record("get_stars_by_movie_id", movie_id)
        return []

    def get_ratings_by_year(self, year, limit=None, min_votes=None, variant=None):
        self._record("get_ratings_by_year", year, limit, min_votes)
        self.variants.append(variant)
        return []

    def get_people(self, limit=None):
        self._record("get_people", limit)
        return self.people[:limit]

    def get_person(self, person_id):
        self._record("get_person", person_id)
        return next((p for p in self.people if p.id == person_id), None)

    def get_movies_by_person_id(self, person_id):
        self._record("get_movies_by_person_id", person_id)
        return []


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config(tmp_path):
    """Provide a test configuration."""
    return make_config(tmp_path)


@pytest.fixture
def bare_db(config):
    """In-memory store with no tables at all."""
    db = DatabaseManager(config)
    yield db
    db.dispose()


@pytest.fixture
def empty_db(bare_db):
    """In-memory store with tables but no rows."""
    create_tables(bare_db.engine)
    return bare_db


@pytest.fixture
def seeded_db(config):
    """In-memory store loaded with the reference dataset."""
    db = DatabaseManager(config)
    seed_reference_data(db.engine)
    yield db
    db.dispose()


@pytest.fixture
def recording_db():
    """Provide a recording store."""
    return RecordingDatabase()


@pytest.fixture
def failing_db(config):
    """Store whose every query raises the store's own failure."""
    from flickfinder.exceptions import StoreError

    db = MagicMock(spec=DatabaseManager)
    for name in (
        "get_movies",
        "get_movie",
        "get_stars_by_movie_id",
        "get_ratings_by_year",
        "get_people",
        "get_person",
        "get_movies_by_person_id",
    ):
        getattr(db, name).side_effect = StoreError(name)
    return db


def _client_for(config, db):
    from api.main import create_app

    app = create_app(config=config, db=db)
    return TestClient(app)


@pytest.fixture
def api_client(config, seeded_db):
    """Provide FastAPI test client over the seeded store."""
    with _client_for(config, seeded_db) as client:
        yield client


@pytest.fixture
def empty_api_client(config, empty_db):
    """Provide FastAPI test client over a store with no rows."""
    with _client_for(config, empty_db) as client:
        yield client


@pytest.fixture
def failing_api_client(config, failing_db):
    """Provide FastAPI test client whose store always fails."""
    with _client_for(config, failing_db) as client:
        yield client


@pytest.fixture
def recording_api_client(config, recording_db):
    """Provide FastAPI test client over a recording store."""
    with _client_for(config, recording_db) as client:
        yield client
