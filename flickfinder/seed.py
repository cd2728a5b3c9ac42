"""
Schema creation and reference data loading.

The service itself never writes. This module is the loader used for local
development and by the test suite: it creates the four tables and inserts
a small reference dataset.
"""

from typing import Dict, List, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Engine

from .utils import setup_logger

logger = setup_logger(__name__)

SCHEMA = {
    "movies": """
        CREATE TABLE IF NOT EXISTS movies (
            id INTEGER PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            year INTEGER NOT NULL
        )
    """,
    "people": """
        CREATE TABLE IF NOT EXISTS people (
            id INTEGER PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            birth INTEGER
        )
    """,
    "stars": """
        CREATE TABLE IF NOT EXISTS stars (
            movie_id INTEGER NOT NULL,
            person_id INTEGER NOT NULL
        )
    """,
    "ratings": """
        CREATE TABLE IF NOT EXISTS ratings (
            movie_id INTEGER NOT NULL,
            rating FLOAT NOT NULL,
            votes INTEGER NOT NULL
        )
    """,
}

# id, title, year
MOVIES: List[Tuple[int, str, int]] = [
    (1, "The Shawshank Redemption", 1994),
    (2, "The Godfather", 1972),
    (3, "The Godfather: Part II", 1974),
    (4, "The Dark Knight", 2008),
    (5, "12 Angry Men", 1957),
]

# id, name, birth
PEOPLE: List[Tuple[int, str, int]] = [
    (1, "Tim Robbins", 1958),
    (2, "Morgan Freeman", 1937),
    (3, "Christopher Nolan", 1970),
    (4, "Al Pacino", 1940),
    (5, "Henry Fonda", 1905),
]

# movie_id, person_id
STARS: List[Tuple[int, int]] = [
    (1, 1),
    (1, 2),
    (2, 4),
    (3, 4),
    (5, 5),
]

# movie_id, rating, votes
RATINGS: List[Tuple[int, float, int]] = [
    (1, 9.3, 2200000),
    (2, 9.2, 1600000),
    (3, 9.0, 1100000),
    (4, 8.8, 2000000),
    (5, 9.0, 700000),
]


def create_tables(engine: Engine) -> List[str]:
    """Create any missing tables. Returns the table names."""
    with engine.begin() as conn:
        for ddl in SCHEMA.values():
            conn.execute(text(ddl))
    return list(SCHEMA)


def seed_reference_data(engine: Engine) -> Dict[str, int]:
    """
    Load the reference dataset into empty tables.

    Tables that already hold rows are left untouched, so running the seeder
    twice does not duplicate data.

    Returns:
        Number of rows inserted per table
    """
    create_tables(engine)

    inserts = {
        "movies": (
            "INSERT INTO movies (id, title, year) VALUES (:id, :title, :year)",
            [{"id": i, "title": t, "year": y} for i, t, y in MOVIES],
        ),
        "people": (
            "INSERT INTO people (id, name, birth) VALUES (:id, :name, :birth)",
            [{"id": i, "name": n, "birth": b} for i, n, b in PEOPLE],
        ),
        "stars": (
            "INSERT INTO stars (movie_id, person_id) VALUES (:movie_id, :person_id)",
            [{"movie_id": m, "person_id": p} for m, p in STARS],
        ),
        "ratings": (
            "INSERT INTO ratings (movie_id, rating, votes) VALUES (:movie_id, :rating, :votes)",
            [{"movie_id": m, "rating": r, "votes": v} for m, r, v in RATINGS],
        ),
    }

    inserted = {}
    with engine.begin() as conn:
        for table, (statement, rows) in inserts.items():
            # Table names come from the fixed SCHEMA keys
            count = conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()
            if count:
                logger.info(f"Skipping {table}: already has {count} rows")
                inserted[table] = 0
                continue
            conn.execute(text(statement), rows)
            inserted[table] = len(rows)
            logger.info(f"Seeded {table}: {len(rows)} rows")

    return inserted
