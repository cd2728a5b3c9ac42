"""
Catalog service: one method per endpoint.

Each method takes the raw request strings, validates the path parameter,
resolves the optional filters, runs one bounded query through the
DatabaseManager it was given and classifies the result. Path validation
happens before any store access. StoreError propagates unchanged.
"""

from typing import Optional

from .classifier import Classification, LookupKind, bad_request, classify
from .config import Config
from .database import DatabaseManager
from .filters import FilterSpec, ResolvedFilter, resolve_filters
from .utils import setup_logger
from .validation import ID_PROFILE, ConstraintProfile, validate_param, year_profile

logger = setup_logger(__name__)


class CatalogService:
    """Validate, resolve, query and classify for every catalog endpoint."""

    def __init__(self, db: DatabaseManager, config: Config):
        self.db = db
        self.config = config
        self.year_profile = year_profile(config.max_year)

    def _resolve(self, limit: Optional[str], votes: Optional[str] = None) -> ResolvedFilter:
        resolved = resolve_filters(
            FilterSpec.from_query(limit=limit, votes=votes),
            default_limit=self.config.default_limit,
            default_min_votes=self.config.default_min_votes,
        )
        logger.debug(
            f"Resolved filters: variant={resolved.variant.value} "
            f"limit={resolved.limit} min_votes={resolved.min_votes}"
        )
        return resolved

    @staticmethod
    def _path_value(raw: str, profile: ConstraintProfile) -> Optional[int]:
        result = validate_param(raw, profile)
        return result.value if result.is_valid else None

    # ============ MOVIES ============

    def list_movies(self, limit: Optional[str] = None) -> Classification:
        resolved = self._resolve(limit)
        return classify(LookupKind.listing, self.db.get_movies(resolved.limit))

    def get_movie(self, raw_id: str) -> Classification:
        movie_id = self._path_value(raw_id, ID_PROFILE)
        if movie_id is None:
            return bad_request("id")
        return classify(LookupKind.single, self.db.get_movie(movie_id), "Movie not found")

    def get_movie_stars(self, raw_id: str) -> Classification:
        movie_id = self._path_value(raw_id, ID_PROFILE)
        if movie_id is None:
            return bad_request("id")
        return classify(
            LookupKind.relation,
            self.db.get_stars_by_movie_id(movie_id),
            "Star(s) not found",
        )

    def get_ratings_by_year(
        self,
        raw_year: str,
        limit: Optional[str] = None,
        votes: Optional[str] = None,
    ) -> Classification:
        """
        Ratings for a year, best first.

        A malformed year is a bad request; malformed ``limit`` or ``votes``
        fall back to their defaults.
        """
        year = self._path_value(raw_year, self.year_profile)
        if year is None:
            return bad_request("year")
        resolved = self._resolve(limit, votes)
        ratings = self.db.get_ratings_by_year(
            year,
            limit=resolved.limit,
            min_votes=resolved.min_votes,
            variant=resolved.variant,
        )
        return classify(LookupKind.relation, ratings, "Movie(s) not found")

    # ============ PEOPLE ============

    def list_people(self, limit: Optional[str] = None) -> Classification:
        resolved = self._resolve(limit)
        return classify(LookupKind.listing, self.db.get_people(resolved.limit))

    def get_person(self, raw_id: str) -> Classification:
        person_id = self._path_value(raw_id, ID_PROFILE)
        if person_id is None:
            return bad_request("id")
        return classify(LookupKind.single, self.db.get_person(person_id), "Person not found")

    def get_person_movies(self, raw_id: str) -> Classification:
        person_id = self._path_value(raw_id, ID_PROFILE)
        if person_id is None:
            return bad_request("id")
        return classify(
            LookupKind.relation,
            self.db.get_movies_by_person_id(person_id),
            "Movie(s) not found",
        )
