"""
CatalogService tests.

Uses a recording store to check which query each request selects, and
that malformed path parameters never reach the store.
"""

import pytest

from flickfinder.classifier import Outcome
from flickfinder.exceptions import StoreError
from flickfinder.filters import QueryVariant
from flickfinder.service import CatalogService

from conftest import SHAWSHANK, make_config


@pytest.fixture
def service(recording_db, config):
    return CatalogService(recording_db, config)


class TestPathValidation:
    """Malformed ids and years are rejected before any query."""

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", "1.0", "10000000000", ""])
    def test_bad_movie_id(self, service, recording_db, raw):
        result = service.get_movie(raw)

        assert result.outcome is Outcome.bad_request
        assert result.message == "Invalid id"
        assert recording_db.calls == []

    @pytest.mark.parametrize(
        "method", ["get_movie_stars", "get_person", "get_person_movies"]
    )
    def test_bad_id_on_every_id_endpoint(self, service, recording_db, method):
        result = getattr(service, method)("x1")

        assert result.outcome is Outcome.bad_request
        assert recording_db.calls == []

    @pytest.mark.parametrize("raw", ["0", "abc", "-173", "2101", "adboub"])
    def test_bad_year(self, service, recording_db, raw):
        result = service.get_ratings_by_year(raw, limit="3", votes="1000000")

        assert result.outcome is Outcome.bad_request
        assert result.message == "Invalid year"
        assert recording_db.calls == []

    def test_max_year_from_config(self, recording_db, tmp_path):
        service = CatalogService(recording_db, make_config(tmp_path, max_year=2020))

        assert service.get_ratings_by_year("2028").outcome is Outcome.bad_request
        assert service.get_ratings_by_year("2020").outcome is Outcome.not_found


class TestQuerySelection:
    """Resolved bounds are what reaches the store."""

    def test_ratings_defaults(self, service, recording_db):
        service.get_ratings_by_year("2008")

        assert recording_db.calls == [("get_ratings_by_year", (2008, 50, 1000))]

    def test_ratings_malformed_filters_fall_back(self, service, recording_db):
        service.get_ratings_by_year("2008", limit="-09a", votes="10000000000")

        assert recording_db.calls == [("get_ratings_by_year", (2008, 50, 1000))]

    def test_ratings_each_field_independent(self, service, recording_db):
        service.get_ratings_by_year("2008", limit="3", votes="-ab1")
        service.get_ratings_by_year("2008", limit="abc", votes="1000000")

        assert recording_db.calls == [
            ("get_ratings_by_year", (2008, 3, 1000)),
            ("get_ratings_by_year", (2008, 50, 1000000)),
        ]

    def test_ratings_variant_reaches_store(self, service, recording_db):
        service.get_ratings_by_year("2008")
        service.get_ratings_by_year("2008", limit="3", votes="x")
        service.get_ratings_by_year("2008", limit="x", votes="10")
        service.get_ratings_by_year("2008", limit="3", votes="10")

        assert recording_db.variants == [
            QueryVariant.base,
            QueryVariant.limited,
            QueryVariant.vote_bounded,
            QueryVariant.limited_and_vote_bounded,
        ]

    def test_listing_limit(self, service, recording_db):
        service.list_movies("3")
        service.list_people("abc")

        assert recording_db.calls == [("get_movies", (3,)), ("get_people", (50,))]

    def test_identical_requests_identical_outcomes(self, service, recording_db):
        first = service.get_movie("1")
        second = service.get_movie("1")

        assert first == second
        assert recording_db.calls == [("get_movie", (1,)), ("get_movie", (1,))]


class TestOutcomes:
    """Results classified per endpoint kind."""

    def test_movie_found(self, service):
        result = service.get_movie("1")

        assert result.outcome is Outcome.success
        assert result.payload == SHAWSHANK

    def test_movie_missing(self, service):
        result = service.get_movie("190")

        assert result.outcome is Outcome.not_found
        assert result.message == "Movie not found"

    def test_empty_stars_not_found(self, service):
        assert service.get_movie_stars("1").message == "Star(s) not found"

    def test_empty_person_movies_not_found(self, service):
        assert service.get_person_movies("1").message == "Movie(s) not found"

    def test_empty_ratings_not_found(self, service):
        assert service.get_ratings_by_year("2028").message == "Movie(s) not found"

    def test_empty_listing_is_success(self, recording_db, config):
        recording_db.movies = []
        result = CatalogService(recording_db, config).list_movies()

        assert result.outcome is Outcome.success
        assert result.payload == []

    def test_person_missing(self, service):
        assert service.get_person("1234").message == "Person not found"


class TestStoreErrors:
    """Store failures propagate; nothing is retried."""

    def test_store_error_propagates(self, failing_db, config):
        service = CatalogService(failing_db, config)

        with pytest.raises(StoreError):
            service.get_movie("1")

        assert failing_db.get_movie.call_count == 1

    def test_bad_path_never_hits_failing_store(self, failing_db, config):
        service = CatalogService(failing_db, config)

        assert service.get_movie("abc").outcome is Outcome.bad_request
        failing_db.get_movie.assert_not_called()
