"""
Movie endpoints for the public API.

Path and query parameters arrive as raw strings; the CatalogService
validates them so that a malformed id or year yields a 400 with a
plain-text body and a malformed filter falls back to its default.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_service
from api.schemas.common import DATABASE_ERROR, text_error
from api.schemas.movie import MovieOut, MovieRatingOut
from api.schemas.person import PersonOut
from flickfinder.service import CatalogService

router = APIRouter()


@router.get("/movies", response_model=List[MovieOut], responses=DATABASE_ERROR)
def list_movies(
    limit: Optional[str] = Query(None, description="Maximum number of movies (default 50)"),
    service: CatalogService = Depends(get_service),
):
    """
    List movies ordered by id.
    """
    movies = service.list_movies(limit).raise_for_outcome()
    return [movie.to_dict() for movie in movies]


@router.get(
    "/movies/ratings/{year}",
    response_model=List[MovieRatingOut],
    responses={
        400: text_error("Invalid year"),
        404: text_error("Movie(s) not found"),
        **DATABASE_ERROR,
    },
)
def get_ratings_by_year(
    year: str,
    limit: Optional[str] = Query(None, description="Maximum number of movies (default 50)"),
    votes: Optional[str] = Query(None, description="Minimum number of votes (default 1000)"),
    service: CatalogService = Depends(get_service),
):
    """
    Get the best rated movies of a year, highest rating first.
    """
    ratings = service.get_ratings_by_year(year, limit=limit, votes=votes).raise_for_outcome()
    return [rating.to_dict() for rating in ratings]


@router.get(
    "/movies/{movie_id}",
    response_model=MovieOut,
    responses={
        400: text_error("Invalid id"),
        404: text_error("Movie not found"),
        **DATABASE_ERROR,
    },
)
def get_movie(
    movie_id: str,
    service: CatalogService = Depends(get_service),
):
    """
    Get a single movie.
    """
    movie = service.get_movie(movie_id).raise_for_outcome()
    return movie.to_dict()


@router.get(
    "/movies/{movie_id}/stars",
    response_model=List[PersonOut],
    responses={
        400: text_error("Invalid id"),
        404: text_error("Star(s) not found"),
        **DATABASE_ERROR,
    },
)
def get_movie_stars(
    movie_id: str,
    service: CatalogService = Depends(get_service),
):
    """
    Get the people starring in a movie.
    """
    stars = service.get_movie_stars(movie_id).raise_for_outcome()
    return [person.to_dict() for person in stars]
