"""
People endpoints for the public API.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_service
from api.schemas.common import DATABASE_ERROR, text_error
from api.schemas.movie import MovieOut
from api.schemas.person import PersonOut
from flickfinder.service import CatalogService

router = APIRouter()


@router.get("/people", response_model=List[PersonOut], responses=DATABASE_ERROR)
def list_people(
    limit: Optional[str] = Query(None, description="Maximum number of people (default 50)"),
    service: CatalogService = Depends(get_service),
):
    """
    List people ordered by id.
    """
    people = service.list_people(limit).raise_for_outcome()
    return [person.to_dict() for person in people]


@router.get(
    "/people/{person_id}",
    response_model=PersonOut,
    responses={
        400: text_error("Invalid id"),
        404: text_error("Person not found"),
        **DATABASE_ERROR,
    },
)
def get_person(
    person_id: str,
    service: CatalogService = Depends(get_service),
):
    """
    Get a single person.
    """
    person = service.get_person(person_id).raise_for_outcome()
    return person.to_dict()


@router.get(
    "/people/{person_id}/movies",
    response_model=List[MovieOut],
    responses={
        400: text_error("Invalid id"),
        404: text_error("Movie(s) not found"),
        **DATABASE_ERROR,
    },
)
def get_person_movies(
    person_id: str,
    service: CatalogService = Depends(get_service),
):
    """
    Get the movies a person starred in.
    """
    movies = service.get_person_movies(person_id).raise_for_outcome()
    return [movie.to_dict() for movie in movies]
