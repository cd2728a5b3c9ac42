"""
FlickFinder - read-only query core for a small movie catalog.

This package provides:
- Parameter validation for raw path and query strings
- Filter resolution with per-field fallback defaults
- Bounded queries against the movie store
- Classification of results into response outcomes
"""

from .classifier import Classification, LookupKind, Outcome, classify
from .config import Config
from .database import DatabaseManager
from .exceptions import FlickFinderError, NotFoundError, StoreError, ValidationError
from .filters import FilterSpec, QueryVariant, ResolvedFilter, resolve_filters
from .models import Movie, MovieRating, Person
from .service import CatalogService
from .validation import ConstraintProfile, ParamResult, ParamState, validate_param

__version__ = "1.0.0"
__all__ = [
    "CatalogService",
    "Classification",
    "Config",
    "ConstraintProfile",
    "DatabaseManager",
    "FilterSpec",
    "FlickFinderError",
    "LookupKind",
    "Movie",
    "MovieRating",
    "NotFoundError",
    "Outcome",
    "ParamResult",
    "ParamState",
    "Person",
    "QueryVariant",
    "ResolvedFilter",
    "StoreError",
    "ValidationError",
    "classify",
    "resolve_filters",
    "validate_param",
]
