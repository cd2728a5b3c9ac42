"""
Filter resolution for collection queries.

A FilterSpec holds the validated ``limit`` and ``votes`` query parameters.
``resolve_filters`` turns it into the query variant to run and the concrete
bounds to bind. A malformed filter never rejects a request: the field falls
back to its default, independently of the other field.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .utils import setup_logger
from .validation import (
    INT32_MAX,
    LIMIT_PROFILE,
    MIN_VOTES_PROFILE,
    ParamResult,
    ParamState,
    validate_param,
)

logger = setup_logger(__name__)

DEFAULT_LIMIT = 50
DEFAULT_MIN_VOTES = 1000


class QueryVariant(str, Enum):
    """Which bounded query a filter combination selects."""

    base = "base"
    limited = "limited"
    vote_bounded = "vote_bounded"
    limited_and_vote_bounded = "limited_and_vote_bounded"


# (limit is valid, votes is valid) -> variant
RESOLUTION_TABLE = {
    (False, False): QueryVariant.base,
    (True, False): QueryVariant.limited,
    (False, True): QueryVariant.vote_bounded,
    (True, True): QueryVariant.limited_and_vote_bounded,
}


@dataclass(frozen=True)
class FilterSpec:
    """Per-request filter values, each absent, valid or malformed."""

    limit: ParamResult = ParamResult.absent()
    min_votes: ParamResult = ParamResult.absent()

    @classmethod
    def from_query(
        cls,
        limit: Optional[str] = None,
        votes: Optional[str] = None,
    ) -> "FilterSpec":
        """Build a FilterSpec from raw query-string values."""
        return cls(
            limit=validate_param(limit, LIMIT_PROFILE),
            min_votes=validate_param(votes, MIN_VOTES_PROFILE),
        )


@dataclass(frozen=True)
class ResolvedFilter:
    """Concrete bounds for a bounded query."""

    variant: QueryVariant
    limit: int
    min_votes: int


def clamp_limit(value: Optional[int], default: int = DEFAULT_LIMIT) -> int:
    """Keep ``value`` if it lies in [1, INT32_MAX), otherwise use the default."""
    if value is None or value < 1 or value >= INT32_MAX:
        return default
    return value


def clamp_min_votes(value: Optional[int], default: int = DEFAULT_MIN_VOTES) -> int:
    """Keep ``value`` if it lies in [0, INT32_MAX), otherwise use the default."""
    if value is None or value < 0 or value >= INT32_MAX:
        return default
    return value


def resolve_filters(
    spec: FilterSpec,
    default_limit: int = DEFAULT_LIMIT,
    default_min_votes: int = DEFAULT_MIN_VOTES,
) -> ResolvedFilter:
    """
    Decide the query variant and bounds for a FilterSpec.

    Args:
        spec: Validated filter values
        default_limit: Limit used when ``spec.limit`` is absent or malformed
        default_min_votes: Vote threshold used when ``spec.min_votes`` is
            absent or malformed

    Returns:
        ResolvedFilter with clamped bounds
    """
    for name, param in (("limit", spec.limit), ("votes", spec.min_votes)):
        if param.state is ParamState.invalid:
            logger.debug(f"Falling back to default {name}: malformed value {param.raw!r}")

    variant = RESOLUTION_TABLE[(spec.limit.is_valid, spec.min_votes.is_valid)]

    limit = spec.limit.value if spec.limit.is_valid else default_limit
    min_votes = spec.min_votes.value if spec.min_votes.is_valid else default_min_votes

    return ResolvedFilter(
        variant=variant,
        limit=clamp_limit(limit, default_limit),
        min_votes=clamp_min_votes(min_votes, default_min_votes),
    )
