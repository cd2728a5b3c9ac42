"""
Result classification.

Maps path-parameter validity, lookup kind and result cardinality onto a
response outcome. Relationship lookups that come back empty are NotFound;
top-level listings always succeed, even with an empty list.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .exceptions import NotFoundError, ValidationError


class Outcome(str, Enum):
    """Terminal outcome of a request."""

    bad_request = "bad_request"
    not_found = "not_found"
    success = "success"


class LookupKind(str, Enum):
    """Shape of the query behind an endpoint."""

    single = "single"  # entity by id
    relation = "relation"  # stars, filmography, ratings by year
    listing = "listing"  # /movies, /people


# (kind, result is empty) -> outcome
CLASSIFICATION_TABLE = {
    (LookupKind.single, True): Outcome.not_found,
    (LookupKind.single, False): Outcome.success,
    (LookupKind.relation, True): Outcome.not_found,
    (LookupKind.relation, False): Outcome.success,
    (LookupKind.listing, True): Outcome.success,
    (LookupKind.listing, False): Outcome.success,
}


@dataclass(frozen=True)
class Classification:
    """Outcome plus the payload (on success) or message (otherwise)."""

    outcome: Outcome
    payload: Any = None
    message: Optional[str] = None
    parameter: Optional[str] = None

    def raise_for_outcome(self) -> Any:
        """Return the payload on success, raise the matching error otherwise."""
        if self.outcome is Outcome.bad_request:
            raise ValidationError(self.message, parameter=self.parameter)
        if self.outcome is Outcome.not_found:
            raise NotFoundError(self.message)
        return self.payload


def _is_empty(result: Any) -> bool:
    if result is None:
        return True
    if isinstance(result, (list, tuple)):
        return len(result) == 0
    return False


def classify(
    kind: LookupKind,
    result: Any,
    not_found_message: str = "Not found",
) -> Classification:
    """Classify a query result for a request whose path parameters were valid."""
    outcome = CLASSIFICATION_TABLE[(kind, _is_empty(result))]
    if outcome is Outcome.not_found:
        return Classification(outcome, message=not_found_message)
    if result is None:
        result = []
    return Classification(outcome, payload=result)


def bad_request(parameter: str) -> Classification:
    """Classification for a malformed path parameter."""
    return Classification(
        Outcome.bad_request,
        message=f"Invalid {parameter}",
        parameter=parameter,
    )
