"""
Parameter validation for raw path and query strings.

Every numeric request parameter goes through ``validate_param`` with a
``ConstraintProfile``. The result is a three-state ``ParamResult``:
absent, valid (with the parsed integer) or invalid (with the raw text).
Nothing here touches the store.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Largest signed 32-bit integer; bounds stay strictly below it
INT32_MAX = 2_147_483_647

_DIGITS = re.compile(r"[0-9]+")


class ParamState(str, Enum):
    """Validation outcome for a single parameter."""

    absent = "absent"
    valid = "valid"
    invalid = "invalid"


@dataclass(frozen=True)
class ParamResult:
    """Tagged result of validating one raw parameter."""

    state: ParamState
    value: Optional[int] = None
    raw: Optional[str] = None

    @classmethod
    def absent(cls) -> "ParamResult":
        return cls(ParamState.absent)

    @classmethod
    def valid(cls, value: int, raw: Optional[str] = None) -> "ParamResult":
        return cls(ParamState.valid, value=value, raw=raw)

    @classmethod
    def invalid(cls, raw: str) -> "ParamResult":
        return cls(ParamState.invalid, raw=raw)

    @property
    def is_valid(self) -> bool:
        return self.state is ParamState.valid

    @property
    def is_absent(self) -> bool:
        return self.state is ParamState.absent


@dataclass(frozen=True)
class ConstraintProfile:
    """Constraints applied to one kind of numeric parameter."""

    name: str
    min_value: int
    max_value: int
    max_digit_length: int = 10


ID_PROFILE = ConstraintProfile(name="id", min_value=1, max_value=INT32_MAX - 1)
LIMIT_PROFILE = ConstraintProfile(name="limit", min_value=1, max_value=INT32_MAX - 1)
MIN_VOTES_PROFILE = ConstraintProfile(name="votes", min_value=0, max_value=INT32_MAX - 1)


def year_profile(max_year: int) -> ConstraintProfile:
    """Profile for a release year between 1 and ``max_year``."""
    return ConstraintProfile(name="year", min_value=1, max_value=max_year)


def validate_param(raw: Optional[str], profile: ConstraintProfile) -> ParamResult:
    """
    Classify a raw parameter string against a constraint profile.

    Args:
        raw: The raw string from the path or query string, or None if missing
        profile: Constraints for this parameter

    Returns:
        ParamResult that is absent, valid or invalid
    """
    if raw is None:
        return ParamResult.absent()

    if not _DIGITS.fullmatch(raw):
        return ParamResult.invalid(raw)

    if len(raw) > profile.max_digit_length:
        return ParamResult.invalid(raw)

    value = int(raw)
    if value < profile.min_value or value > profile.max_value:
        return ParamResult.invalid(raw)

    return ParamResult.valid(value, raw)
