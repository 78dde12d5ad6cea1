"""
Value Object: Rating

Star rating from 1 to 5 in half-star steps.
"""

import math
from typing import Optional

from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError

MIN_RATING = 1.0
MAX_RATING = 5.0
RATING_STEP = 0.5
DEFAULT_RATING = 5.0


def validate_rating(value) -> float:
    """
    Check a rating supplied by an administrator.

    Boundaries (1 and 5) are accepted, anything outside [1, 5] or off the
    half-star grid is rejected.

    Raises:
        DomainValidationError: If the rating is invalid
    """
    if isinstance(value, bool):
        raise DomainValidationError(f"Rating must be a number, got {value!r}")
    try:
        rating = float(value)
    except (TypeError, ValueError):
        raise DomainValidationError(f"Rating must be a number, got {value!r}")

    if math.isnan(rating) or not MIN_RATING <= rating <= MAX_RATING:
        raise DomainValidationError("Rating must be between 1 and 5")

    if (rating / RATING_STEP) != int(rating / RATING_STEP):
        raise DomainValidationError("Rating must use half-star steps (e.g. 3.5)")

    return rating


def clamp_rating(value, default: Optional[float] = None) -> float:
    """
    Normalize a generated rating.

    Values are clamped into [1, 5] and rounded to the nearest half star.
    Non-numeric values fall back to ``default`` (or raise if it is None).
    """
    try:
        rating = float(value)
    except (TypeError, ValueError):
        if default is None:
            raise DomainValidationError(f"Rating must be a number, got {value!r}")
        return default

    if math.isnan(rating):
        if default is None:
            raise DomainValidationError("Rating must be a number, got NaN")
        return default

    rating = max(MIN_RATING, min(MAX_RATING, rating))
    return round(rating / RATING_STEP) * RATING_STEP
