"""
Unit tests for star ratings.
"""

import math

import pytest

from kitchen_cursor.domain.value_objects.rating import clamp_rating, validate_rating
from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError


class TestValidateRating:

    @pytest.mark.parametrize("value", [1, 1.5, 3, 4.5, 5, "4"])
    def test_accepts_grid_values(self, value):
        assert validate_rating(value) == float(value)

    @pytest.mark.parametrize("value", [0, 0.5, 5.5, 6, -1, 3.3, "abc", None, True, math.nan])
    def test_rejects_invalid(self, value):
        with pytest.raises(DomainValidationError):
            validate_rating(value)


class TestClampRating:

    @pytest.mark.parametrize("value, expected", [
        (7, 5.0),
        (0, 1.0),
        (-3, 1.0),
        (3.3, 3.5),
        (3.2, 3.0),
        (4, 4.0),
        ("4.5", 4.5),
    ])
    def test_clamps_and_rounds(self, value, expected):
        assert clamp_rating(value) == expected

    def test_non_numeric_uses_default(self):
        assert clamp_rating("five stars", default=5.0) == 5.0
        assert clamp_rating(math.nan, default=3.0) == 3.0

    def test_non_numeric_without_default_raises(self):
        with pytest.raises(DomainValidationError):
            clamp_rating("five stars")
