"""
Value Object: ProductReviewStatus

Moderation status of a product review.
"""

from enum import Enum

from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError


class ProductReviewStatus(str, Enum):
    """Product review lifecycle states."""

    REVIEW = "REVIEW"
    PUBLISHED = "PUBLISHED"

    @classmethod
    def parse(cls, value) -> 'ProductReviewStatus':
        """
        Convert a raw value into a status.

        Raises:
            DomainValidationError: If the value is not a known status
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise DomainValidationError(f"Invalid status value: {value!r}")

    def can_transition_to(self, new_status: 'ProductReviewStatus') -> bool:
        """
        Check whether a transition is allowed.

        Only approval is exposed:
        - REVIEW -> PUBLISHED
        """
        transitions = {
            ProductReviewStatus.REVIEW: [ProductReviewStatus.PUBLISHED],
        }
        if new_status == self:
            return True
        return new_status in transitions.get(self, [])
