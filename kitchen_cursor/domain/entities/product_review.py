# -*- coding: utf-8 -*-
"""
Domain entity: ProductReview

A written review of one product with a 1-5 rating, optionally attached
to a post.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from kitchen_cursor.domain.value_objects.rating import validate_rating, DEFAULT_RATING
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    InvalidStatusTransition,
)


@dataclass
class ProductReview:
    """
    Product review entity.

    Invariants:
    - product_title is not empty
    - review_content is a string, never None
    - rating is within [1, 5] in half-star steps
    """

    id: UUID = field(default_factory=uuid4)
    product_title: str = ""
    product_image: Optional[str] = None
    product_link: Optional[str] = None
    rating: float = DEFAULT_RATING
    review_content: str = ""
    status: ProductReviewStatus = ProductReviewStatus.PUBLISHED
    post_id: Optional[UUID] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Owning post summary for queue listings (id/title only)
    post_title: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.product_title or not self.product_title.strip():
            raise DomainValidationError("Product title cannot be empty")
        if not isinstance(self.review_content, str):
            raise DomainValidationError("Review content must be text")
        self.rating = validate_rating(self.rating)

    def change_status(self, new_status: ProductReviewStatus) -> None:
        """
        Move the review to another moderation state.

        Raises:
            InvalidStatusTransition: If the transition table forbids it
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransition("ProductReview", self.status.value, new_status.value)
        self.status = new_status
        self.updated_at = datetime.utcnow()

    def apply_changes(self, **changes) -> None:
        """Apply a partial update of editable fields."""
        editable = {'product_title', 'product_image', 'product_link', 'rating', 'review_content'}
        unknown = set(changes) - editable
        if unknown:
            raise DomainValidationError(f"Unknown review fields: {sorted(unknown)}")

        for name, value in changes.items():
            setattr(self, name, value)

        self.validate()
        self.updated_at = datetime.utcnow()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductReview):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
