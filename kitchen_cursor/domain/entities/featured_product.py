"""
Domain entity: FeaturedProduct

Hand-picked product highlight. Always belongs to exactly one post and is
never produced by the generation pipeline.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from kitchen_cursor.domain.value_objects.rating import validate_rating, DEFAULT_RATING
from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError


@dataclass
class FeaturedProduct:
    """Featured product entity."""

    post_id: UUID
    product_name: str
    product_image: str
    product_link: str
    description: str
    id: UUID = field(default_factory=uuid4)
    price: Optional[str] = None
    rating: float = DEFAULT_RATING

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for name in ('product_name', 'product_image', 'product_link', 'description'):
            value = getattr(self, name)
            if not value or not str(value).strip():
                raise DomainValidationError(f"Featured product {name} cannot be empty")
        if self.post_id is None:
            raise DomainValidationError("Featured product must belong to a post")
        self.rating = validate_rating(self.rating)

    def apply_changes(self, **changes) -> None:
        """Apply a partial update of editable fields."""
        editable = {'product_name', 'product_image', 'product_link', 'price', 'rating', 'description'}
        unknown = set(changes) - editable
        if unknown:
            raise DomainValidationError(f"Unknown featured product fields: {sorted(unknown)}")

        for name, value in changes.items():
            setattr(self, name, value)

        self.validate()
        self.updated_at = datetime.utcnow()
