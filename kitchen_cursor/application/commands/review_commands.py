"""
Commands: manual product reviews.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from uuid import UUID


@dataclass(frozen=True)
class CreateProductReviewCommand:
    """
    Manual review entry.

    Status defaults to PUBLISHED and rating to 5.
    """

    # Required
    product_title: str
    product_image: str
    product_link: str
    review_content: str

    # Optional
    rating: Optional[float] = None
    status: Optional[str] = None
    post_id: Optional[UUID] = None


@dataclass(frozen=True)
class UpdateProductReviewCommand:
    """Partial review update."""
    review_id: UUID
    changes: Dict[str, Any] = None
    status: Optional[str] = None

    def __post_init__(self):
        if self.changes is None:
            object.__setattr__(self, 'changes', {})
