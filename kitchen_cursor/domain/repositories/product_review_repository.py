"""
Repository Interface: IProductReviewRepository
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from kitchen_cursor.domain.entities.product_review import ProductReview


class IProductReviewRepository(ABC):
    """Product review repository interface."""

    @abstractmethod
    async def save(self, review: ProductReview) -> ProductReview:
        """Insert a new review (committed on its own)."""
        pass

    @abstractmethod
    async def update(self, review: ProductReview) -> ProductReview:
        """Persist changes of an existing review."""
        pass

    @abstractmethod
    async def find_by_id(self, review_id: UUID) -> Optional[ProductReview]:
        pass

    @abstractmethod
    async def find_review_queue(self) -> List[ProductReview]:
        """
        Reviews waiting for approval.

        Returns:
            Reviews in REVIEW, newest first, with post_title filled in
            when the review belongs to a post
        """
        pass

    @abstractmethod
    async def delete(self, review_id: UUID) -> bool:
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: UUID) -> int:
        """
        Delete every review attached to a post.

        Returns:
            Number of deleted rows
        """
        pass
