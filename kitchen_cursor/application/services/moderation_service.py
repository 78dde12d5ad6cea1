# -*- coding: utf-8 -*-
"""
Moderation Service.

Review queues, status transitions and deletions for posts and product
reviews. Allowed transitions come from PostStatus / ProductReviewStatus.
"""

import logging
from typing import List
from uuid import UUID

from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.repositories.featured_product_repository import IFeaturedProductRepository
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.repositories.product_review_repository import IProductReviewRepository
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.shared.exceptions.domain_exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ModerationService:
    """
    Moderation workflow.

    Post deletion removes children explicitly: product reviews first, then
    featured products, then the post.
    """

    def __init__(
        self,
        post_repository: IPostRepository,
        review_repository: IProductReviewRepository,
        featured_product_repository: IFeaturedProductRepository
    ):
        self.posts = post_repository
        self.reviews = review_repository
        self.featured_products = featured_product_repository

    # =========================================================================
    # Queues
    # =========================================================================

    async def list_review_queue(self) -> List[Post]:
        """Posts in REVIEW with their own REVIEW reviews, newest first."""
        return await self.posts.find_review_queue()

    async def list_reviews_queue(self) -> List[ProductReview]:
        """Reviews in REVIEW with their post title, newest first."""
        return await self.reviews.find_review_queue()

    # =========================================================================
    # Transitions
    # =========================================================================

    async def transition_post(self, post_id: UUID, new_status) -> Post:
        """
        Change the status of a post.

        Raises:
            DomainValidationError: Unknown status or forbidden transition
            EntityNotFoundError: If the post does not exist
        """
        status = PostStatus.parse(new_status)

        post = await self.posts.find_by_id(post_id)
        if post is None:
            raise EntityNotFoundError("Post", post_id)

        previous = post.status
        post.change_status(status)
        updated = await self.posts.update(post)

        logger.info(f"[Moderation] Post {post_id}: {previous.value} -> {status.value}")
        return updated

    async def transition_review(self, review_id: UUID, new_status) -> ProductReview:
        """
        Change the status of a product review.

        Raises:
            DomainValidationError: Unknown status or forbidden transition
            EntityNotFoundError: If the review does not exist
        """
        status = ProductReviewStatus.parse(new_status)

        review = await self.reviews.find_by_id(review_id)
        if review is None:
            raise EntityNotFoundError("ProductReview", review_id)

        previous = review.status
        review.change_status(status)
        updated = await self.reviews.update(review)

        logger.info(f"[Moderation] Review {review_id}: {previous.value} -> {status.value}")
        return updated

    # =========================================================================
    # Deletion
    # =========================================================================

    async def delete_post(self, post_id: UUID) -> None:
        """
        Raises:
            EntityNotFoundError: If the post does not exist
        """
        post = await self.posts.find_by_id(post_id)
        if post is None:
            raise EntityNotFoundError("Post", post_id)

        reviews_deleted = await self.reviews.delete_by_post(post_id)
        featured_deleted = await self.featured_products.delete_by_post(post_id)
        await self.posts.delete(post_id)

        logger.info(
            f"[Moderation] Post {post_id} deleted "
            f"({reviews_deleted} reviews, {featured_deleted} featured products)"
        )

    async def delete_post_by_slug(self, slug: str) -> None:
        post = await self.posts.find_by_slug(slug)
        if post is None:
            raise EntityNotFoundError("Post", slug)
        await self.delete_post(post.id)

    async def delete_review(self, review_id: UUID) -> None:
        if not await self.reviews.delete(review_id):
            raise EntityNotFoundError("ProductReview", review_id)
        logger.info(f"[Moderation] Review {review_id} deleted")
