"""
Application Service for manually entered product reviews.
"""

import logging
from uuid import UUID

from kitchen_cursor.application.commands.review_commands import (
    CreateProductReviewCommand,
    UpdateProductReviewCommand,
)
from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.repositories.product_review_repository import IProductReviewRepository
from kitchen_cursor.domain.value_objects.rating import DEFAULT_RATING, validate_rating
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('product_title', 'product_image', 'product_link', 'review_content')


class ProductReviewService:
    """
    Manual review entry and editing.

    Ratings are validated strictly (1..5 in half steps); unlike generated
    reviews nothing is clamped.
    """

    def __init__(
        self,
        review_repository: IProductReviewRepository,
        post_repository: IPostRepository
    ):
        self.reviews = review_repository
        self.posts = post_repository

    async def create_review(self, command: CreateProductReviewCommand) -> ProductReview:
        """
        Raises:
            DomainValidationError: Missing fields, bad rating or status
            EntityNotFoundError: post_id given but unknown
        """
        missing = [name for name in REQUIRED_FIELDS if not (getattr(command, name) or "").strip()]
        if missing:
            raise DomainValidationError(f"Missing required fields: {', '.join(missing)}")

        rating = validate_rating(command.rating) if command.rating is not None else DEFAULT_RATING
        status = (
            ProductReviewStatus.parse(command.status) if command.status
            else ProductReviewStatus.PUBLISHED
        )

        if command.post_id is not None:
            if await self.posts.find_by_id(command.post_id) is None:
                raise EntityNotFoundError("Post", command.post_id)

        review = ProductReview(
            product_title=command.product_title.strip(),
            product_image=command.product_image,
            product_link=command.product_link,
            rating=rating,
            review_content=command.review_content,
            status=status,
            post_id=command.post_id,
        )
        saved = await self.reviews.save(review)
        logger.info(f"[Reviews] Created '{saved.product_title}' ({saved.status.value})")
        return saved

    async def get_review(self, review_id: UUID) -> ProductReview:
        review = await self.reviews.find_by_id(review_id)
        if review is None:
            raise EntityNotFoundError("ProductReview", review_id)
        return review

    async def update_review(self, command: UpdateProductReviewCommand) -> ProductReview:
        """
        Partial update; the status goes through the transition table.

        Raises:
            EntityNotFoundError: If the review does not exist
            DomainValidationError: Bad rating, unknown status or forbidden transition
        """
        review = await self.get_review(command.review_id)
        new_status = ProductReviewStatus.parse(command.status) if command.status is not None else None

        changes = dict(command.changes)
        if 'rating' in changes:
            changes['rating'] = validate_rating(changes['rating'])

        if changes:
            review.apply_changes(**changes)
        if new_status is not None:
            review.change_status(new_status)

        updated = await self.reviews.update(review)
        logger.info(f"[Reviews] Updated {updated.id} ({updated.status.value})")
        return updated
