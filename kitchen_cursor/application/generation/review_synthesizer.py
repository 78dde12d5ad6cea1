# -*- coding: utf-8 -*-
"""
Product review synthesizer.

Turns one catalog product into a persisted, published ProductReview.
"""

import asyncio
import logging
from typing import Optional
from uuid import UUID

from kitchen_cursor.application.ai_services.agents.product_review_agent import ProductReviewAgent
from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.repositories.product_review_repository import IProductReviewRepository
from kitchen_cursor.domain.value_objects.rating import clamp_rating
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.infrastructure.catalog.product_catalog import CatalogProduct
from kitchen_cursor.infrastructure.catalog.stock_photos import StockPhotoService
from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class ProductReviewSynthesizer:
    """
    Generates and stores a review for a single product.

    Generated ratings are clamped into [1, 5] and rounded to half stars
    before they are stored.
    """

    def __init__(
            self,
            review_repository: IProductReviewRepository,
            review_agent: ProductReviewAgent,
            stock_photos: Optional[StockPhotoService] = None
    ):
        self.reviews = review_repository
        self.agent = review_agent
        self.stock_photos = stock_photos or StockPhotoService()

    async def synthesize(self, product: CatalogProduct, post_id: UUID) -> ProductReview:
        """
        Review one product and persist it under a post.

        Args:
            product: Catalog product (title required)
            post_id: Owning post

        Returns:
            Stored review with status PUBLISHED

        Raises:
            DomainValidationError: If the product has no title
            ExternalServiceError: If review generation failed
            DatabaseError: If the review could not be stored
        """
        title = (product.title or "").strip()
        if not title:
            raise DomainValidationError("Product title is required")

        try:
            draft = await asyncio.to_thread(self.agent.review, title, product.description)
            rating = clamp_rating(draft.rating)
        except ExternalServiceError:
            raise
        except DomainValidationError as e:
            raise ExternalServiceError("product_review", f"Unusable rating for '{title}': {e}") from e

        if rating != draft.rating:
            logger.info(f"[Synthesizer] Rating for '{title}' normalized: {draft.rating} -> {rating}")

        review = ProductReview(
            product_title=title,
            product_image=product.image or self.stock_photos.product_image_url(title),
            product_link=product.link,
            rating=rating,
            review_content=draft.review_content,
            status=ProductReviewStatus.PUBLISHED,
            post_id=post_id,
        )
        saved = await self.reviews.save(review)
        logger.info(f"[Synthesizer] Review stored: '{title}' ({rating}/5)")
        return saved
