# -*- coding: utf-8 -*-
"""
PostgreSQL repository for product reviews.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.repositories.product_review_repository import IProductReviewRepository
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.infrastructure.persistence.models import PostModel, ProductReviewModel
from kitchen_cursor.infrastructure.persistence.session_utils import commit_or_rollback
from kitchen_cursor.shared.exceptions.domain_exceptions import EntityNotFoundError


class ProductReviewRepositoryImpl(IProductReviewRepository):
    """Product review repository adapter."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, review: ProductReview) -> ProductReview:
        model = ProductReviewModel(
            id=review.id,
            product_title=review.product_title,
            product_image=review.product_image,
            product_link=review.product_link,
            rating=review.rating,
            review_content=review.review_content,
            status=review.status.value,
            post_id=review.post_id,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )
        self.session.add(model)
        await commit_or_rollback(self.session, "Save product review")
        await self.session.refresh(model)
        return self.to_entity(model)

    async def update(self, review: ProductReview) -> ProductReview:
        model = await self.session.get(ProductReviewModel, review.id)
        if model is None:
            raise EntityNotFoundError("ProductReview", review.id)

        model.product_title = review.product_title
        model.product_image = review.product_image
        model.product_link = review.product_link
        model.rating = review.rating
        model.review_content = review.review_content
        model.status = review.status.value
        model.updated_at = review.updated_at

        await commit_or_rollback(self.session, "Update product review")
        await self.session.refresh(model)
        return self.to_entity(model)

    async def find_by_id(self, review_id: UUID) -> Optional[ProductReview]:
        model = await self.session.get(ProductReviewModel, review_id)
        return self.to_entity(model) if model else None

    async def find_review_queue(self) -> List[ProductReview]:
        """Reviews in REVIEW with their post title, newest first."""
        result = await self.session.execute(
            select(ProductReviewModel, PostModel.title)
            .outerjoin(PostModel, ProductReviewModel.post_id == PostModel.id)
            .where(ProductReviewModel.status == ProductReviewStatus.REVIEW.value)
            .order_by(ProductReviewModel.created_at.desc())
        )
        reviews = []
        for model, post_title in result.all():
            review = self.to_entity(model)
            review.post_title = post_title
            reviews.append(review)
        return reviews

    async def delete(self, review_id: UUID) -> bool:
        model = await self.session.get(ProductReviewModel, review_id)
        if model:
            await self.session.delete(model)
            await commit_or_rollback(self.session, "Delete product review")
            return True
        return False

    async def delete_by_post(self, post_id: UUID) -> int:
        result = await self.session.execute(
            delete(ProductReviewModel).where(ProductReviewModel.post_id == post_id)
        )
        await commit_or_rollback(self.session, "Delete product reviews of post")
        return result.rowcount or 0

    @staticmethod
    def to_entity(model: ProductReviewModel) -> ProductReview:
        return ProductReview(
            id=model.id,
            product_title=model.product_title,
            product_image=model.product_image,
            product_link=model.product_link,
            rating=model.rating,
            review_content=model.review_content or "",
            status=ProductReviewStatus(model.status),
            post_id=model.post_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
