# -*- coding: utf-8 -*-
"""
PostgreSQL repository for posts.

The UNIQUE index on posts.slug is what makes slug allocation safe under
concurrent generation: an IntegrityError on insert is reported as
DuplicateEntityError so the caller can re-allocate.
"""

from typing import Dict, List, Optional, Set
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.infrastructure.persistence.featured_product_repository_impl import (
    FeaturedProductRepositoryImpl,
)
from kitchen_cursor.infrastructure.persistence.models import (
    PostModel,
    ProductReviewModel,
    FeaturedProductModel,
)
from kitchen_cursor.infrastructure.persistence.product_review_repository_impl import (
    ProductReviewRepositoryImpl,
)
from kitchen_cursor.infrastructure.persistence.session_utils import commit_or_rollback
from kitchen_cursor.shared.exceptions.domain_exceptions import EntityNotFoundError


class PostRepositoryImpl(IPostRepository):
    """
    Post repository adapter.

    Maps Post entities to PostModel rows and back.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, post: Post) -> Post:
        """Insert a post, DuplicateEntityError on slug conflict."""
        model = self._to_model(post)
        self.session.add(model)
        await commit_or_rollback(
            self.session, "Save post", duplicate_message=f"Post slug already exists: {post.slug}"
        )
        await self.session.refresh(model)
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Write editable fields of an existing post."""
        model = await self.session.get(PostModel, post.id)
        if model is None:
            raise EntityNotFoundError("Post", post.id)

        model.title = post.title
        model.excerpt = post.excerpt
        model.content = post.content
        model.hero_image = post.hero_image
        model.status = post.status.value
        model.seo_title = post.seo_title
        model.seo_description = post.seo_description
        model.seo_keywords = post.seo_keywords
        model.focus_keyword = post.focus_keyword
        model.reading_time = post.reading_time
        model.updated_at = post.updated_at

        await commit_or_rollback(self.session, "Update post")
        await self.session.refresh(model)
        return self._to_entity(model)

    async def find_by_id(self, post_id: UUID, with_relations: bool = False) -> Optional[Post]:
        model = await self.session.get(PostModel, post_id)
        if model is None:
            return None
        post = self._to_entity(model)
        if with_relations:
            await self._load_relations(post)
        return post

    async def find_by_slug(self, slug: str, with_relations: bool = False) -> Optional[Post]:
        result = await self.session.execute(
            select(PostModel).where(PostModel.slug == slug)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        post = self._to_entity(model)
        if with_relations:
            await self._load_relations(post)
        return post

    async def find_all(
        self,
        status: Optional[PostStatus] = None,
        limit: int = 100,
        offset: int = 0
    ) -> List[Post]:
        query = select(PostModel)
        if status:
            query = query.where(PostModel.status == status.value)
        query = query.order_by(PostModel.updated_at.desc()).limit(limit).offset(offset)

        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_review_queue(self) -> List[Post]:
        """Posts in REVIEW with their REVIEW-status reviews, newest first."""
        result = await self.session.execute(
            select(PostModel)
            .where(PostModel.status == PostStatus.REVIEW.value)
            .order_by(PostModel.created_at.desc())
        )
        posts = [self._to_entity(m) for m in result.scalars().all()]
        if not posts:
            return posts

        # One query for the reviews of every queued post
        reviews_result = await self.session.execute(
            select(ProductReviewModel)
            .where(ProductReviewModel.post_id.in_([p.id for p in posts]))
            .where(ProductReviewModel.status == ProductReviewStatus.REVIEW.value)
            .order_by(ProductReviewModel.created_at.desc())
        )
        by_post: Dict[UUID, List[ProductReview]] = {}
        for review_model in reviews_result.scalars().all():
            review = ProductReviewRepositoryImpl.to_entity(review_model)
            by_post.setdefault(review.post_id, []).append(review)

        for post in posts:
            post.product_reviews = by_post.get(post.id, [])
        return posts

    async def get_all_slugs(self) -> Set[str]:
        result = await self.session.execute(select(PostModel.slug))
        return set(result.scalars().all())

    async def delete(self, post_id: UUID) -> bool:
        model = await self.session.get(PostModel, post_id)
        if model:
            await self.session.delete(model)
            await commit_or_rollback(self.session, "Delete post")
            return True
        return False

    # =========================================================================
    # Relations
    # =========================================================================

    async def _load_relations(self, post: Post) -> None:
        reviews = await self.session.execute(
            select(ProductReviewModel)
            .where(ProductReviewModel.post_id == post.id)
            .order_by(ProductReviewModel.created_at.asc())
        )
        post.product_reviews = [
            ProductReviewRepositoryImpl.to_entity(m) for m in reviews.scalars().all()
        ]

        featured = await self.session.execute(
            select(FeaturedProductModel)
            .where(FeaturedProductModel.post_id == post.id)
            .order_by(FeaturedProductModel.created_at.asc())
        )
        post.featured_products = [
            FeaturedProductRepositoryImpl.to_entity(m) for m in featured.scalars().all()
        ]

    # =========================================================================
    # Entity <-> Model mapping
    # =========================================================================

    def _to_model(self, entity: Post) -> PostModel:
        return PostModel(
            id=entity.id,
            title=entity.title,
            slug=entity.slug,
            excerpt=entity.excerpt,
            content=entity.content,
            hero_image=entity.hero_image,
            status=entity.status.value,
            seo_title=entity.seo_title,
            seo_description=entity.seo_description,
            seo_keywords=entity.seo_keywords,
            focus_keyword=entity.focus_keyword,
            reading_time=entity.reading_time,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _to_entity(self, model: PostModel) -> Post:
        return Post(
            id=model.id,
            title=model.title,
            slug=model.slug,
            excerpt=model.excerpt,
            content=model.content or "",
            hero_image=model.hero_image,
            status=PostStatus(model.status),
            seo_title=model.seo_title,
            seo_description=model.seo_description,
            seo_keywords=model.seo_keywords,
            focus_keyword=model.focus_keyword,
            reading_time=model.reading_time,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
