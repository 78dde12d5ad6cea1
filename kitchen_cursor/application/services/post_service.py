"""
Application Service for posts.
"""

import logging
from typing import List, Optional
from uuid import UUID

from kitchen_cursor.application.commands.post_commands import CreatePostCommand, UpdatePostCommand
from kitchen_cursor.application.services.slug_allocation import save_with_unique_slug
from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.domain.value_objects.slug import generate_slug
from kitchen_cursor.shared.exceptions.domain_exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class PostService:
    """
    Application Service for posts.

    Manual creation, editing and reads. Status changes go through the
    entity transition table; deletion lives in ModerationService.
    """

    def __init__(self, repository: IPostRepository, slug_max_attempts: int = 5):
        self.repository = repository
        self.slug_max_attempts = slug_max_attempts

    async def create_post(self, command: CreatePostCommand) -> Post:
        """
        Create a post (DRAFT unless another status is given).

        Raises:
            DomainValidationError: On invalid fields or status
            InternalError: If no unique slug could be stored
        """
        status = PostStatus.parse(command.status) if command.status else PostStatus.DRAFT

        def build_post(slug: str) -> Post:
            post = Post(
                title=command.title,
                slug=slug,
                excerpt=command.excerpt,
                content=command.content,
                hero_image=command.hero_image,
                status=status,
                seo_title=command.seo_title,
                seo_description=command.seo_description,
                seo_keywords=command.seo_keywords,
                focus_keyword=command.focus_keyword,
                reading_time=command.reading_time,
            )
            if post.reading_time is None:
                post.refresh_reading_time()
            return post

        post = await save_with_unique_slug(
            self.repository,
            build_post,
            generate_slug(command.slug or command.title),
            max_attempts=self.slug_max_attempts,
        )
        logger.info(f"[Posts] Created {post.slug} ({post.status.value})")
        return post

    async def get_post(self, post_id: UUID) -> Post:
        """Post with its reviews and featured products."""
        post = await self.repository.find_by_id(post_id, with_relations=True)
        if post is None:
            raise EntityNotFoundError("Post", post_id)
        return post

    async def get_post_by_slug(self, slug: str) -> Post:
        post = await self.repository.find_by_slug(slug, with_relations=True)
        if post is None:
            raise EntityNotFoundError("Post", slug)
        return post

    async def list_posts(
        self,
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0
    ) -> List[Post]:
        """All posts, most recently updated first."""
        parsed = PostStatus.parse(status) if status else None
        return await self.repository.find_all(status=parsed, limit=limit, offset=offset)

    async def update_post(self, command: UpdatePostCommand) -> Post:
        """
        Apply a partial update.

        The status is parsed before anything changes, so an unknown
        value leaves the post untouched.

        Raises:
            EntityNotFoundError: If the post does not exist
            DomainValidationError: On invalid fields, status or transition
        """
        post = await self.repository.find_by_id(command.post_id)
        if post is None:
            raise EntityNotFoundError("Post", command.post_id)
        return await self._apply_update(post, command.changes, command.status)

    async def update_post_by_slug(self, slug: str, changes: dict, status: Optional[str] = None) -> Post:
        post = await self.repository.find_by_slug(slug)
        if post is None:
            raise EntityNotFoundError("Post", slug)
        return await self._apply_update(post, changes, status)

    async def _apply_update(self, post: Post, changes: dict, status: Optional[str]) -> Post:
        new_status = PostStatus.parse(status) if status is not None else None

        if changes:
            post.apply_changes(**changes)
        if new_status is not None:
            post.change_status(new_status)

        updated = await self.repository.update(post)
        logger.info(f"[Posts] Updated {updated.slug} ({updated.status.value})")
        return updated

    # =========================================================================
    # Public site
    # =========================================================================

    async def list_published(self, limit: int = 20, offset: int = 0) -> List[Post]:
        return await self.repository.find_all(status=PostStatus.PUBLISHED, limit=limit, offset=offset)

    async def get_published(self, slug: str) -> Post:
        """
        Published post with its published reviews and featured products.

        Raises:
            EntityNotFoundError: If missing or not published
        """
        post = await self.repository.find_by_slug(slug, with_relations=True)
        if post is None or not post.status.is_public:
            raise EntityNotFoundError("Post", slug)
        post.product_reviews = [
            r for r in post.product_reviews if r.status == ProductReviewStatus.PUBLISHED
        ]
        return post
