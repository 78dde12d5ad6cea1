"""
Repository Interface: IPostRepository

Port for post storage. Adapters live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Set
from uuid import UUID

from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.value_objects.post_status import PostStatus


class IPostRepository(ABC):
    """Post repository interface."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """
        Insert a new post.

        Args:
            post: Post to store

        Returns:
            Stored post

        Raises:
            DuplicateEntityError: If the slug is already taken
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """
        Persist changes of an existing post.

        Raises:
            EntityNotFoundError: If the post no longer exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: UUID, with_relations: bool = False) -> Optional[Post]:
        """
        Find a post by ID.

        Args:
            post_id: Post UUID
            with_relations: Load product reviews and featured products too

        Returns:
            Post or None
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str, with_relations: bool = False) -> Optional[Post]:
        """Find a post by slug."""
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[PostStatus] = None,
        limit: int = 100,
        offset: int = 0
    ) -> List[Post]:
        """
        List posts, most recently updated first.

        Args:
            status: Status filter
            limit: Max rows
            offset: Offset
        """
        pass

    @abstractmethod
    async def find_review_queue(self) -> List[Post]:
        """
        Posts waiting for moderation.

        Returns:
            Posts in REVIEW, newest first, each carrying only its own
            REVIEW-status product reviews
        """
        pass

    @abstractmethod
    async def get_all_slugs(self) -> Set[str]:
        """Snapshot of every slug currently in use."""
        pass

    @abstractmethod
    async def delete(self, post_id: UUID) -> bool:
        """
        Delete a post row.

        Returns:
            True if a row was deleted
        """
        pass
