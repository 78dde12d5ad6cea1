"""
Insert a post under a unique slug.

Slugs are allocated from a fresh snapshot of existing slugs. The insert can
still lose a race against another request; the UNIQUE constraint reports
that as DuplicateEntityError and allocation is repeated.
"""

import logging
from typing import Callable

from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.value_objects.slug import ensure_unique_slug
from kitchen_cursor.shared.exceptions.domain_exceptions import DuplicateEntityError
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import InternalError

logger = logging.getLogger(__name__)


async def save_with_unique_slug(
    repository: IPostRepository,
    build_post: Callable[[str], Post],
    base_slug: str,
    max_attempts: int = 5,
) -> Post:
    """
    Args:
        repository: Post storage
        build_post: Builds the post for a given slug
        base_slug: Slug before de-duplication (may be empty)
        max_attempts: Allocation attempts before giving up

    Raises:
        InternalError: If every attempt hit a concurrent duplicate
    """
    for attempt in range(1, max_attempts + 1):
        existing = await repository.get_all_slugs()
        slug = ensure_unique_slug(base_slug, existing)
        try:
            return await repository.save(build_post(slug))
        except DuplicateEntityError:
            logger.warning(f"[Slug] '{slug}' taken concurrently (attempt {attempt}/{max_attempts})")

    raise InternalError(
        f"Could not allocate a unique slug for '{base_slug}' after {max_attempts} attempts"
    )
