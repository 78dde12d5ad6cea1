"""
Commands: post generation, creation and update.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from uuid import UUID


@dataclass(frozen=True)
class GeneratePostCommand:
    """Generate a post (with product reviews) from a topic."""
    topic: str


@dataclass(frozen=True)
class CreatePostCommand:
    """
    Manual post creation.

    The slug is derived from the title when not given; it is made unique
    either way.
    """

    # Required
    title: str
    content: str

    # Optional
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    hero_image: Optional[str] = None
    status: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    focus_keyword: Optional[str] = None
    reading_time: Optional[int] = None


@dataclass(frozen=True)
class UpdatePostCommand:
    """
    Partial post update.

    ``changes`` only holds fields that were sent. Changing the title
    keeps the slug.
    """
    post_id: UUID
    changes: Dict[str, Any] = None
    status: Optional[str] = None

    def __post_init__(self):
        if self.changes is None:
            object.__setattr__(self, 'changes', {})
