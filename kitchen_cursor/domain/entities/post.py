# -*- coding: utf-8 -*-
"""
Domain entity: Post

An article moving through DRAFT / REVIEW / PUBLISHED moderation.
"""

import html
import math
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID, uuid4

from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    InvalidStatusTransition,
)

if TYPE_CHECKING:
    from kitchen_cursor.domain.entities.product_review import ProductReview
    from kitchen_cursor.domain.entities.featured_product import FeaturedProduct

WORDS_PER_MINUTE = 200

_TAG_RE = re.compile(r'<[^>]+>')


def estimate_reading_time(content: str) -> int:
    """Minutes to read HTML content at 200 words/minute, rounded up (min 1)."""
    text = html.unescape(_TAG_RE.sub(' ', content or ''))
    words = len(text.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


@dataclass
class Post:
    """
    Post entity.

    Invariants:
    - title is not empty (max 500 chars)
    - content is a string, never None
    - slug is not empty; uniqueness is enforced by storage
    - reading_time, if set, is a positive number of minutes
    """

    # =========================================================================
    # Identity
    # =========================================================================
    id: UUID = field(default_factory=uuid4)
    title: str = ""
    slug: str = ""

    # =========================================================================
    # Content
    # =========================================================================
    excerpt: Optional[str] = None
    content: str = ""
    hero_image: Optional[str] = None

    # =========================================================================
    # Moderation
    # =========================================================================
    status: PostStatus = PostStatus.DRAFT

    # =========================================================================
    # SEO
    # =========================================================================
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    focus_keyword: Optional[str] = None
    reading_time: Optional[int] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Loaded relations (not persisted through this entity)
    product_reviews: List['ProductReview'] = field(default_factory=list)
    featured_products: List['FeaturedProduct'] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check entity invariants.

        Raises:
            DomainValidationError: If an invariant is broken
        """
        if not self.title or not self.title.strip():
            raise DomainValidationError("Post title cannot be empty")

        if len(self.title) > 500:
            raise DomainValidationError("Post title too long (max 500 chars)")

        if not isinstance(self.content, str):
            raise DomainValidationError("Post content must be text")

        if not self.slug:
            raise DomainValidationError("Post slug cannot be empty")

        if self.reading_time is not None and self.reading_time < 1:
            raise DomainValidationError("Reading time must be at least 1 minute")

    # =========================================================================
    # Business logic
    # =========================================================================

    def change_status(self, new_status: PostStatus) -> None:
        """
        Move the post to another moderation state.

        Raises:
            InvalidStatusTransition: If the transition table forbids it
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransition("Post", self.status.value, new_status.value)
        self.status = new_status
        self.updated_at = datetime.utcnow()

    def apply_changes(self, **changes) -> None:
        """
        Apply a partial update.

        Only known editable fields are accepted. When content changes and no
        explicit reading_time is given, reading time is recomputed.
        """
        editable = {
            'title', 'excerpt', 'content', 'hero_image',
            'seo_title', 'seo_description', 'seo_keywords',
            'focus_keyword', 'reading_time',
        }
        unknown = set(changes) - editable
        if unknown:
            raise DomainValidationError(f"Unknown post fields: {sorted(unknown)}")

        for name, value in changes.items():
            setattr(self, name, value)

        if 'content' in changes and 'reading_time' not in changes:
            self.reading_time = estimate_reading_time(self.content)

        self.validate()
        self.updated_at = datetime.utcnow()

    def refresh_reading_time(self) -> int:
        """Recompute reading time from content."""
        self.reading_time = estimate_reading_time(self.content)
        return self.reading_time

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Post):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Post(id={self.id}, slug='{self.slug}', status={self.status.value})"
