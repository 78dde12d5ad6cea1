"""
Value Object: PostStatus

Moderation status of a post.
"""

from enum import Enum

from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError


class PostStatus(str, Enum):
    """Post lifecycle states."""

    DRAFT = "DRAFT"            # Manual draft
    REVIEW = "REVIEW"          # Waiting for moderation
    PUBLISHED = "PUBLISHED"    # Visible on the public site

    @classmethod
    def parse(cls, value) -> 'PostStatus':
        """
        Convert a raw value into a status.

        Raises:
            DomainValidationError: If the value is not a known status
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise DomainValidationError(f"Invalid status value: {value!r}")

    @property
    def is_public(self) -> bool:
        return self is PostStatus.PUBLISHED

    def can_transition_to(self, new_status: 'PostStatus') -> bool:
        """
        Check whether a transition is allowed.

        Administrators may force any transition, including regression
        to DRAFT:
        - DRAFT -> REVIEW, PUBLISHED
        - REVIEW -> DRAFT, PUBLISHED
        - PUBLISHED -> DRAFT, REVIEW
        """
        transitions = {
            PostStatus.DRAFT: [PostStatus.REVIEW, PostStatus.PUBLISHED],
            PostStatus.REVIEW: [PostStatus.DRAFT, PostStatus.PUBLISHED],
            PostStatus.PUBLISHED: [PostStatus.DRAFT, PostStatus.REVIEW],
        }
        if new_status == self:
            return True
        return new_status in transitions.get(self, [])
