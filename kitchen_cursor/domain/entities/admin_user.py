"""
Domain entity: AdminUser

Authenticated principal of the admin API.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"


@dataclass
class AdminUser:
    """Back-office user."""

    email: str
    hashed_password: str
    role: UserRole = UserRole.ADMIN
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.email or "@" not in self.email:
            raise DomainValidationError(f"Invalid email: {self.email!r}")
        self.email = self.email.strip().lower()

    @property
    def is_admin(self) -> bool:
        return self.is_active and self.role == UserRole.ADMIN
