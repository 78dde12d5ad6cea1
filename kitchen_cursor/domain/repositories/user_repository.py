"""
Repository Interface: IUserRepository
"""

from abc import ABC, abstractmethod
from typing import Optional

from kitchen_cursor.domain.entities.admin_user import AdminUser


class IUserRepository(ABC):
    """Back-office user storage."""

    @abstractmethod
    async def save(self, user: AdminUser) -> AdminUser:
        """
        Insert a user.

        Raises:
            DuplicateEntityError: If the email is taken
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[AdminUser]:
        pass
