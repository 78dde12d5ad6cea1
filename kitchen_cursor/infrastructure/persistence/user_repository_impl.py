"""
PostgreSQL repository for back-office users.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.domain.entities.admin_user import AdminUser, UserRole
from kitchen_cursor.domain.repositories.user_repository import IUserRepository
from kitchen_cursor.infrastructure.persistence.models import AdminUserModel
from kitchen_cursor.infrastructure.persistence.session_utils import commit_or_rollback


class UserRepositoryImpl(IUserRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, user: AdminUser) -> AdminUser:
        model = AdminUserModel(
            id=user.id,
            email=user.email,
            hashed_password=user.hashed_password,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at,
        )
        self.session.add(model)
        await commit_or_rollback(
            self.session, "Save user", duplicate_message=f"User with email {user.email} already exists"
        )
        return user

    async def find_by_email(self, email: str) -> Optional[AdminUser]:
        result = await self.session.execute(
            select(AdminUserModel).where(AdminUserModel.email == email.strip().lower())
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return AdminUser(
            id=model.id,
            email=model.email,
            hashed_password=model.hashed_password,
            role=UserRole(model.role),
            is_active=bool(model.is_active),
            created_at=model.created_at,
        )
