"""
Authentication Service.

Issues access tokens for back-office users.
"""

import logging

from kitchen_cursor.domain.entities.admin_user import AdminUser, UserRole
from kitchen_cursor.domain.repositories.user_repository import IUserRepository
from kitchen_cursor.infrastructure.security.auth_utils import (
    create_access_token,
    hash_password,
    verify_password,
)
from kitchen_cursor.shared.exceptions.application_exceptions import UnauthorizedError
from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class AuthService:

    def __init__(self, repository: IUserRepository):
        self.repository = repository

    async def authenticate(self, email: str, password: str) -> str:
        """
        Check credentials and return an access token.

        Raises:
            UnauthorizedError: Unknown user, wrong password or inactive user
        """
        user = await self.repository.find_by_email(email or "")
        if user is None or not verify_password(password, user.hashed_password):
            logger.warning(f"[Auth] Failed login for {email}")
            raise UnauthorizedError("Incorrect email or password")
        if not user.is_active:
            raise UnauthorizedError("User is inactive")

        logger.info(f"[Auth] Login: {user.email}")
        return create_access_token(user.email, user.role.value)

    async def create_user(self, email: str, password: str, role: UserRole = UserRole.ADMIN) -> AdminUser:
        """
        Raises:
            DomainValidationError: Invalid email or too short password
            DuplicateEntityError: If the email is taken
        """
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        user = AdminUser(email=email, hashed_password=hash_password(password), role=role)
        saved = await self.repository.save(user)
        logger.info(f"[Auth] Created {saved.role.value} user {saved.email}")
        return saved
