"""
Unit tests for authentication and access tokens.
"""

import time

import pytest

from kitchen_cursor.application.services.auth_service import AuthService
from kitchen_cursor.domain.entities.admin_user import UserRole
from kitchen_cursor.infrastructure.config.settings import Settings, get_settings
from kitchen_cursor.infrastructure.security.auth_utils import decode_access_token
from kitchen_cursor.shared.exceptions.application_exceptions import UnauthorizedError
from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    DuplicateEntityError,
)


@pytest.fixture
def service(user_repo):
    return AuthService(user_repo)


@pytest.mark.asyncio
class TestAuthService:

    async def test_login_returns_token_with_role(self, service):
        await service.create_user("Admin@Example.com", "correct-horse", UserRole.ADMIN)

        token = await service.authenticate("admin@example.com", "correct-horse")

        payload = decode_access_token(token)
        assert payload["sub"] == "admin@example.com"
        assert payload["role"] == "ADMIN"

    async def test_wrong_password(self, service):
        await service.create_user("admin@example.com", "correct-horse")

        with pytest.raises(UnauthorizedError):
            await service.authenticate("admin@example.com", "wrong-horse")

    async def test_unknown_user(self, service):
        with pytest.raises(UnauthorizedError):
            await service.authenticate("nobody@example.com", "whatever1")

    async def test_inactive_user(self, service, user_repo):
        user = await service.create_user("admin@example.com", "correct-horse")
        user.is_active = False

        with pytest.raises(UnauthorizedError):
            await service.authenticate("admin@example.com", "correct-horse")

    async def test_short_password(self, service):
        with pytest.raises(DomainValidationError):
            await service.create_user("admin@example.com", "short")

    async def test_duplicate_email(self, service):
        await service.create_user("admin@example.com", "correct-horse")

        with pytest.raises(DuplicateEntityError):
            await service.create_user("ADMIN@example.com", "another-horse")

    async def test_token_expires_after_configured_lifetime(self, service):
        await service.create_user("admin@example.com", "correct-horse")

        token = await service.authenticate("admin@example.com", "correct-horse")

        remaining = decode_access_token(token)["exp"] - time.time()
        lifetime = get_settings().access_token_expire_minutes * 60
        assert lifetime - 60 < remaining <= lifetime + 5


def test_default_token_lifetime_is_one_hour():
    assert Settings.model_fields["access_token_expire_minutes"].default == 60
