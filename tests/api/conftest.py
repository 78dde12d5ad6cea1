"""
API fixtures: the FastAPI app wired to in-memory repositories.
"""

import pytest
from fastapi.testclient import TestClient

from kitchen_cursor.api.dependencies import (
    get_auth_service,
    get_featured_product_service,
    get_moderation_service,
    get_orchestrator,
    get_post_service,
    get_review_service,
    get_site_settings_service,
)
from kitchen_cursor.application.services.auth_service import AuthService
from kitchen_cursor.application.services.featured_product_service import FeaturedProductService
from kitchen_cursor.application.services.moderation_service import ModerationService
from kitchen_cursor.application.services.post_service import PostService
from kitchen_cursor.application.services.product_review_service import ProductReviewService
from kitchen_cursor.application.services.site_settings_service import SiteSettingsService
from kitchen_cursor.infrastructure.security.auth_utils import create_access_token
from kitchen_cursor.main import app


@pytest.fixture
def client(post_repo, review_repo, featured_repo, site_settings_repo, user_repo, orchestrator):
    app.dependency_overrides = {
        get_post_service: lambda: PostService(post_repo),
        get_review_service: lambda: ProductReviewService(review_repo, post_repo),
        get_moderation_service: lambda: ModerationService(post_repo, review_repo, featured_repo),
        get_featured_product_service: lambda: FeaturedProductService(featured_repo, post_repo),
        get_site_settings_service: lambda: SiteSettingsService(site_settings_repo),
        get_auth_service: lambda: AuthService(user_repo),
        get_orchestrator: lambda: orchestrator,
    }
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin@example.com', 'ADMIN')}"}


@pytest.fixture
def editor_headers():
    return {"Authorization": f"Bearer {create_access_token('editor@example.com', 'EDITOR')}"}
