"""
FastAPI dependencies for DI and authorization.
"""

import logging
from functools import lru_cache

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.application.ai_services.agents.article_writer_agent import ArticleWriterAgent
from kitchen_cursor.application.ai_services.agents.product_review_agent import ProductReviewAgent
from kitchen_cursor.application.generation.orchestrator import GenerationOrchestrator
from kitchen_cursor.application.generation.review_synthesizer import ProductReviewSynthesizer
from kitchen_cursor.application.services.auth_service import AuthService
from kitchen_cursor.application.services.featured_product_service import FeaturedProductService
from kitchen_cursor.application.services.moderation_service import ModerationService
from kitchen_cursor.application.services.post_service import PostService
from kitchen_cursor.application.services.product_review_service import ProductReviewService
from kitchen_cursor.application.services.site_settings_service import SiteSettingsService
from kitchen_cursor.domain.entities.admin_user import UserRole
from kitchen_cursor.infrastructure.ai.llm_provider import LLMProviderFactory
from kitchen_cursor.infrastructure.catalog.product_catalog import ProductCatalog
from kitchen_cursor.infrastructure.catalog.stock_photos import StockPhotoService
from kitchen_cursor.infrastructure.config.database import get_db_session
from kitchen_cursor.infrastructure.config.settings import get_settings
from kitchen_cursor.infrastructure.persistence.featured_product_repository_impl import (
    FeaturedProductRepositoryImpl,
)
from kitchen_cursor.infrastructure.persistence.post_repository_impl import PostRepositoryImpl
from kitchen_cursor.infrastructure.persistence.product_review_repository_impl import (
    ProductReviewRepositoryImpl,
)
from kitchen_cursor.infrastructure.persistence.site_settings_repository_impl import (
    SiteSettingsRepositoryImpl,
)
from kitchen_cursor.infrastructure.persistence.user_repository_impl import UserRepositoryImpl
from kitchen_cursor.infrastructure.security.auth_utils import decode_access_token
from kitchen_cursor.shared.exceptions.application_exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


# =============================================================================
# Authorization
# =============================================================================

async def get_current_admin(token: str = Depends(oauth2_scheme)) -> str:
    """
    Email of the calling administrator.

    Only the token is inspected, so a rejected caller never reaches the
    database. Deactivation is checked when a token is issued: an admin
    deactivated later keeps access until the token expires
    (access_token_expire_minutes, one hour by default).

    Raises:
        UnauthorizedError: Missing/invalid token or non-admin role
    """
    if not token:
        raise UnauthorizedError()

    try:
        payload = decode_access_token(token)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    subject = payload.get("sub")
    if not subject or payload.get("role") != UserRole.ADMIN.value:
        logger.warning(f"[Auth] Rejected token for {subject!r} (role={payload.get('role')!r})")
        raise UnauthorizedError()

    return subject


# =============================================================================
# Repositories
# =============================================================================

async def get_post_repository(
    session: AsyncSession = Depends(get_db_session)
) -> PostRepositoryImpl:
    return PostRepositoryImpl(session)


async def get_review_repository(
    session: AsyncSession = Depends(get_db_session)
) -> ProductReviewRepositoryImpl:
    return ProductReviewRepositoryImpl(session)


async def get_featured_product_repository(
    session: AsyncSession = Depends(get_db_session)
) -> FeaturedProductRepositoryImpl:
    return FeaturedProductRepositoryImpl(session)


async def get_site_settings_repository(
    session: AsyncSession = Depends(get_db_session)
) -> SiteSettingsRepositoryImpl:
    return SiteSettingsRepositoryImpl(session)


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session)
) -> UserRepositoryImpl:
    return UserRepositoryImpl(session)


# =============================================================================
# Services
# =============================================================================

async def get_post_service(
    repository: PostRepositoryImpl = Depends(get_post_repository)
) -> PostService:
    return PostService(repository, slug_max_attempts=get_settings().slug_max_attempts)


async def get_review_service(
    reviews: ProductReviewRepositoryImpl = Depends(get_review_repository),
    posts: PostRepositoryImpl = Depends(get_post_repository)
) -> ProductReviewService:
    return ProductReviewService(reviews, posts)


async def get_moderation_service(
    posts: PostRepositoryImpl = Depends(get_post_repository),
    reviews: ProductReviewRepositoryImpl = Depends(get_review_repository),
    featured: FeaturedProductRepositoryImpl = Depends(get_featured_product_repository)
) -> ModerationService:
    return ModerationService(posts, reviews, featured)


async def get_featured_product_service(
    featured: FeaturedProductRepositoryImpl = Depends(get_featured_product_repository),
    posts: PostRepositoryImpl = Depends(get_post_repository)
) -> FeaturedProductService:
    return FeaturedProductService(featured, posts)


async def get_site_settings_service(
    repository: SiteSettingsRepositoryImpl = Depends(get_site_settings_repository)
) -> SiteSettingsService:
    return SiteSettingsService(repository)


async def get_auth_service(
    repository: UserRepositoryImpl = Depends(get_user_repository)
) -> AuthService:
    return AuthService(repository)


# =============================================================================
# Generation pipeline
# =============================================================================

@lru_cache()
def get_agents():
    """Article and review agents sharing one provider, built once per process."""
    provider = LLMProviderFactory.create(get_settings())
    return ArticleWriterAgent(llm_provider=provider), ProductReviewAgent(llm_provider=provider)


async def get_orchestrator(
    posts: PostRepositoryImpl = Depends(get_post_repository),
    reviews: ProductReviewRepositoryImpl = Depends(get_review_repository)
) -> GenerationOrchestrator:
    settings = get_settings()
    article_writer, review_agent = get_agents()
    stock_photos = StockPhotoService()

    return GenerationOrchestrator(
        post_repository=posts,
        synthesizer=ProductReviewSynthesizer(reviews, review_agent, stock_photos),
        article_writer=article_writer,
        stock_photos=stock_photos,
        product_catalog=ProductCatalog(),
        max_products=settings.generation_max_products,
        default_hero_image=settings.default_hero_image,
        slug_max_attempts=settings.slug_max_attempts,
    )
