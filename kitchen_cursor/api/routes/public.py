"""
FastAPI Routes: public site reads.
"""

from typing import List

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import get_post_service, get_site_settings_service
from kitchen_cursor.api.schemas.post_schemas import PostResponse
from kitchen_cursor.api.schemas.site_settings_schemas import SiteSettingsResponse
from kitchen_cursor.application.services.post_service import PostService
from kitchen_cursor.application.services.site_settings_service import SiteSettingsService

router = APIRouter(tags=["public"])


@router.get("/site-settings", response_model=SiteSettingsResponse)
async def public_site_settings(service: SiteSettingsService = Depends(get_site_settings_service)):
    return SiteSettingsResponse.from_entity(await service.get_or_create())


@router.get("/posts", response_model=List[PostResponse])
async def published_posts(
    limit: int = 20,
    offset: int = 0,
    service: PostService = Depends(get_post_service)
):
    posts = await service.list_published(limit=limit, offset=offset)
    return [PostResponse.from_entity(p) for p in posts]


@router.get("/posts/{slug}", response_model=PostResponse)
async def published_post(slug: str, service: PostService = Depends(get_post_service)):
    """Published post with its published reviews and featured products."""
    return PostResponse.from_entity(await service.get_published(slug))
