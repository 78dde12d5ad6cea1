"""
FastAPI Routes: admin post management.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import (
    get_current_admin,
    get_moderation_service,
    get_post_service,
)
from kitchen_cursor.api.schemas.post_schemas import (
    CreatePostRequest,
    PostResponse,
    UpdatePostRequest,
)
from kitchen_cursor.application.commands.post_commands import CreatePostCommand, UpdatePostCommand
from kitchen_cursor.application.services.moderation_service import ModerationService
from kitchen_cursor.application.services.post_service import PostService

router = APIRouter(
    prefix="/admin/posts",
    tags=["posts"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    status: Optional[str] = None,
    limit: int = 100,
    offset: int = 0,
    service: PostService = Depends(get_post_service)
):
    """All posts, most recently updated first."""
    posts = await service.list_posts(status=status, limit=limit, offset=offset)
    return [PostResponse.from_entity(p) for p in posts]


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    request: CreatePostRequest,
    service: PostService = Depends(get_post_service)
):
    post = await service.create_post(CreatePostCommand(**request.model_dump()))
    return PostResponse.from_entity(post)


# =============================================================================
# By slug
# =============================================================================

@router.get("/slug/{slug}", response_model=PostResponse)
async def get_post_by_slug(slug: str, service: PostService = Depends(get_post_service)):
    return PostResponse.from_entity(await service.get_post_by_slug(slug))


@router.put("/slug/{slug}", response_model=PostResponse)
async def update_post_by_slug(
    slug: str,
    request: UpdatePostRequest,
    service: PostService = Depends(get_post_service)
):
    changes, status = request.split()
    post = await service.update_post_by_slug(slug, changes, status)
    return PostResponse.from_entity(post)


@router.delete("/slug/{slug}")
async def delete_post_by_slug(
    slug: str,
    moderation: ModerationService = Depends(get_moderation_service)
):
    await moderation.delete_post_by_slug(slug)
    return {"success": True}


# =============================================================================
# By id
# =============================================================================

@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, service: PostService = Depends(get_post_service)):
    """Post with its reviews and featured products."""
    return PostResponse.from_entity(await service.get_post(post_id))


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostRequest,
    service: PostService = Depends(get_post_service)
):
    """Partial update; ``status`` follows the post transition table."""
    changes, status = request.split()
    post = await service.update_post(UpdatePostCommand(post_id=post_id, changes=changes, status=status))
    return PostResponse.from_entity(post)


@router.delete("/{post_id}")
async def delete_post(
    post_id: UUID,
    moderation: ModerationService = Depends(get_moderation_service)
):
    """Delete a post with its product reviews and featured products."""
    await moderation.delete_post(post_id)
    return {"success": True}
