"""
FastAPI Routes: review queues.
"""

from typing import List

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import get_current_admin, get_moderation_service
from kitchen_cursor.api.schemas.post_schemas import PostResponse
from kitchen_cursor.api.schemas.review_schemas import ProductReviewResponse
from kitchen_cursor.application.services.moderation_service import ModerationService

router = APIRouter(
    prefix="/admin",
    tags=["moderation"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/review-queue", response_model=List[PostResponse])
async def review_queue(service: ModerationService = Depends(get_moderation_service)):
    """Posts waiting for review with their pending product reviews."""
    posts = await service.list_review_queue()
    return [PostResponse.from_entity(p) for p in posts]


@router.get("/reviews-queue", response_model=List[ProductReviewResponse])
async def reviews_queue(service: ModerationService = Depends(get_moderation_service)):
    """Product reviews waiting for approval."""
    reviews = await service.list_reviews_queue()
    return [ProductReviewResponse.from_entity(r) for r in reviews]
