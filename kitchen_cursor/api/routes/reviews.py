"""
FastAPI Routes: product reviews.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import (
    get_current_admin,
    get_moderation_service,
    get_review_service,
)
from kitchen_cursor.api.schemas.review_schemas import (
    CreateProductReviewRequest,
    ProductReviewResponse,
    UpdateProductReviewRequest,
)
from kitchen_cursor.application.commands.review_commands import (
    CreateProductReviewCommand,
    UpdateProductReviewCommand,
)
from kitchen_cursor.application.services.moderation_service import ModerationService
from kitchen_cursor.application.services.product_review_service import ProductReviewService

router = APIRouter(
    prefix="/admin",
    tags=["reviews"],
    dependencies=[Depends(get_current_admin)],
)


@router.post("/products", response_model=ProductReviewResponse, status_code=201)
async def create_review(
    request: CreateProductReviewRequest,
    service: ProductReviewService = Depends(get_review_service)
):
    """Manual review entry."""
    review = await service.create_review(CreateProductReviewCommand(**request.model_dump()))
    return ProductReviewResponse.from_entity(review)


@router.put("/reviews/{review_id}", response_model=ProductReviewResponse)
async def update_review(
    review_id: UUID,
    request: UpdateProductReviewRequest,
    service: ProductReviewService = Depends(get_review_service)
):
    """Partial update; ``status`` allows approval (REVIEW -> PUBLISHED) only."""
    changes, status = request.split()
    review = await service.update_review(
        UpdateProductReviewCommand(review_id=review_id, changes=changes, status=status)
    )
    return ProductReviewResponse.from_entity(review)


@router.delete("/reviews/{review_id}")
async def delete_review(
    review_id: UUID,
    moderation: ModerationService = Depends(get_moderation_service)
):
    await moderation.delete_review(review_id)
    return {"success": True}
