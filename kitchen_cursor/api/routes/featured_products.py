"""
FastAPI Routes: featured products.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import get_current_admin, get_featured_product_service
from kitchen_cursor.api.schemas.featured_product_schemas import (
    CreateFeaturedProductRequest,
    FeaturedProductResponse,
    UpdateFeaturedProductRequest,
)
from kitchen_cursor.application.commands.featured_product_commands import (
    CreateFeaturedProductCommand,
    UpdateFeaturedProductCommand,
)
from kitchen_cursor.application.services.featured_product_service import FeaturedProductService

router = APIRouter(
    prefix="/admin",
    tags=["featured-products"],
    dependencies=[Depends(get_current_admin)],
)


@router.post("/featured-products", response_model=FeaturedProductResponse, status_code=201)
async def create_featured_product(
    request: CreateFeaturedProductRequest,
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    product = await service.create(CreateFeaturedProductCommand(**request.model_dump()))
    return FeaturedProductResponse.from_entity(product)


@router.get("/posts/{post_id}/featured-products", response_model=List[FeaturedProductResponse])
async def list_featured_products(
    post_id: UUID,
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    products = await service.list_for_post(post_id)
    return [FeaturedProductResponse.from_entity(p) for p in products]


@router.get("/featured-products/{product_id}", response_model=FeaturedProductResponse)
async def get_featured_product(
    product_id: UUID,
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    return FeaturedProductResponse.from_entity(await service.get(product_id))


@router.put("/featured-products/{product_id}", response_model=FeaturedProductResponse)
async def update_featured_product(
    product_id: UUID,
    request: UpdateFeaturedProductRequest,
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    command = UpdateFeaturedProductCommand(
        product_id=product_id,
        changes=request.model_dump(exclude_unset=True),
    )
    return FeaturedProductResponse.from_entity(await service.update(command))


@router.delete("/featured-products/{product_id}")
async def delete_featured_product(
    product_id: UUID,
    service: FeaturedProductService = Depends(get_featured_product_service)
):
    await service.delete(product_id)
    return {"success": True}
