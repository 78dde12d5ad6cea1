"""
Application Service for featured products.
"""

import logging
from typing import List
from uuid import UUID

from kitchen_cursor.application.commands.featured_product_commands import (
    CreateFeaturedProductCommand,
    UpdateFeaturedProductCommand,
)
from kitchen_cursor.domain.entities.featured_product import FeaturedProduct
from kitchen_cursor.domain.repositories.featured_product_repository import IFeaturedProductRepository
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.value_objects.rating import DEFAULT_RATING
from kitchen_cursor.shared.exceptions.domain_exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class FeaturedProductService:
    """Curated product highlights attached to posts."""

    def __init__(
        self,
        featured_product_repository: IFeaturedProductRepository,
        post_repository: IPostRepository
    ):
        self.products = featured_product_repository
        self.posts = post_repository

    async def create(self, command: CreateFeaturedProductCommand) -> FeaturedProduct:
        """
        Raises:
            DomainValidationError: Missing fields or bad rating
            EntityNotFoundError: If the post does not exist
        """
        product = FeaturedProduct(
            post_id=command.post_id,
            product_name=command.product_name,
            product_image=command.product_image,
            product_link=command.product_link,
            description=command.description,
            price=command.price,
            rating=command.rating if command.rating is not None else DEFAULT_RATING,
        )
        if await self.posts.find_by_id(command.post_id) is None:
            raise EntityNotFoundError("Post", command.post_id)

        saved = await self.products.save(product)
        logger.info(f"[Featured] Added '{saved.product_name}' to post {saved.post_id}")
        return saved

    async def get(self, product_id: UUID) -> FeaturedProduct:
        product = await self.products.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("FeaturedProduct", product_id)
        return product

    async def list_for_post(self, post_id: UUID) -> List[FeaturedProduct]:
        return await self.products.find_by_post(post_id)

    async def update(self, command: UpdateFeaturedProductCommand) -> FeaturedProduct:
        product = await self.get(command.product_id)
        if command.changes:
            product.apply_changes(**command.changes)
        return await self.products.update(product)

    async def delete(self, product_id: UUID) -> None:
        if not await self.products.delete(product_id):
            raise EntityNotFoundError("FeaturedProduct", product_id)
        logger.info(f"[Featured] Deleted {product_id}")
