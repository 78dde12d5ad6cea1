"""
PostgreSQL repository for featured products.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.domain.entities.featured_product import FeaturedProduct
from kitchen_cursor.domain.repositories.featured_product_repository import IFeaturedProductRepository
from kitchen_cursor.infrastructure.persistence.models import FeaturedProductModel
from kitchen_cursor.infrastructure.persistence.session_utils import commit_or_rollback
from kitchen_cursor.shared.exceptions.domain_exceptions import EntityNotFoundError


class FeaturedProductRepositoryImpl(IFeaturedProductRepository):
    """Featured product repository adapter."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, product: FeaturedProduct) -> FeaturedProduct:
        model = FeaturedProductModel(
            id=product.id,
            product_name=product.product_name,
            product_image=product.product_image,
            product_link=product.product_link,
            price=product.price,
            rating=product.rating,
            description=product.description,
            post_id=product.post_id,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
        self.session.add(model)
        await commit_or_rollback(self.session, "Save featured product")
        await self.session.refresh(model)
        return self.to_entity(model)

    async def update(self, product: FeaturedProduct) -> FeaturedProduct:
        model = await self.session.get(FeaturedProductModel, product.id)
        if model is None:
            raise EntityNotFoundError("FeaturedProduct", product.id)

        model.product_name = product.product_name
        model.product_image = product.product_image
        model.product_link = product.product_link
        model.price = product.price
        model.rating = product.rating
        model.description = product.description
        model.updated_at = product.updated_at

        await commit_or_rollback(self.session, "Update featured product")
        await self.session.refresh(model)
        return self.to_entity(model)

    async def find_by_id(self, product_id: UUID) -> Optional[FeaturedProduct]:
        model = await self.session.get(FeaturedProductModel, product_id)
        return self.to_entity(model) if model else None

    async def find_by_post(self, post_id: UUID) -> List[FeaturedProduct]:
        result = await self.session.execute(
            select(FeaturedProductModel)
            .where(FeaturedProductModel.post_id == post_id)
            .order_by(FeaturedProductModel.created_at.asc())
        )
        return [self.to_entity(m) for m in result.scalars().all()]

    async def delete(self, product_id: UUID) -> bool:
        model = await self.session.get(FeaturedProductModel, product_id)
        if model:
            await self.session.delete(model)
            await commit_or_rollback(self.session, "Delete featured product")
            return True
        return False

    async def delete_by_post(self, post_id: UUID) -> int:
        result = await self.session.execute(
            delete(FeaturedProductModel).where(FeaturedProductModel.post_id == post_id)
        )
        await commit_or_rollback(self.session, "Delete featured products of post")
        return result.rowcount or 0

    @staticmethod
    def to_entity(model: FeaturedProductModel) -> FeaturedProduct:
        return FeaturedProduct(
            id=model.id,
            post_id=model.post_id,
            product_name=model.product_name,
            product_image=model.product_image,
            product_link=model.product_link,
            price=model.price,
            rating=model.rating,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
