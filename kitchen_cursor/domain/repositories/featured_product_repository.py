"""
Repository Interface: IFeaturedProductRepository
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from kitchen_cursor.domain.entities.featured_product import FeaturedProduct


class IFeaturedProductRepository(ABC):
    """Featured product repository interface."""

    @abstractmethod
    async def save(self, product: FeaturedProduct) -> FeaturedProduct:
        pass

    @abstractmethod
    async def update(self, product: FeaturedProduct) -> FeaturedProduct:
        pass

    @abstractmethod
    async def find_by_id(self, product_id: UUID) -> Optional[FeaturedProduct]:
        pass

    @abstractmethod
    async def find_by_post(self, post_id: UUID) -> List[FeaturedProduct]:
        pass

    @abstractmethod
    async def delete(self, product_id: UUID) -> bool:
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: UUID) -> int:
        """Delete every featured product of a post, returns the row count."""
        pass
