"""
Pydantic schemas: featured products.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from kitchen_cursor.domain.entities.featured_product import FeaturedProduct


class CreateFeaturedProductRequest(BaseModel):
    post_id: UUID
    product_name: str = Field(..., max_length=500)
    product_image: str = Field(..., max_length=2048)
    product_link: str = Field(..., max_length=2048)
    description: str
    price: Optional[str] = Field(None, max_length=50)
    rating: Optional[float] = None


class UpdateFeaturedProductRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_name: Optional[str] = Field(None, max_length=500)
    product_image: Optional[str] = Field(None, max_length=2048)
    product_link: Optional[str] = Field(None, max_length=2048)
    description: Optional[str] = None
    price: Optional[str] = Field(None, max_length=50)
    rating: Optional[float] = None


class FeaturedProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    post_id: UUID
    product_name: str
    product_image: str
    product_link: str
    description: str
    price: Optional[str]
    rating: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: FeaturedProduct) -> "FeaturedProductResponse":
        return cls(
            id=entity.id,
            post_id=entity.post_id,
            product_name=entity.product_name,
            product_image=entity.product_image,
            product_link=entity.product_link,
            description=entity.description,
            price=entity.price,
            rating=entity.rating,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
