"""
Pydantic schemas: product reviews.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from kitchen_cursor.domain.entities.product_review import ProductReview


class CreateProductReviewRequest(BaseModel):
    """Manual review entry; rating defaults to 5 and status to PUBLISHED."""

    product_title: str = Field(..., max_length=500)
    product_image: str = Field(..., max_length=2048)
    product_link: str = Field(..., max_length=2048)
    review_content: str
    rating: Optional[float] = None
    status: Optional[str] = None
    post_id: Optional[UUID] = None


class UpdateProductReviewRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_title: Optional[str] = Field(None, min_length=1, max_length=500)
    product_image: Optional[str] = Field(None, max_length=2048)
    product_link: Optional[str] = Field(None, max_length=2048)
    rating: Optional[float] = None
    review_content: Optional[str] = None
    status: Optional[str] = None

    def split(self):
        changes = self.model_dump(exclude_unset=True)
        status = changes.pop('status', None)
        return changes, status


class PostRef(BaseModel):
    id: UUID
    title: Optional[str] = None


class ProductReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    product_title: str
    product_image: Optional[str]
    product_link: Optional[str]
    rating: float
    review_content: str
    status: str
    post_id: Optional[UUID]
    post: Optional[PostRef] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: ProductReview) -> "ProductReviewResponse":
        post = None
        if entity.post_id and entity.post_title is not None:
            post = PostRef(id=entity.post_id, title=entity.post_title)
        return cls(
            id=entity.id,
            product_title=entity.product_title,
            product_image=entity.product_image,
            product_link=entity.product_link,
            rating=entity.rating,
            review_content=entity.review_content,
            status=entity.status.value,
            post_id=entity.post_id,
            post=post,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
