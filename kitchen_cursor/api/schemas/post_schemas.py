"""
Pydantic schemas: posts.
"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from kitchen_cursor.api.schemas.review_schemas import ProductReviewResponse
from kitchen_cursor.api.schemas.featured_product_schemas import FeaturedProductResponse
from kitchen_cursor.domain.entities.post import Post


class CreatePostRequest(BaseModel):
    """Manual post creation."""

    title: str = Field(..., min_length=1, max_length=500)
    content: str
    slug: Optional[str] = Field(None, max_length=500)
    excerpt: Optional[str] = None
    hero_image: Optional[str] = Field(None, max_length=2048)
    status: Optional[str] = None
    seo_title: Optional[str] = Field(None, max_length=200)
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    focus_keyword: Optional[str] = Field(None, max_length=200)
    reading_time: Optional[int] = None


class UpdatePostRequest(BaseModel):
    """Partial post update; only sent fields change."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=500)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    hero_image: Optional[str] = Field(None, max_length=2048)
    status: Optional[str] = None
    seo_title: Optional[str] = Field(None, max_length=200)
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    focus_keyword: Optional[str] = Field(None, max_length=200)
    reading_time: Optional[int] = None

    def split(self):
        """(field changes, status) from the fields that were sent."""
        changes = self.model_dump(exclude_unset=True)
        status = changes.pop('status', None)
        return changes, status


class PostResponse(BaseModel):
    """Post with its reviews and featured products."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    excerpt: Optional[str]
    content: str
    hero_image: Optional[str]
    status: str
    seo_title: Optional[str]
    seo_description: Optional[str]
    seo_keywords: Optional[str]
    focus_keyword: Optional[str]
    reading_time: Optional[int]
    created_at: datetime
    updated_at: datetime
    product_reviews: List[ProductReviewResponse] = []
    featured_products: List[FeaturedProductResponse] = []

    @classmethod
    def from_entity(cls, entity: Post) -> "PostResponse":
        return cls(
            id=entity.id,
            title=entity.title,
            slug=entity.slug,
            excerpt=entity.excerpt,
            content=entity.content,
            hero_image=entity.hero_image,
            status=entity.status.value,
            seo_title=entity.seo_title,
            seo_description=entity.seo_description,
            seo_keywords=entity.seo_keywords,
            focus_keyword=entity.focus_keyword,
            reading_time=entity.reading_time,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            product_reviews=[ProductReviewResponse.from_entity(r) for r in entity.product_reviews],
            featured_products=[FeaturedProductResponse.from_entity(p) for p in entity.featured_products],
        )
