# -*- coding: utf-8 -*-
"""
SQLAlchemy models - infrastructure layer.

Foreign keys from product_reviews and featured_products to posts carry no
ON DELETE CASCADE: post deletion removes children explicitly, reviews first.
"""

from datetime import datetime
import uuid

from sqlalchemy import (
    Column, String, Text, DateTime, Boolean, Float, Integer,
    ForeignKey, CheckConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class PostModel(Base):
    """SQLAlchemy model of a post."""

    __tablename__ = "posts"

    # =========================================================================
    # Main fields
    # =========================================================================
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(500), nullable=False)
    slug = Column(String(500), nullable=False, unique=True, index=True)
    excerpt = Column(Text)
    content = Column(Text, nullable=False, default="")
    hero_image = Column(String(2048))
    status = Column(String(20), nullable=False, default="DRAFT", index=True)

    # =========================================================================
    # SEO
    # =========================================================================
    seo_title = Column(String(200), comment="SEO title (50-60 chars)")
    seo_description = Column(Text, comment="Meta description (150-160 chars)")
    seo_keywords = Column(Text, comment="Comma-separated keywords")
    focus_keyword = Column(String(200))
    reading_time = Column(Integer, comment="Minutes at 200 words/minute")

    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<PostModel(id={self.id}, slug='{self.slug}')>"


class ProductReviewModel(Base):
    """SQLAlchemy model of a product review."""

    __tablename__ = "product_reviews"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_product_reviews_rating"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_title = Column(String(500), nullable=False)
    product_image = Column(String(2048))
    product_link = Column(String(2048))
    rating = Column(Float, nullable=False, default=5.0)
    review_content = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="PUBLISHED", index=True)
    post_id = Column(UUID(as_uuid=True), ForeignKey("posts.id"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ProductReviewModel(id={self.id}, product='{self.product_title[:40]}')>"


class FeaturedProductModel(Base):
    """SQLAlchemy model of a curated featured product."""

    __tablename__ = "featured_products"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_featured_products_rating"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_name = Column(String(500), nullable=False)
    product_image = Column(String(2048), nullable=False)
    product_link = Column(String(2048), nullable=False)
    price = Column(String(50))
    rating = Column(Float, nullable=False, default=5.0)
    description = Column(Text, nullable=False)
    post_id = Column(UUID(as_uuid=True), ForeignKey("posts.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)


class SiteSettingsModel(Base):
    """
    Site settings singleton.

    The primary key is always SITE_SETTINGS_ID, so a second row cannot
    be created by concurrent first reads.
    """

    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, autoincrement=False)

    logo_text = Column(String(200), nullable=False)
    logo_image = Column(String(2048))
    use_logo_image = Column(Boolean, default=False)

    facebook_url = Column(String(2048))
    twitter_url = Column(String(2048))
    instagram_url = Column(String(2048))
    tiktok_url = Column(String(2048))
    youtube_url = Column(String(2048))
    linkedin_url = Column(String(2048))

    footer_about_text = Column(Text)
    contact_email = Column(String(255))

    seo_title = Column(String(200))
    seo_description = Column(Text)
    seo_keywords = Column(Text)
    hero_title = Column(String(500))
    hero_description = Column(Text)

    terms_content = Column(Text)
    privacy_content = Column(Text)

    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)


class AdminUserModel(Base):
    """Back-office user."""

    __tablename__ = "admin_users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="ADMIN")
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
