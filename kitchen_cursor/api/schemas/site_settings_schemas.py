"""
Pydantic schemas: site settings.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from kitchen_cursor.domain.entities.site_settings import SiteSettings


class SiteSettingsResponse(BaseModel):
    id: int
    logo_text: str
    logo_image: Optional[str]
    use_logo_image: bool
    facebook_url: Optional[str]
    twitter_url: Optional[str]
    instagram_url: Optional[str]
    tiktok_url: Optional[str]
    youtube_url: Optional[str]
    linkedin_url: Optional[str]
    footer_about_text: Optional[str]
    contact_email: Optional[str]
    seo_title: Optional[str]
    seo_description: Optional[str]
    seo_keywords: Optional[str]
    hero_title: Optional[str]
    hero_description: Optional[str]
    terms_content: Optional[str]
    privacy_content: Optional[str]
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: SiteSettings) -> "SiteSettingsResponse":
        return cls(**asdict(entity))


class UpdateSiteSettingsRequest(BaseModel):
    """Partial update; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    logo_text: Optional[str] = Field(None, max_length=200)
    logo_image: Optional[str] = None
    use_logo_image: Optional[bool] = None
    facebook_url: Optional[str] = None
    twitter_url: Optional[str] = None
    instagram_url: Optional[str] = None
    tiktok_url: Optional[str] = None
    youtube_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    footer_about_text: Optional[str] = None
    contact_email: Optional[str] = Field(None, max_length=255)
    seo_title: Optional[str] = Field(None, max_length=200)
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    hero_title: Optional[str] = Field(None, max_length=500)
    hero_description: Optional[str] = None
    terms_content: Optional[str] = None
    privacy_content: Optional[str] = None
