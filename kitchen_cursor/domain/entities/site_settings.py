# -*- coding: utf-8 -*-
"""
Domain entity: SiteSettings

Process-wide site configuration. Exactly one record exists, stored under
SITE_SETTINGS_ID; it is created with the defaults below on first read.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Optional

from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError

SITE_SETTINGS_ID = 1

DEFAULT_FOOTER_ABOUT = (
    "Discover in-depth product reviews, expert insights, and buying guides to help you "
    "make informed decisions on the products that matter most. From kitchen gadgets to "
    "tech gear, we test everything so you don't have to."
)

DEFAULT_TERMS = """## Terms of Use

Welcome to Kitchen Cursor. By accessing our website, you agree to these terms and conditions.

### 1. Acceptance of Terms
By using this website, you accept and agree to be bound by the terms and provision of this agreement.

### 2. Use License
Permission is granted to temporarily download one copy of the materials on Kitchen Cursor's website for personal, non-commercial transitory viewing only.

### 3. Disclaimer
The materials on Kitchen Cursor's website are provided on an 'as is' basis. Kitchen Cursor makes no warranties, expressed or implied.

### 4. Limitations
In no event shall Kitchen Cursor or its suppliers be liable for any damages arising out of the use or inability to use the materials on Kitchen Cursor's website.

### 5. Site Terms of Use Modifications
Kitchen Cursor may revise these terms of use for its website at any time without notice."""

DEFAULT_PRIVACY = """## Privacy Policy

Your privacy is important to us. This privacy policy explains how we collect, use, and protect your information.

### 1. Information We Collect
We collect information you provide directly to us, such as when you subscribe to our newsletter or contact us.

### 2. Cookies and Tracking Technologies
We use cookies and similar tracking technologies to track activity on our service and hold certain information.

### 3. Third-Party Services
Our website contains affiliate links to third-party websites. We are not responsible for the privacy practices of these external sites.

### 4. Contact Us
If you have any questions about this Privacy Policy, please contact us at the email address provided on our website."""


@dataclass
class SiteSettings:
    """Site settings singleton."""

    id: int = SITE_SETTINGS_ID

    # =========================================================================
    # Branding
    # =========================================================================
    logo_text: str = "Kitchen Cursor"
    logo_image: Optional[str] = None
    use_logo_image: bool = False

    # =========================================================================
    # Social links
    # =========================================================================
    facebook_url: Optional[str] = None
    twitter_url: Optional[str] = None
    instagram_url: Optional[str] = None
    tiktok_url: Optional[str] = None
    youtube_url: Optional[str] = None
    linkedin_url: Optional[str] = None

    # =========================================================================
    # Footer / contact
    # =========================================================================
    footer_about_text: str = DEFAULT_FOOTER_ABOUT
    contact_email: str = "contact@kitchencursor.com"

    # =========================================================================
    # SEO defaults and hero copy
    # =========================================================================
    seo_title: str = "Kitchen Cursor - Product Reviews & Tech Blog"
    seo_description: str = (
        "Discover in-depth product reviews, tech insights, and buying guides "
        "to help you make informed decisions."
    )
    seo_keywords: str = "product reviews, tech blog, buying guides, affiliate marketing"
    hero_title: str = "Discover Amazing Products"
    hero_description: str = (
        "In-depth reviews, expert insights, and buying guides to help you make "
        "informed decisions on the products that matter most."
    )

    # =========================================================================
    # Legal pages
    # =========================================================================
    terms_content: str = DEFAULT_TERMS
    privacy_content: str = DEFAULT_PRIVACY

    updated_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def editable_fields(cls) -> set:
        return {f.name for f in fields(cls)} - {'id', 'updated_at'}

    def apply_patch(self, patch: dict) -> None:
        """
        Apply a partial update.

        Raises:
            DomainValidationError: On unknown fields or an empty logo text
        """
        unknown = set(patch) - self.editable_fields()
        if unknown:
            raise DomainValidationError(f"Unknown site settings fields: {sorted(unknown)}")

        for name, value in patch.items():
            setattr(self, name, value)

        if not self.logo_text or not self.logo_text.strip():
            raise DomainValidationError("Logo text cannot be empty")

        self.updated_at = datetime.utcnow()
