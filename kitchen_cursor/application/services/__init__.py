"""
Application services.
"""

from kitchen_cursor.application.services.post_service import PostService
from kitchen_cursor.application.services.product_review_service import ProductReviewService
from kitchen_cursor.application.services.moderation_service import ModerationService
from kitchen_cursor.application.services.featured_product_service import FeaturedProductService
from kitchen_cursor.application.services.site_settings_service import SiteSettingsService
from kitchen_cursor.application.services.auth_service import AuthService

__all__ = [
    'PostService',
    'ProductReviewService',
    'ModerationService',
    'FeaturedProductService',
    'SiteSettingsService',
    'AuthService',
]
