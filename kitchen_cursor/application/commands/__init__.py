"""
Application commands.
"""

from kitchen_cursor.application.commands.post_commands import (
    GeneratePostCommand,
    CreatePostCommand,
    UpdatePostCommand,
)
from kitchen_cursor.application.commands.review_commands import (
    CreateProductReviewCommand,
    UpdateProductReviewCommand,
)
from kitchen_cursor.application.commands.featured_product_commands import (
    CreateFeaturedProductCommand,
    UpdateFeaturedProductCommand,
)

__all__ = [
    'GeneratePostCommand',
    'CreatePostCommand',
    'UpdatePostCommand',
    'CreateProductReviewCommand',
    'UpdateProductReviewCommand',
    'CreateFeaturedProductCommand',
    'UpdateFeaturedProductCommand',
]
