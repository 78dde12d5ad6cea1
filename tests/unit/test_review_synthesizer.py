"""
Unit tests for the product review synthesizer.
"""

import math
import uuid

import pytest

from kitchen_cursor.application.ai_services.agents.product_review_agent import ReviewDraft
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.infrastructure.catalog.product_catalog import CatalogProduct
from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import ExternalServiceError


@pytest.mark.asyncio
class TestProductReviewSynthesizer:

    async def test_stores_published_review(self, synthesizer, review_repo, catalog_products):
        post_id = uuid.uuid4()

        review = await synthesizer.synthesize(catalog_products[0], post_id)

        assert review.status == ProductReviewStatus.PUBLISHED
        assert review.post_id == post_id
        assert review.rating == 4.5
        assert review.product_link == 'https://amazon.com/dp/B07VT23JDM'
        assert review.product_image == 'https://images.example.com/ninja.jpg'
        assert review.id in review_repo.rows

    @pytest.mark.parametrize("raw, stored", [(7, 5.0), (0, 1.0), (3.3, 3.5), (-2, 1.0)])
    async def test_rating_is_clamped(self, synthesizer, review_agent, catalog_products, raw, stored):
        review_agent.review.return_value = ReviewDraft(rating=raw, review_content="Text")

        review = await synthesizer.synthesize(catalog_products[0], uuid.uuid4())

        assert review.rating == stored

    async def test_nan_rating_is_a_generation_failure(self, synthesizer, review_agent, review_repo,
                                                      catalog_products):
        review_agent.review.return_value = ReviewDraft(rating=math.nan, review_content="Text")

        with pytest.raises(ExternalServiceError):
            await synthesizer.synthesize(catalog_products[0], uuid.uuid4())
        assert review_repo.rows == {}

    async def test_missing_image_uses_stock_photo(self, synthesizer, catalog_products, stock_photos):
        review = await synthesizer.synthesize(catalog_products[2], uuid.uuid4())

        assert review.product_image == "https://images.example.com/stock-product.jpg"
        stock_photos.product_image_url.assert_called_once_with('Philips 3000 Series Compact Air Fryer')

    async def test_empty_title_rejected(self, synthesizer, review_agent):
        product = CatalogProduct(title="  ", image="", link="https://amazon.com/dp/X")

        with pytest.raises(DomainValidationError):
            await synthesizer.synthesize(product, uuid.uuid4())
        review_agent.review.assert_not_called()

    async def test_agent_failure_propagates(self, synthesizer, review_agent, review_repo,
                                            catalog_products):
        review_agent.review.side_effect = ExternalServiceError("product_review", "timeout")

        with pytest.raises(ExternalServiceError):
            await synthesizer.synthesize(catalog_products[0], uuid.uuid4())
        assert review_repo.rows == {}
