"""
Unit tests for the post generation pipeline.
"""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from kitchen_cursor.application.generation.orchestrator import GenerationOrchestrator
from kitchen_cursor.domain.value_objects.article_draft import (
    ArticleSource,
    GeneratedArticle,
    MAX_TOPIC_LENGTH,
)
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    DuplicateEntityError,
)
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import (
    ExternalServiceError,
    InternalError,
)


@pytest.mark.asyncio
class TestGenerationOrchestrator:

    async def test_happy_path(self, orchestrator, post_repo, review_repo, product_catalog):
        report = await orchestrator.generate("Best Air Fryers")

        post = report.post
        assert post.status == PostStatus.REVIEW
        assert post.title == "Best Air Fryers of the Year"
        assert post.slug == "best-air-fryers-of-the-year"
        assert post.hero_image == "https://images.example.com/hero.jpg"
        assert post.reading_time == 3
        assert report.article_source == ArticleSource.GENERATED
        assert not report.used_fallback

        assert len(report.reviews) == 3
        assert all(r.status == ProductReviewStatus.PUBLISHED for r in report.reviews)
        assert all(r.post_id == post.id for r in report.reviews)
        assert post.product_reviews == report.reviews
        assert post.id in post_repo.rows
        assert len(review_repo.rows) == 3
        product_catalog.search.assert_called_once_with("Best Air Fryers")

    async def test_empty_topic_calls_nothing(self, orchestrator, post_repo, article_writer,
                                             stock_photos, product_catalog):
        for topic in ("", "   ", None):
            with pytest.raises(DomainValidationError):
                await orchestrator.generate(topic)

        article_writer.write.assert_not_called()
        stock_photos.hero_image_url.assert_not_called()
        product_catalog.search.assert_not_called()
        assert post_repo.rows == {}

    async def test_article_failure_uses_fallback(self, orchestrator, article_writer):
        article_writer.write.side_effect = ExternalServiceError("article_writer", "timeout")

        report = await orchestrator.generate("Cast Iron Pans")

        assert report.article_source == ArticleSource.FALLBACK
        assert report.used_fallback
        assert report.post.title == "Ultimate Guide to Cast Iron Pans"
        assert report.post.slug == "ultimate-guide-to-cast-iron-pans"
        assert report.post.status == PostStatus.REVIEW
        assert "Cast Iron Pans" in report.post.content

    async def test_blank_generated_title_uses_fallback(self, orchestrator, article_writer):
        article_writer.write.return_value = GeneratedArticle(title=" ", excerpt="", content="<p>x</p>")

        report = await orchestrator.generate("Knives")

        assert report.article_source == ArticleSource.FALLBACK
        assert report.post.title == "Ultimate Guide to Knives"

    async def test_hero_failure_uses_default_image(self, orchestrator, stock_photos):
        stock_photos.hero_image_url.side_effect = RuntimeError("no network")

        report = await orchestrator.generate("Blenders")

        assert report.hero_fallback
        assert report.post.hero_image == "https://images.example.com/default-hero.jpg"

    async def test_product_search_failure_keeps_post(self, orchestrator, product_catalog, post_repo,
                                                     review_repo):
        product_catalog.search.side_effect = RuntimeError("catalog down")

        report = await orchestrator.generate("Blenders")

        assert report.reviews == []
        assert report.products_found == 0
        assert report.post.status == PostStatus.REVIEW
        assert report.post.id in post_repo.rows
        assert review_repo.rows == {}

    async def test_review_failures_are_isolated(self, orchestrator, review_agent, review_repo):
        good = review_agent.review.return_value
        review_agent.review.side_effect = [good, ExternalServiceError("product_review", "boom"), good]

        report = await orchestrator.generate("Best Air Fryers")

        assert [r.product_title for r in report.reviews] == [
            'Ninja AF161 Max XL Air Fryer',
            'Philips 3000 Series Compact Air Fryer',
        ]
        assert report.failed_products == ['COSORI Pro LE 5-Qt Air Fryer']
        assert len(review_repo.rows) == 2

    async def test_at_most_three_products(self, orchestrator, product_catalog, catalog_products):
        product_catalog.search.return_value = catalog_products * 2

        report = await orchestrator.generate("Best Air Fryers")

        assert report.products_found == 3
        assert len(report.reviews) == 3

    async def test_same_title_gets_suffixed_slug(self, orchestrator):
        first = await orchestrator.generate("Best Air Fryers")
        second = await orchestrator.generate("Best Air Fryers")

        assert first.post.slug == "best-air-fryers-of-the-year"
        assert second.post.slug == "best-air-fryers-of-the-year-2"

    async def test_concurrent_runs_get_distinct_slugs(self, orchestrator, post_repo):
        reports = await asyncio.gather(
            orchestrator.generate("Best Air Fryers"),
            orchestrator.generate("Best Air Fryers"),
        )

        slugs = {r.post.slug for r in reports}
        assert slugs == {"best-air-fryers-of-the-year", "best-air-fryers-of-the-year-2"}
        assert len(post_repo.rows) == 2

    async def test_storage_failure_is_internal_error(self, orchestrator, post_repo, product_catalog):
        post_repo.save = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(InternalError):
            await orchestrator.generate("Blenders")

        product_catalog.search.assert_not_called()

    async def test_slug_allocation_gives_up(self, orchestrator, post_repo, product_catalog):
        post_repo.save = AsyncMock(side_effect=DuplicateEntityError("taken"))

        with pytest.raises(InternalError):
            await orchestrator.generate("Blenders")

        assert post_repo.save.await_count == orchestrator.slug_max_attempts
        product_catalog.search.assert_not_called()

    async def test_custom_product_limit(self, post_repo, synthesizer, article_writer, stock_photos,
                                        product_catalog):
        orchestrator = GenerationOrchestrator(
            post_repository=post_repo,
            synthesizer=synthesizer,
            article_writer=article_writer,
            stock_photos=stock_photos,
            product_catalog=product_catalog,
            max_products=1,
        )

        report = await orchestrator.generate("Best Air Fryers")

        assert len(report.reviews) == 1

    async def test_overlong_topic_calls_nothing(self, orchestrator, post_repo, article_writer,
                                                stock_photos, product_catalog):
        with pytest.raises(DomainValidationError):
            await orchestrator.generate("kitchen " * 62)

        article_writer.write.assert_not_called()
        stock_photos.hero_image_url.assert_not_called()
        product_catalog.search.assert_not_called()
        assert post_repo.rows == {}

    async def test_longest_topic_survives_article_failure(self, orchestrator, article_writer, post_repo):
        article_writer.write.side_effect = ExternalServiceError("article_writer", "timeout")
        topic = ("cast iron " * 30)[:MAX_TOPIC_LENGTH - 1] + "s"

        report = await orchestrator.generate(topic)

        assert report.article_source == ArticleSource.FALLBACK
        assert report.post.title == f"Ultimate Guide to {topic}"
        assert report.post.id in post_repo.rows

    async def test_fallback_escapes_topic_markup(self, orchestrator, article_writer):
        article_writer.write.side_effect = ExternalServiceError("article_writer", "timeout")

        report = await orchestrator.generate('Pots & <script>alert("x")</script>')

        content = report.post.content
        assert "<script>" not in content
        assert "Pots &amp; &lt;script&gt;" in content
        assert report.post.title == 'Ultimate Guide to Pots & <script>alert("x")</script>'

    async def test_steps_logged_in_pipeline_order(self, orchestrator, caplog):
        with caplog.at_level(logging.INFO, logger="kitchen_cursor.application.generation.orchestrator"):
            await orchestrator.generate("Best Air Fryers")

        steps = [r.getMessage() for r in caplog.records if "Step" in r.getMessage()]
        assert steps == [
            "[Orchestrator] Step 1: Hero image...",
            "[Orchestrator] Step 2: Article...",
            "[Orchestrator] Steps 3-4: Slug and post...",
            "[Orchestrator] Step 5: Product search...",
            "[Orchestrator] Step 6: Reviews for 3 products...",
        ]
