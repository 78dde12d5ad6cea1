# -*- coding: utf-8 -*-
"""
Post generation orchestrator.

Steps, strictly in this order:
1. hero image        (fallback: default stock image)
2. article           (fallback: templated article built from the topic)
3. slug allocation
4. post persisted with status REVIEW (durability checkpoint)
5. product search    (fallback: no products)
6. one review per product, each failure isolated

Only steps 3-4 are fatal. Every write commits on its own, so work done
before a later failure stays in the database.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from kitchen_cursor.application.ai_services.agents.article_writer_agent import ArticleWriterAgent
from kitchen_cursor.application.generation.review_synthesizer import ProductReviewSynthesizer
from kitchen_cursor.application.services.slug_allocation import save_with_unique_slug
from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.value_objects.article_draft import (
    ArticleDraft,
    ArticleSource,
    FallbackArticle,
    MAX_TOPIC_LENGTH,
)
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.slug import generate_slug
from kitchen_cursor.infrastructure.catalog.product_catalog import CatalogProduct, ProductCatalog
from kitchen_cursor.infrastructure.catalog.stock_photos import StockPhotoService
from kitchen_cursor.shared.exceptions.domain_exceptions import DomainValidationError
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import InternalError

logger = logging.getLogger(__name__)

DEFAULT_HERO_IMAGE = "https://images.unsplash.com/photo-1486312338219-ce68d2c6f44d?w=1024&h=1024&fit=crop"
MAX_TITLE_LENGTH = 500


@dataclass
class GenerationReport:
    """Outcome of one generation run."""
    post: Post
    reviews: List[ProductReview] = field(default_factory=list)
    article_source: ArticleSource = ArticleSource.GENERATED
    hero_fallback: bool = False
    products_found: int = 0
    failed_products: List[str] = field(default_factory=list)
    step_durations: Dict[str, float] = field(default_factory=dict)

    @property
    def used_fallback(self) -> bool:
        return self.hero_fallback or self.article_source == ArticleSource.FALLBACK


class GenerationOrchestrator:
    """
    Generates one post with product reviews from a topic.

    Blocking collaborators (stock photos, article writer, catalog) are
    called through asyncio.to_thread.
    """

    def __init__(
            self,
            post_repository: IPostRepository,
            synthesizer: ProductReviewSynthesizer,
            article_writer: ArticleWriterAgent,
            stock_photos: Optional[StockPhotoService] = None,
            product_catalog: Optional[ProductCatalog] = None,
            max_products: int = 3,
            default_hero_image: str = DEFAULT_HERO_IMAGE,
            slug_max_attempts: int = 5
    ):
        self.posts = post_repository
        self.synthesizer = synthesizer
        self.article_writer = article_writer
        self.stock_photos = stock_photos or StockPhotoService()
        self.product_catalog = product_catalog or ProductCatalog()
        self.max_products = max_products
        self.default_hero_image = default_hero_image
        self.slug_max_attempts = slug_max_attempts

    async def generate(self, topic: str) -> GenerationReport:
        """
        Run the pipeline for a topic.

        Raises:
            DomainValidationError: Topic is empty or longer than
                MAX_TOPIC_LENGTH (nothing is called)
            InternalError: The post could not be stored
        """
        if not isinstance(topic, str) or not topic.strip():
            raise DomainValidationError("Topic is required")
        topic = topic.strip()
        if len(topic) > MAX_TOPIC_LENGTH:
            raise DomainValidationError(f"Topic too long (max {MAX_TOPIC_LENGTH} chars)")

        start_time = time.time()
        durations: Dict[str, float] = {}
        logger.info(f"[Orchestrator] Generating post for topic: {topic[:80]}")

        # =========================================================
        # STEP 1: Hero image
        # =========================================================
        logger.info("[Orchestrator] Step 1: Hero image...")
        step_start = time.time()
        hero_image, hero_fallback = await self._hero_image(topic)
        durations['hero_image'] = time.time() - step_start

        # =========================================================
        # STEP 2: Article
        # =========================================================
        logger.info("[Orchestrator] Step 2: Article...")
        step_start = time.time()
        draft = await self._article(topic)
        durations['article'] = time.time() - step_start
        logger.info(f"[Orchestrator] Article ({draft.source.value}): {draft.title[:60]}")

        # =========================================================
        # STEPS 3-4: Slug + post (checkpoint)
        # =========================================================
        logger.info("[Orchestrator] Steps 3-4: Slug and post...")
        step_start = time.time()
        post = await self._persist_post(draft, hero_image)
        durations['post'] = time.time() - step_start
        logger.info(f"[Orchestrator] Post stored: {post.id} ({post.slug})")

        report = GenerationReport(
            post=post,
            article_source=draft.source,
            hero_fallback=hero_fallback,
            step_durations=durations,
        )

        # =========================================================
        # STEP 5: Products
        # =========================================================
        logger.info("[Orchestrator] Step 5: Product search...")
        step_start = time.time()
        products = await self._products(topic)
        report.products_found = len(products)
        durations['products'] = time.time() - step_start

        # =========================================================
        # STEP 6: Reviews
        # =========================================================
        logger.info(f"[Orchestrator] Step 6: Reviews for {len(products)} products...")
        step_start = time.time()
        for product in products:
            try:
                review = await self.synthesizer.synthesize(product, post.id)
                report.reviews.append(review)
            except Exception as e:
                report.failed_products.append(product.title)
                logger.warning(f"[Orchestrator] Review skipped for '{product.title}': {e}")
        durations['reviews'] = time.time() - step_start

        post.product_reviews = list(report.reviews)
        durations['total'] = time.time() - start_time

        logger.info(
            f"[Orchestrator] Done in {durations['total']:.1f}s: "
            f"{len(report.reviews)} reviews, {len(report.failed_products)} skipped, "
            f"fallback={report.used_fallback}"
        )
        return report

    # =========================================================================
    # Steps
    # =========================================================================

    async def _hero_image(self, topic: str):
        try:
            url = await asyncio.to_thread(self.stock_photos.hero_image_url, topic)
            if url:
                return url, False
            logger.warning("[Orchestrator] Hero lookup returned nothing, using default")
        except Exception as e:
            logger.warning(f"[Orchestrator] Hero lookup failed, using default: {e}")
        return self.default_hero_image, True

    async def _article(self, topic: str) -> ArticleDraft:
        try:
            article = await asyncio.to_thread(self.article_writer.write, topic)
            if article.title.strip() and article.content.strip() and len(article.title) <= MAX_TITLE_LENGTH:
                return article
            reason = "generated article is empty or has an oversized title"
        except Exception as e:
            reason = str(e)

        logger.warning(f"[Orchestrator] Article generation failed, using fallback: {reason}")
        return FallbackArticle.for_topic(topic, reason=reason)

    async def _persist_post(self, draft: ArticleDraft, hero_image: str) -> Post:
        """Allocate a slug and insert the post; any failure is an InternalError."""

        def build_post(slug: str) -> Post:
            post = Post(
                title=draft.title,
                slug=slug,
                excerpt=draft.excerpt,
                content=draft.content,
                hero_image=hero_image,
                status=PostStatus.REVIEW,
            )
            post.refresh_reading_time()
            return post

        try:
            return await save_with_unique_slug(
                self.posts,
                build_post,
                generate_slug(draft.title),
                max_attempts=self.slug_max_attempts,
            )
        except InternalError:
            logger.error("[Orchestrator] Slug allocation exhausted")
            raise
        except Exception as e:
            logger.error(f"[Orchestrator] Post persistence failed: {e}")
            raise InternalError(f"Failed to store generated post: {e}") from e

    async def _products(self, topic: str) -> List[CatalogProduct]:
        try:
            products = await asyncio.to_thread(self.product_catalog.search, topic)
        except Exception as e:
            logger.warning(f"[Orchestrator] Product search failed, continuing without products: {e}")
            return []
        return list(products or [])[:self.max_products]
