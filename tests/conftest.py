"""
Shared fixtures: in-memory repositories and generation collaborators.
"""

import asyncio
import copy
from typing import Dict, List, Optional, Set
from unittest.mock import MagicMock
from uuid import UUID

import pytest

from kitchen_cursor.application.ai_services.agents.product_review_agent import ReviewDraft
from kitchen_cursor.application.generation.orchestrator import GenerationOrchestrator
from kitchen_cursor.application.generation.review_synthesizer import ProductReviewSynthesizer
from kitchen_cursor.domain.entities.admin_user import AdminUser
from kitchen_cursor.domain.entities.featured_product import FeaturedProduct
from kitchen_cursor.domain.entities.post import Post
from kitchen_cursor.domain.entities.product_review import ProductReview
from kitchen_cursor.domain.entities.site_settings import SiteSettings
from kitchen_cursor.domain.repositories.featured_product_repository import IFeaturedProductRepository
from kitchen_cursor.domain.repositories.post_repository import IPostRepository
from kitchen_cursor.domain.repositories.product_review_repository import IProductReviewRepository
from kitchen_cursor.domain.repositories.site_settings_repository import ISiteSettingsRepository
from kitchen_cursor.domain.repositories.user_repository import IUserRepository
from kitchen_cursor.domain.value_objects.article_draft import GeneratedArticle
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.infrastructure.catalog.product_catalog import CatalogProduct
from kitchen_cursor.shared.exceptions.domain_exceptions import DuplicateEntityError


# =============================================================================
# In-memory repositories
# =============================================================================

class InMemoryPostRepository(IPostRepository):
    """
    Post storage with a UNIQUE slug check.

    save() yields to the event loop before checking the slug, so concurrent
    callers can race the same way they do against the database.
    """

    def __init__(self, reviews: Optional['InMemoryReviewRepository'] = None,
                 featured: Optional['InMemoryFeaturedProductRepository'] = None):
        self.rows: Dict[UUID, Post] = {}
        self.reviews = reviews
        self.featured = featured
        self.save_calls = 0

    async def save(self, post: Post) -> Post:
        self.save_calls += 1
        await asyncio.sleep(0)
        if any(p.slug == post.slug for p in self.rows.values()):
            raise DuplicateEntityError(f"Slug already exists: {post.slug}")
        self.rows[post.id] = copy.deepcopy(post)
        return copy.deepcopy(post)

    async def update(self, post: Post) -> Post:
        stored = copy.deepcopy(post)
        stored.product_reviews = []
        stored.featured_products = []
        self.rows[post.id] = stored
        return copy.deepcopy(post)

    def _load(self, post: Post, with_relations: bool) -> Post:
        post = copy.deepcopy(post)
        if with_relations:
            if self.reviews is not None:
                post.product_reviews = [
                    copy.deepcopy(r) for r in self.reviews.rows.values() if r.post_id == post.id
                ]
            if self.featured is not None:
                post.featured_products = [
                    copy.deepcopy(p) for p in self.featured.rows.values() if p.post_id == post.id
                ]
        return post

    async def find_by_id(self, post_id: UUID, with_relations: bool = False) -> Optional[Post]:
        post = self.rows.get(post_id)
        return self._load(post, with_relations) if post else None

    async def find_by_slug(self, slug: str, with_relations: bool = False) -> Optional[Post]:
        for post in self.rows.values():
            if post.slug == slug:
                return self._load(post, with_relations)
        return None

    async def find_all(self, status: Optional[PostStatus] = None, limit: int = 100,
                       offset: int = 0) -> List[Post]:
        posts = [p for p in self.rows.values() if status is None or p.status == status]
        posts.sort(key=lambda p: p.updated_at, reverse=True)
        return [copy.deepcopy(p) for p in posts[offset:offset + limit]]

    async def find_review_queue(self) -> List[Post]:
        queue = [p for p in self.rows.values() if p.status == PostStatus.REVIEW]
        queue.sort(key=lambda p: p.created_at, reverse=True)
        result = []
        for post in queue:
            loaded = self._load(post, with_relations=True)
            loaded.product_reviews = [
                r for r in loaded.product_reviews if r.status == ProductReviewStatus.REVIEW
            ]
            result.append(loaded)
        return result

    async def get_all_slugs(self) -> Set[str]:
        return {p.slug for p in self.rows.values()}

    async def delete(self, post_id: UUID) -> bool:
        return self.rows.pop(post_id, None) is not None


class InMemoryReviewRepository(IProductReviewRepository):

    def __init__(self):
        self.rows: Dict[UUID, ProductReview] = {}
        self.posts: Optional[InMemoryPostRepository] = None

    async def save(self, review: ProductReview) -> ProductReview:
        self.rows[review.id] = copy.deepcopy(review)
        return copy.deepcopy(review)

    async def update(self, review: ProductReview) -> ProductReview:
        self.rows[review.id] = copy.deepcopy(review)
        return copy.deepcopy(review)

    async def find_by_id(self, review_id: UUID) -> Optional[ProductReview]:
        review = self.rows.get(review_id)
        return copy.deepcopy(review) if review else None

    async def find_review_queue(self) -> List[ProductReview]:
        queue = []
        for review in self.rows.values():
            if review.status != ProductReviewStatus.REVIEW:
                continue
            review = copy.deepcopy(review)
            if self.posts is not None and review.post_id in self.posts.rows:
                review.post_title = self.posts.rows[review.post_id].title
            queue.append(review)
        queue.sort(key=lambda r: r.created_at, reverse=True)
        return queue

    async def delete(self, review_id: UUID) -> bool:
        return self.rows.pop(review_id, None) is not None

    async def delete_by_post(self, post_id: UUID) -> int:
        ids = [r.id for r in self.rows.values() if r.post_id == post_id]
        for review_id in ids:
            del self.rows[review_id]
        return len(ids)


class InMemoryFeaturedProductRepository(IFeaturedProductRepository):

    def __init__(self):
        self.rows: Dict[UUID, FeaturedProduct] = {}

    async def save(self, product: FeaturedProduct) -> FeaturedProduct:
        self.rows[product.id] = copy.deepcopy(product)
        return copy.deepcopy(product)

    async def update(self, product: FeaturedProduct) -> FeaturedProduct:
        self.rows[product.id] = copy.deepcopy(product)
        return copy.deepcopy(product)

    async def find_by_id(self, product_id: UUID) -> Optional[FeaturedProduct]:
        product = self.rows.get(product_id)
        return copy.deepcopy(product) if product else None

    async def find_by_post(self, post_id: UUID) -> List[FeaturedProduct]:
        return [copy.deepcopy(p) for p in self.rows.values() if p.post_id == post_id]

    async def delete(self, product_id: UUID) -> bool:
        return self.rows.pop(product_id, None) is not None

    async def delete_by_post(self, post_id: UUID) -> int:
        ids = [p.id for p in self.rows.values() if p.post_id == post_id]
        for product_id in ids:
            del self.rows[product_id]
        return len(ids)


class InMemorySiteSettingsRepository(ISiteSettingsRepository):
    """Single-row storage keyed on the fixed settings id."""

    def __init__(self):
        self.row: Optional[SiteSettings] = None
        self.inserts = 0

    async def get(self) -> Optional[SiteSettings]:
        return copy.deepcopy(self.row) if self.row else None

    async def create_if_missing(self, defaults: SiteSettings) -> SiteSettings:
        await asyncio.sleep(0)
        if self.row is None:
            self.row = copy.deepcopy(defaults)
            self.inserts += 1
        return copy.deepcopy(self.row)

    async def update(self, settings: SiteSettings) -> SiteSettings:
        self.row = copy.deepcopy(settings)
        return copy.deepcopy(settings)


class InMemoryUserRepository(IUserRepository):

    def __init__(self):
        self.rows: Dict[str, AdminUser] = {}

    async def save(self, user: AdminUser) -> AdminUser:
        if user.email in self.rows:
            raise DuplicateEntityError(f"User already exists: {user.email}")
        self.rows[user.email] = user
        return user

    async def find_by_email(self, email: str) -> Optional[AdminUser]:
        return self.rows.get(email.strip().lower())


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def review_repo():
    return InMemoryReviewRepository()


@pytest.fixture
def featured_repo():
    return InMemoryFeaturedProductRepository()


@pytest.fixture
def post_repo(review_repo, featured_repo):
    repo = InMemoryPostRepository(review_repo, featured_repo)
    review_repo.posts = repo
    return repo


@pytest.fixture
def site_settings_repo():
    return InMemorySiteSettingsRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def catalog_products():
    return [
        CatalogProduct(
            title='Ninja AF161 Max XL Air Fryer',
            image='https://images.example.com/ninja.jpg',
            link='https://amazon.com/dp/B07VT23JDM',
            price='$129.99',
            description='Extra-large air fryer',
        ),
        CatalogProduct(
            title='COSORI Pro LE 5-Qt Air Fryer',
            image='https://images.example.com/cosori.jpg',
            link='https://amazon.com/dp/B077TKLR2W',
            price='$99.99',
            description='Compact air fryer',
        ),
        CatalogProduct(
            title='Philips 3000 Series Compact Air Fryer',
            image='',
            link='https://amazon.com/dp/B077JBQZPX',
            price='$179.99',
            description='Rapid air circulation',
        ),
    ]


@pytest.fixture
def article_writer():
    writer = MagicMock()
    writer.write.return_value = GeneratedArticle(
        title="Best Air Fryers of the Year",
        excerpt="We compared the most popular air fryers.",
        content="<h1>Best Air Fryers</h1><p>" + "crispy " * 450 + "</p>",
        model="test-model",
    )
    return writer


@pytest.fixture
def review_agent():
    agent = MagicMock()
    agent.review.return_value = ReviewDraft(rating=4.5, review_content="Great value. Pros: fast. Cons: loud.")
    return agent


@pytest.fixture
def stock_photos():
    photos = MagicMock()
    photos.hero_image_url.return_value = "https://images.example.com/hero.jpg"
    photos.product_image_url.return_value = "https://images.example.com/stock-product.jpg"
    return photos


@pytest.fixture
def product_catalog(catalog_products):
    catalog = MagicMock()
    catalog.search.return_value = list(catalog_products)
    return catalog


@pytest.fixture
def synthesizer(review_repo, review_agent, stock_photos):
    return ProductReviewSynthesizer(review_repo, review_agent, stock_photos)


@pytest.fixture
def orchestrator(post_repo, synthesizer, article_writer, stock_photos, product_catalog):
    return GenerationOrchestrator(
        post_repository=post_repo,
        synthesizer=synthesizer,
        article_writer=article_writer,
        stock_photos=stock_photos,
        product_catalog=product_catalog,
        default_hero_image="https://images.example.com/default-hero.jpg",
    )


@pytest.fixture
def make_post():
    def factory(title: str = "Kitchen Gadgets", slug: str = "kitchen-gadgets",
                status: PostStatus = PostStatus.REVIEW, **kwargs) -> Post:
        return Post(title=title, slug=slug, content="<p>Content</p>", status=status, **kwargs)
    return factory


@pytest.fixture
def make_review():
    def factory(post_id: Optional[UUID] = None,
                status: ProductReviewStatus = ProductReviewStatus.REVIEW, **kwargs) -> ProductReview:
        kwargs.setdefault('product_title', 'Ninja AF161')
        kwargs.setdefault('rating', 4.0)
        kwargs.setdefault('review_content', 'Solid air fryer.')
        return ProductReview(post_id=post_id, status=status, **kwargs)
    return factory
