"""
Unit tests for manual post management and public reads.
"""

import uuid

import pytest

from kitchen_cursor.api.schemas.post_schemas import UpdatePostRequest
from kitchen_cursor.application.commands.post_commands import CreatePostCommand, UpdatePostCommand
from kitchen_cursor.application.services.post_service import PostService
from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.domain.value_objects.review_status import ProductReviewStatus
from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    EntityNotFoundError,
)


@pytest.fixture
def service(post_repo):
    return PostService(post_repo)


@pytest.mark.asyncio
class TestPostService:

    async def test_create_defaults_to_draft(self, service):
        post = await service.create_post(CreatePostCommand(title="Best Knives 2024", content="<p>x</p>"))

        assert post.status == PostStatus.DRAFT
        assert post.slug == "best-knives-2024"
        assert post.reading_time == 1

    async def test_create_with_taken_slug(self, service):
        await service.create_post(CreatePostCommand(title="Knives", content="a"))
        post = await service.create_post(CreatePostCommand(title="Other", content="b", slug="Knives"))

        assert post.slug == "knives-2"

    async def test_create_with_unknown_status(self, service, post_repo):
        with pytest.raises(DomainValidationError):
            await service.create_post(CreatePostCommand(title="T", content="c", status="LIVE"))
        assert post_repo.rows == {}

    async def test_update_fields_and_status(self, service):
        post = await service.create_post(CreatePostCommand(title="Knives", content="a"))

        updated = await service.update_post(UpdatePostCommand(
            post_id=post.id,
            changes={"title": "Sharp Knives", "seo_title": "Knives"},
            status="PUBLISHED",
        ))

        assert updated.title == "Sharp Knives"
        assert updated.slug == "knives"
        assert updated.status == PostStatus.PUBLISHED

    async def test_bogus_status_changes_nothing(self, service, post_repo):
        post = await service.create_post(CreatePostCommand(title="Knives", content="a"))

        with pytest.raises(DomainValidationError):
            await service.update_post(UpdatePostCommand(
                post_id=post.id, changes={"title": "Changed"}, status="BOGUS",
            ))

        stored = post_repo.rows[post.id]
        assert stored.title == "Knives"
        assert stored.status == PostStatus.DRAFT

    async def test_explicit_null_content_rejected(self, service, post_repo):
        post = await service.create_post(CreatePostCommand(title="Knives", content="a"))
        changes, status = UpdatePostRequest.model_validate({"content": None}).split()

        with pytest.raises(DomainValidationError):
            await service.update_post(UpdatePostCommand(post_id=post.id, changes=changes, status=status))
        assert post_repo.rows[post.id].content == "a"

    async def test_update_missing_post(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.update_post(UpdatePostCommand(post_id=uuid.uuid4(), status="PUBLISHED"))

    async def test_update_by_slug(self, service):
        await service.create_post(CreatePostCommand(title="Knives", content="a"))

        updated = await service.update_post_by_slug("knives", {"excerpt": "Short"}, "REVIEW")

        assert updated.excerpt == "Short"
        assert updated.status == PostStatus.REVIEW

    async def test_list_posts_filters_status(self, service):
        await service.create_post(CreatePostCommand(title="A", content="a"))
        await service.create_post(CreatePostCommand(title="B", content="b", status="PUBLISHED"))

        published = await service.list_posts(status="published")

        assert [p.title for p in published] == ["B"]


@pytest.mark.asyncio
class TestPublicReads:

    async def test_unpublished_post_is_hidden(self, service, post_repo, make_post):
        await post_repo.save(make_post(status=PostStatus.REVIEW))

        with pytest.raises(EntityNotFoundError):
            await service.get_published("kitchen-gadgets")

    async def test_only_published_reviews_are_shown(self, service, post_repo, review_repo,
                                                    make_post, make_review):
        post = await post_repo.save(make_post(status=PostStatus.PUBLISHED))
        await review_repo.save(make_review(post_id=post.id, status=ProductReviewStatus.REVIEW))
        shown = await review_repo.save(make_review(post_id=post.id, status=ProductReviewStatus.PUBLISHED))

        result = await service.get_published("kitchen-gadgets")

        assert [r.id for r in result.product_reviews] == [shown.id]

    async def test_list_published(self, service, post_repo, make_post):
        await post_repo.save(make_post(status=PostStatus.PUBLISHED))
        await post_repo.save(make_post(title="Draft", slug="draft", status=PostStatus.DRAFT))

        posts = await service.list_published()

        assert [p.slug for p in posts] == ["kitchen-gadgets"]
