"""
Admin endpoints reject callers without an ADMIN token before touching storage.
"""

import uuid
from datetime import timedelta

import pytest

from kitchen_cursor.domain.value_objects.post_status import PostStatus
from kitchen_cursor.infrastructure.security.auth_utils import create_access_token

ADMIN_ENDPOINTS = [
    ("post", "/api/v1/admin/generate-post", {"topic": "Air Fryers"}),
    ("get", "/api/v1/admin/posts", None),
    ("post", "/api/v1/admin/posts", {"title": "T", "content": "c"}),
    ("get", "/api/v1/admin/review-queue", None),
    ("get", "/api/v1/admin/reviews-queue", None),
    ("post", "/api/v1/admin/products", {
        "product_title": "X", "product_image": "i", "product_link": "l", "review_content": "r",
    }),
    ("get", "/api/v1/admin/site-settings", None),
    ("put", "/api/v1/admin/site-settings", {"logo_text": "Hacked"}),
]


@pytest.mark.parametrize("method, url, body", ADMIN_ENDPOINTS)
def test_missing_token(client, method, url, body, post_repo, review_repo, site_settings_repo):
    response = client.request(method, url, json=body)

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert post_repo.rows == {}
    assert review_repo.rows == {}
    assert site_settings_repo.row is None


@pytest.mark.parametrize("method, url, body", ADMIN_ENDPOINTS)
def test_editor_token_rejected(client, editor_headers, method, url, body, post_repo):
    response = client.request(method, url, json=body, headers=editor_headers)

    assert response.status_code == 401
    assert post_repo.rows == {}


def test_garbage_token_rejected(client):
    response = client.get("/api/v1/admin/posts", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_expired_token_rejected(client):
    token = create_access_token("admin@example.com", "ADMIN", expires_delta=timedelta(minutes=-1))
    response = client.get("/api/v1/admin/posts", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_generation_not_started_without_admin(client, editor_headers, article_writer, stock_photos,
                                              product_catalog):
    client.post("/api/v1/admin/generate-post", json={"topic": "Air Fryers"}, headers=editor_headers)

    article_writer.write.assert_not_called()
    stock_photos.hero_image_url.assert_not_called()
    product_catalog.search.assert_not_called()


def test_update_and_delete_rejected_without_admin(client, editor_headers, post_repo, make_post):
    post = make_post()
    post_repo.rows[post.id] = post

    update = client.put(f"/api/v1/admin/posts/{post.id}", json={"status": "PUBLISHED"},
                        headers=editor_headers)
    delete = client.delete(f"/api/v1/admin/posts/{post.id}")
    delete_by_slug = client.delete(f"/api/v1/admin/posts/slug/{post.slug}")

    assert update.status_code == delete.status_code == delete_by_slug.status_code == 401
    assert post_repo.rows[post.id].status == PostStatus.REVIEW


def test_review_routes_rejected_without_admin(client):
    review_id = uuid.uuid4()
    assert client.put(f"/api/v1/admin/reviews/{review_id}", json={"status": "PUBLISHED"}).status_code == 401
    assert client.delete(f"/api/v1/admin/reviews/{review_id}").status_code == 401


def test_public_routes_need_no_token(client):
    assert client.get("/api/v1/site-settings").status_code == 200
    assert client.get("/api/v1/posts").status_code == 200
