"""Tests for Pydantic models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from blog_client.models.blog_post import BlogPost, PostUpdate, RelatedLink
from blog_client.models.category import BlogCategory, CategoryRequest

from conftest import category_payload, post_payload


class TestBlogPost:
    def test_from_api_payload(self):
        post = BlogPost.model_validate(post_payload())
        assert post.slug == "haldi-ideas"
        assert post.author_name == "Team"
        assert post.view_count == 5
        assert post.is_published is True
        assert post.category.name == "Decor"

    def test_backend_timestamp_format(self):
        post = BlogPost.model_validate(post_payload())
        assert post.published_at == datetime(2024, 5, 1, 10, 30)
        assert post.created_at == datetime(2024, 4, 30, 9, 0)

    def test_iso_timestamp(self):
        post = BlogPost.model_validate(post_payload(publishedAt="2024-05-01T10:30:00"))
        assert post.published_at == datetime(2024, 5, 1, 10, 30)

    def test_missing_optional_fields(self):
        post = BlogPost.model_validate({"id": 1, "title": "T", "slug": "t"})
        assert post.view_count == 0
        assert post.published_at is None
        assert post.category is None
        assert post.related_link_entries == []

    def test_related_link_entries(self):
        post = BlogPost.model_validate(post_payload())
        assert post.related_link_entries == [RelatedLink(url="/a", text="A")]

    def test_related_link_plain_text(self):
        post = BlogPost.model_validate(post_payload(relatedLinks="see also our decor guide"))
        assert post.related_link_entries == ["see also our decor guide"]

    def test_keyword_list(self):
        post = BlogPost.model_validate(post_payload())
        assert post.keyword_list == ["haldi", "decor"]

    def test_bad_timestamp_rejected(self):
        with pytest.raises(ValidationError):
            BlogPost.model_validate(post_payload(publishedAt="yesterday"))


class TestBlogCategory:
    def test_from_api_payload(self):
        cat = BlogCategory.model_validate(category_payload())
        assert cat.slug == "decor"
        assert cat.is_active is True
        assert cat.posts is None
        assert cat.updated_at == datetime(2024, 1, 2)

    def test_blank_timestamp_is_none(self):
        cat = BlogCategory.model_validate(category_payload(createdAt=""))
        assert cat.created_at is None


class TestRequests:
    def test_category_request_aliases(self):
        request = CategoryRequest(name="Decor", featured_image_url="x.jpg", is_active=True)
        assert request.model_dump(by_alias=True, exclude_none=True) == {
            "name": "Decor",
            "featuredImageUrl": "x.jpg",
            "isActive": True,
        }

    def test_post_update_only_set_fields(self):
        update = PostUpdate(is_published=True)
        assert update.model_dump(by_alias=True, exclude_unset=True) == {"isPublished": True}
