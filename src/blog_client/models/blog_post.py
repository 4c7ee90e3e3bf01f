"""Blog post transfer models for the blog API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_client.models.timestamps import parse_timestamp


class CategoryRef(BaseModel):
    """Snapshot of the category a post belongs to."""

    id: int
    name: str
    slug: str


class RelatedLink(BaseModel):
    """One structured related link."""

    url: str
    text: str = ""


class BlogPost(BaseModel):
    """Represents a blog post returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    slug: str
    excerpt: str | None = ""
    content: str | None = ""
    author_name: str | None = Field(default=None, alias="authorName")
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")
    category: CategoryRef | None = None
    meta_description: str | None = Field(default=None, alias="metaDescription")
    meta_keywords: str | None = Field(default=None, alias="metaKeywords")
    is_published: bool = Field(default=False, alias="isPublished")
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    view_count: int = Field(default=0, alias="viewCount")
    related_links: str | None = Field(default=None, alias="relatedLinks")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("published_at", "created_at", "updated_at", mode="before")
    @classmethod
    def parse_timestamps(cls, value):
        return parse_timestamp(value)

    @property
    def related_link_entries(self) -> list[RelatedLink | str]:
        """Decoded related links; never raises."""
        from blog_client.utils.text_utils import parse_related_links
        return parse_related_links(self.related_links)

    @property
    def keyword_list(self) -> list[str]:
        """Parse meta keywords string into a list."""
        from blog_client.utils.text_utils import split_keywords
        return split_keywords(self.meta_keywords)


class PostRequest(BaseModel):
    """Payload for creating a post."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    category_id: int = Field(alias="categoryId")
    slug: str | None = None
    excerpt: str | None = None
    content: str | None = None
    author_name: str | None = Field(default=None, alias="authorName")
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")
    meta_description: str | None = Field(default=None, alias="metaDescription")
    meta_keywords: str | None = Field(default=None, alias="metaKeywords")
    is_published: bool | None = Field(default=None, alias="isPublished")
    related_links: str | None = Field(default=None, alias="relatedLinks")


class PostUpdate(BaseModel):
    """Partial update for a post. Only fields that are set are sent."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    category_id: int | None = Field(default=None, alias="categoryId")
    slug: str | None = None
    excerpt: str | None = None
    content: str | None = None
    author_name: str | None = Field(default=None, alias="authorName")
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")
    meta_description: str | None = Field(default=None, alias="metaDescription")
    meta_keywords: str | None = Field(default=None, alias="metaKeywords")
    is_published: bool | None = Field(default=None, alias="isPublished")
    related_links: str | None = Field(default=None, alias="relatedLinks")


class TrackViewResult(BaseModel):
    """Response of the track-view endpoint. tracked=False means rate-limited."""

    tracked: bool
    message: str = ""


class DeleteResult(BaseModel):
    """Response of the delete endpoints."""

    message: str = ""
