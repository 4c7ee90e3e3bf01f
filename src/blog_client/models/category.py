"""Category transfer models for the blog API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_client.models.timestamps import parse_timestamp


class CategoryPostCard(BaseModel):
    """Post summary embedded in a category fetched with its posts."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    slug: str
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")


class BlogCategory(BaseModel):
    """Represents a blog category returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    slug: str
    description: str | None = ""
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")
    is_active: bool = Field(default=True, alias="isActive")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    posts: list[CategoryPostCard] | None = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def parse_timestamps(cls, value):
        return parse_timestamp(value)


class CategoryRequest(BaseModel):
    """Payload for creating a category."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    slug: str | None = None
    description: str | None = None
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")
    is_active: bool | None = Field(default=None, alias="isActive")


class CategoryUpdate(BaseModel):
    """Partial update for a category. Only fields that are set are sent."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    slug: str | None = None
    description: str | None = None
    featured_image_url: str | None = Field(default=None, alias="featuredImageUrl")
    is_active: bool | None = Field(default=None, alias="isActive")
