"""Pydantic data models."""

from blog_client.models.category import (
    BlogCategory,
    CategoryPostCard,
    CategoryRequest,
    CategoryUpdate,
)
from blog_client.models.blog_post import (
    BlogPost,
    CategoryRef,
    DeleteResult,
    PostRequest,
    PostUpdate,
    RelatedLink,
    TrackViewResult,
)

__all__ = [
    "BlogCategory",
    "CategoryPostCard",
    "CategoryRequest",
    "CategoryUpdate",
    "BlogPost",
    "CategoryRef",
    "DeleteResult",
    "PostRequest",
    "PostUpdate",
    "RelatedLink",
    "TrackViewResult",
]
