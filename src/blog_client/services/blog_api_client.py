"""Blog API client for categories and posts."""

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from blog_client.clients.base import BaseAsyncClient, BlogApiError, ErrorKind
from blog_client.models.blog_post import (
    BlogPost,
    DeleteResult,
    PostRequest,
    PostUpdate,
    TrackViewResult,
)
from blog_client.models.category import BlogCategory, CategoryRequest, CategoryUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)


def _segment(value: str | int) -> str:
    """Escape a path segment (slug or id)."""
    return quote(str(value), safe="")


class BlogApiClient(BaseAsyncClient):
    """Typed calls against the blog REST backend.

    Reads take slugs on public paths and numeric ids on admin paths. Writes
    assume the caller is already authorized.
    """

    def _shape(self, model: type[ModelT], data: Any, *, method: str, endpoint: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise BlogApiError(
                "Unexpected response shape",
                kind=ErrorKind.DECODE,
                method=method,
                endpoint=endpoint,
            ) from exc

    def _shape_list(
        self, model: type[ModelT], data: Any, *, method: str, endpoint: str
    ) -> list[ModelT]:
        if not isinstance(data, list):
            raise BlogApiError(
                "Unexpected response shape",
                kind=ErrorKind.DECODE,
                method=method,
                endpoint=endpoint,
            )
        return [self._shape(model, item, method=method, endpoint=endpoint) for item in data]

    async def _get_one(self, model: type[ModelT], endpoint: str) -> ModelT:
        data = await self.get_json(endpoint)
        return self._shape(model, data, method="GET", endpoint=endpoint)

    async def _get_many(self, model: type[ModelT], endpoint: str) -> list[ModelT]:
        data = await self.get_json(endpoint)
        return self._shape_list(model, data, method="GET", endpoint=endpoint)

    # --- Categories ---

    async def list_categories(self) -> list[BlogCategory]:
        """All active categories."""
        return await self._get_many(BlogCategory, "/categories")

    async def list_all_categories(self) -> list[BlogCategory]:
        """All categories including inactive ones (admin)."""
        return await self._get_many(BlogCategory, "/categories/all")

    async def get_category_by_slug(self, slug: str) -> BlogCategory:
        """Category with its embedded post summaries."""
        return await self._get_one(BlogCategory, f"/categories/slug/{_segment(slug)}")

    async def get_category_by_id(self, category_id: int) -> BlogCategory:
        return await self._get_one(BlogCategory, f"/categories/{_segment(category_id)}")

    async def create_category(self, category: CategoryRequest) -> BlogCategory:
        endpoint = "/categories"
        data = await self.post_json(
            endpoint, category.model_dump(by_alias=True, exclude_none=True)
        )
        return self._shape(BlogCategory, data, method="POST", endpoint=endpoint)

    async def update_category(self, category_id: int, changes: CategoryUpdate) -> BlogCategory:
        endpoint = f"/categories/{_segment(category_id)}"
        data = await self.put_json(
            endpoint, changes.model_dump(by_alias=True, exclude_unset=True)
        )
        return self._shape(BlogCategory, data, method="PUT", endpoint=endpoint)

    async def delete_category(self, category_id: int) -> DeleteResult:
        endpoint = f"/categories/{_segment(category_id)}"
        data = await self.delete_json(endpoint)
        return self._shape(DeleteResult, data or {}, method="DELETE", endpoint=endpoint)

    # --- Posts ---

    async def list_posts(self) -> list[BlogPost]:
        """All published posts."""
        return await self._get_many(BlogPost, "/posts")

    async def list_all_posts(self) -> list[BlogPost]:
        """All posts including unpublished ones (admin)."""
        return await self._get_many(BlogPost, "/posts/all")

    async def get_post_by_slug(self, slug: str) -> BlogPost:
        """Fetch a post. Does not count as a view; see track_post_view."""
        return await self._get_one(BlogPost, f"/posts/slug/{_segment(slug)}")

    async def get_post_by_id(self, post_id: int) -> BlogPost:
        return await self._get_one(BlogPost, f"/posts/{_segment(post_id)}")

    async def list_posts_by_category(self, category_slug: str) -> list[BlogPost]:
        """Published posts of one category."""
        return await self._get_many(BlogPost, f"/posts/category/{_segment(category_slug)}")

    async def create_post(self, post: PostRequest) -> BlogPost:
        endpoint = "/posts"
        data = await self.post_json(endpoint, post.model_dump(by_alias=True, exclude_none=True))
        return self._shape(BlogPost, data, method="POST", endpoint=endpoint)

    async def update_post(self, post_id: int, changes: PostUpdate) -> BlogPost:
        endpoint = f"/posts/{_segment(post_id)}"
        data = await self.put_json(endpoint, changes.model_dump(by_alias=True, exclude_unset=True))
        return self._shape(BlogPost, data, method="PUT", endpoint=endpoint)

    async def delete_post(self, post_id: int) -> DeleteResult:
        endpoint = f"/posts/{_segment(post_id)}"
        data = await self.delete_json(endpoint)
        return self._shape(DeleteResult, data or {}, method="DELETE", endpoint=endpoint)

    async def track_post_view(self, slug: str) -> TrackViewResult:
        """Ask the backend to count one view. The backend may rate-limit it."""
        endpoint = f"/posts/slug/{_segment(slug)}/view"
        data = await self.post_json(endpoint)
        return self._shape(TrackViewResult, data, method="POST", endpoint=endpoint)


def create_blog_api_client(
    base_url: str,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BlogApiClient:
    """Factory function to create a BlogApiClient."""
    return BlogApiClient(base_url=base_url, timeout=timeout, transport=transport)
