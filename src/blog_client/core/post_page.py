"""Single post page visit: fetch, state, and view tracking."""

from __future__ import annotations

from enum import Enum

from blog_client.clients.base import BlogApiError
from blog_client.core.view_tracker import ViewTracker, VisitGuard
from blog_client.models.blog_post import BlogPost
from blog_client.services.blog_api_client import BlogApiClient
from blog_client.utils.logging import get_logger

logger = get_logger(__name__)


class PageStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class PostPage:
    """One lifetime of a post view, from creation until close().

    render() may run any number of times, including concurrently; the view
    is recorded at most once. Responses arriving after close() are dropped.
    """

    def __init__(self, client: BlogApiClient, slug: str, guard: VisitGuard | None = None):
        self.client = client
        self.slug = slug
        self.tracker = ViewTracker(client, guard or VisitGuard())
        self.status = PageStatus.LOADING
        self.post: BlogPost | None = None
        self.error: str | None = None

    @property
    def closed(self) -> bool:
        return self.tracker.closed

    async def render(self) -> PageStatus:
        """Fetch the post and update page state."""
        self.status = PageStatus.LOADING
        try:
            post = await self.client.get_post_by_slug(self.slug)
        except BlogApiError as exc:
            if self.closed:
                return self.status
            logger.error("Error fetching post %s: %s", self.slug, exc)
            self.error = str(exc)
            self.status = PageStatus.ERROR
            return self.status

        if self.closed:
            logger.debug("Discarding stale response for %s", self.slug)
            return self.status

        self.post = post
        self.error = None
        self.status = PageStatus.READY
        self.tracker.post_loaded(self.slug)
        return self.status

    def close(self) -> None:
        self.tracker.close()

    async def aclose(self) -> None:
        """Close the visit and let any track call that was sent finish."""
        self.close()
        await self.tracker.wait_pending()
