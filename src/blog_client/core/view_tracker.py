"""At-most-once view tracking for one page visit."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Protocol

from blog_client.models.blog_post import TrackViewResult
from blog_client.utils.logging import get_logger

logger = get_logger(__name__)


class ViewTrackingApi(Protocol):
    async def track_post_view(self, slug: str) -> TrackViewResult: ...


class TrackingState(str, Enum):
    UNTRACKED = "untracked"
    TRACK_ISSUED = "track_issued"


class VisitGuard:
    """One-shot flag scoped to a single page visit."""

    def __init__(self) -> None:
        self._claimed = False

    @property
    def claimed(self) -> bool:
        return self._claimed

    def try_claim(self) -> bool:
        """Return True exactly once. Check and set run with no await in between."""
        if self._claimed:
            return False
        self._claimed = True
        return True


class ViewTracker:
    """Issues at most one track-view call per visit.

    The guard is passed in so that every visit owns its own dedup state. Once
    closed, the tracker ignores late post-loaded notifications.
    """

    def __init__(self, api: ViewTrackingApi, guard: VisitGuard | None = None):
        self.api = api
        self.guard = guard if guard is not None else VisitGuard()
        self._closed = False
        self._pending: set[asyncio.Task] = set()
        self.last_result: TrackViewResult | None = None

    @property
    def state(self) -> TrackingState:
        return TrackingState.TRACK_ISSUED if self.guard.claimed else TrackingState.UNTRACKED

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear down the visit. Track calls already sent are left to finish."""
        self._closed = True

    def post_loaded(self, slug: str) -> asyncio.Task | None:
        """Record a view for a successfully fetched post.

        Must be called from a running event loop. Returns the background task
        when a track call was issued, None when it was skipped.
        """
        if self._closed:
            logger.debug("Visit closed, not tracking view for %s", slug)
            return None
        if not self.guard.try_claim():
            return None

        task = asyncio.create_task(self._send(slug))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _send(self, slug: str) -> TrackViewResult | None:
        try:
            result = await self.api.track_post_view(slug)
        except Exception as exc:
            # a failed track call never reaches the page
            logger.debug("View tracking failed for %s: %s", slug, exc)
            return None

        self.last_result = result
        if not result.tracked:
            logger.debug("View not counted for %s: %s", slug, result.message)
        return result

    async def wait_pending(self) -> None:
        """Wait for outstanding track calls; used before closing the client."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
