"""Text helpers for post payloads."""

from __future__ import annotations

import json
from typing import Any

from blog_client.models.blog_post import RelatedLink


def _decode_related_item(item: Any) -> RelatedLink | str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        return RelatedLink.model_validate(item)
    raise ValueError(f"Unsupported related link entry: {item!r}")


def parse_related_links(raw: str | None) -> list[RelatedLink | str]:
    """Decode a related-links payload.

    Accepts a JSON list of {url, text} objects, a JSON list of strings, or
    arbitrary text. Never raises: anything that is not a JSON list of those
    shapes comes back as a single-element list holding the raw string.
    """
    if not raw:
        return []

    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("related links payload is not a list")
        return [_decode_related_item(item) for item in data]
    except (ValueError, RecursionError):
        # pydantic.ValidationError is a ValueError too
        return [raw]


def split_keywords(keywords: str | None) -> list[str]:
    """Parse a comma-separated keywords string into a list."""
    if not keywords:
        return []
    return [k.strip() for k in keywords.split(",") if k.strip()]
