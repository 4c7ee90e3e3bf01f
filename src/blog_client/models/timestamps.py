"""Timestamp parsing shared by the transfer models."""

from datetime import datetime
from typing import Any


def parse_timestamp(value: Any) -> Any:
    """Accept ISO-8601 and the backend's 'yyyy-MM-dd HH:mm:ss' form."""
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return value
    return value
