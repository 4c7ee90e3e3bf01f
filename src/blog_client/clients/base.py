"""Base async API client: request building and error normalization."""

import json
from enum import Enum
from typing import Any

import httpx

from blog_client.clients.transport import HttpTransport
from blog_client.utils.logging import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    """Where a request failed."""
    TRANSPORT = "transport"
    BACKEND = "backend"
    DECODE = "decode"


class BlogApiError(RuntimeError):
    """Raised for every failed request, whatever the underlying cause."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        status_code: int | None = None,
        method: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.method = method
        self.endpoint = endpoint


def _decode_error_body(response: httpx.Response) -> tuple[bool, str | None]:
    """First step of the error chain: (body is JSON, its `error` field)."""
    try:
        data = response.json()
    except ValueError:
        return False, None
    if isinstance(data, dict) and data.get("error"):
        return True, str(data["error"])
    return True, None


def extract_error_message(response: httpx.Response) -> str:
    """Resolve the message for a non-success response.

    JSON `error` field, else the reason phrase when the body is not JSON,
    else a generic status message.
    """
    fallback = f"HTTP error! status: {response.status_code}"
    is_json, message = _decode_error_body(response)
    if message is not None:
        return message
    if is_json:
        return fallback
    return response.reason_phrase or fallback


class BaseAsyncClient:
    """Base async API client with JSON request handling and common configuration."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = HttpTransport(self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "BaseAsyncClient":
        """Enter async context."""
        await self._transport.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context."""
        await self._transport.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    def _get_headers(self) -> dict[str, str]:
        """Get default headers. Override in subclasses for extra headers."""
        return {"Content-Type": "application/json"}

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the parsed JSON body.

        Header overrides win over the defaults. Any failure is raised as
        BlogApiError; nothing is retried.
        """
        merged_headers = httpx.Headers(self._get_headers())
        merged_headers.update(headers or {})
        content = json.dumps(body).encode("utf-8") if body is not None else None

        if not self._transport.is_open:
            error = BlogApiError(
                "Client not initialized. Use 'async with' context manager.",
                kind=ErrorKind.TRANSPORT,
                method=method,
                endpoint=endpoint,
            )
            logger.error("API request error: %s %s - %s", method, endpoint, error)
            raise error

        try:
            response = await self._transport.send(
                method,
                endpoint,
                headers=merged_headers,
                content=content,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = BlogApiError(
                str(exc) or exc.__class__.__name__,
                kind=ErrorKind.TRANSPORT,
                method=method,
                endpoint=endpoint,
            )
            logger.error("API request error: %s %s - %s", method, endpoint, error)
            raise error from exc

        if not response.is_success:
            error = BlogApiError(
                extract_error_message(response),
                kind=ErrorKind.BACKEND,
                status_code=response.status_code,
                method=method,
                endpoint=endpoint,
            )
            logger.error(
                "API request error: %s %s -> %s %s",
                method, endpoint, response.status_code, error,
            )
            raise error

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            error = BlogApiError(
                "Invalid JSON response",
                kind=ErrorKind.DECODE,
                status_code=response.status_code,
                method=method,
                endpoint=endpoint,
            )
            logger.error("API request error: %s %s - %s", method, endpoint, error)
            raise error from exc

    async def get_json(self, endpoint: str, **kwargs: Any) -> Any:
        """Make a GET request and return JSON."""
        return await self.request(endpoint, "GET", **kwargs)

    async def post_json(self, endpoint: str, body: Any = None, **kwargs: Any) -> Any:
        """Make a POST request and return JSON."""
        return await self.request(endpoint, "POST", body, **kwargs)

    async def put_json(self, endpoint: str, body: Any = None, **kwargs: Any) -> Any:
        """Make a PUT request and return JSON."""
        return await self.request(endpoint, "PUT", body, **kwargs)

    async def delete_json(self, endpoint: str, **kwargs: Any) -> Any:
        """Make a DELETE request and return JSON."""
        return await self.request(endpoint, "DELETE", **kwargs)
