"""Thin async HTTP transport over httpx."""

from typing import Any

import httpx


class HttpTransport:
    """Owns the httpx connection pool for one base address. No business logic."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpTransport":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint path onto the base address."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def send(
        self,
        method: str,
        endpoint: str,
        *,
        headers: httpx.Headers | dict[str, str] | None = None,
        content: bytes | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue one request. Raises httpx.HTTPError when no response arrives."""
        if self._client is None:
            raise RuntimeError("Transport not open. Use 'async with' context manager.")
        return await self._client.request(
            method,
            self.url_for(endpoint),
            headers=headers,
            content=content,
            **kwargs,
        )
