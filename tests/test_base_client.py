"""Tests for request building and error normalization."""

import httpx
import pytest

from blog_client.clients.base import BaseAsyncClient, BlogApiError, ErrorKind, extract_error_message

from conftest import BASE_URL, body_of


def make_client(backend) -> BaseAsyncClient:
    return BaseAsyncClient(base_url=BASE_URL, transport=backend.transport())


@pytest.mark.asyncio
async def test_get_returns_parsed_json_as_is(backend):
    backend.json("GET", "/anything", {"arbitrary": [1, 2, 3]})

    async with make_client(backend) as client:
        data = await client.request("/anything")

    assert data == {"arbitrary": [1, 2, 3]}
    assert backend.calls[0].method == "GET"
    assert backend.calls[0].headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_body_serialized_as_json(backend):
    backend.json("POST", "/things", {"ok": True}, status_code=201)

    async with make_client(backend) as client:
        await client.request("/things", "POST", {"name": "Decor", "isActive": True})

    assert body_of(backend.calls[0]) == {"name": "Decor", "isActive": True}


@pytest.mark.asyncio
async def test_no_body_sends_empty_content(backend):
    backend.json("POST", "/things", {"ok": True})

    async with make_client(backend) as client:
        await client.request("/things", "POST")

    assert backend.calls[0].content == b""


@pytest.mark.asyncio
async def test_header_overrides_win(backend):
    backend.json("GET", "/things", {})

    async with make_client(backend) as client:
        await client.request("/things", headers={"Content-Type": "text/plain", "X-Trace": "abc"})

    headers = backend.calls[0].headers
    assert headers["content-type"] == "text/plain"
    assert headers["x-trace"] == "abc"


@pytest.mark.asyncio
async def test_header_override_is_case_insensitive(backend):
    backend.json("POST", "/things", {})

    async with make_client(backend) as client:
        await client.request("/things", "POST", {"a": 1}, headers={"content-type": "text/plain"})

    assert backend.calls[0].headers.get_list("content-type") == ["text/plain"]


@pytest.mark.asyncio
async def test_error_field_becomes_message(backend):
    backend.json("GET", "/posts/slug/missing", {"error": "Post not found"}, status_code=404)

    async with make_client(backend) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.request("/posts/slug/missing")

    err = exc_info.value
    assert str(err) == "Post not found"
    assert err.kind is ErrorKind.BACKEND
    assert err.status_code == 404
    assert err.method == "GET"
    assert err.endpoint == "/posts/slug/missing"


@pytest.mark.asyncio
async def test_unparseable_error_body_falls_back_to_reason_phrase(backend):
    backend.add("GET", "/boom", httpx.Response(500, content=b"<html>oops</html>"))

    async with make_client(backend) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.request("/boom")

    assert str(exc_info.value) == "Internal Server Error"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_json_error_without_error_field_uses_status_message(backend):
    backend.json("PUT", "/categories/1", {"detail": "nope"}, status_code=400)

    async with make_client(backend) as client:
        with pytest.raises(BlogApiError, match="^HTTP error! status: 400$"):
            await client.request("/categories/1", "PUT", {})


def test_unknown_status_without_reason_phrase():
    response = httpx.Response(599, content=b"")
    assert extract_error_message(response) == "HTTP error! status: 599"


@pytest.mark.asyncio
async def test_transport_failure_is_normalized(backend):
    backend.add("GET", "/posts", httpx.ConnectError("Connection refused"))

    async with make_client(backend) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.request("/posts")

    err = exc_info.value
    assert str(err) == "Connection refused"
    assert err.kind is ErrorKind.TRANSPORT
    assert err.status_code is None
    assert isinstance(err.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_invalid_json_on_success_is_decode_error(backend):
    backend.add("GET", "/posts", httpx.Response(200, content=b"not json"))

    async with make_client(backend) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.request("/posts")

    assert exc_info.value.kind is ErrorKind.DECODE
    assert str(exc_info.value) == "Invalid JSON response"


@pytest.mark.asyncio
async def test_empty_success_body_returns_none(backend):
    backend.add("DELETE", "/posts/3", httpx.Response(204))

    async with make_client(backend) as client:
        assert await client.request("/posts/3", "DELETE") is None


@pytest.mark.asyncio
async def test_request_outside_context_is_transport_error():
    client = BaseAsyncClient(base_url=BASE_URL)
    with pytest.raises(BlogApiError, match="async with") as exc_info:
        await client.request("/posts")

    assert exc_info.value.kind is ErrorKind.TRANSPORT


@pytest.mark.asyncio
async def test_invalid_url_is_transport_error(backend):
    backend.add("GET", "/posts", httpx.InvalidURL("Invalid URL component"))

    async with make_client(backend) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.request("/posts")

    assert exc_info.value.kind is ErrorKind.TRANSPORT
