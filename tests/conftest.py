"""Shared fixtures: a recording fake backend behind httpx.MockTransport."""

import json

import httpx
import pytest

from blog_client.services.blog_api_client import BlogApiClient

BASE_URL = "http://testserver/api/blog"
PREFIX = "/api/blog"


class FakeBackend:
    """Routes requests to canned responses and records every call."""

    def __init__(self):
        self.routes: dict[tuple[str, str], object] = {}
        self.calls: list[httpx.Request] = []

    def add(self, method: str, path: str, response) -> None:
        """response: httpx.Response, a callable(request) returning one, or an exception."""
        self.routes[(method, PREFIX + path)] = response

    def json(self, method: str, path: str, data, status_code: int = 200) -> None:
        self.add(method, path, httpx.Response(status_code, json=data))

    def calls_to(self, method: str, path: str) -> list[httpx.Request]:
        return [c for c in self.calls if c.method == method and c.url.path == PREFIX + path]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "no route"})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            route = route(request)
            if not isinstance(route, httpx.Response):
                route = await route
        return route

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def body_of(request: httpx.Request):
    return json.loads(request.content) if request.content else None


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(backend):
    return BlogApiClient(base_url=BASE_URL, transport=backend.transport())


def post_payload(slug: str = "haldi-ideas", **overrides) -> dict:
    data = {
        "id": 7,
        "title": "100 Haldi Ideas",
        "slug": slug,
        "excerpt": "Bright ideas",
        "content": "<p>Body</p>",
        "authorName": "Team",
        "featuredImageUrl": "https://cdn.example.com/haldi.jpg",
        "category": {"id": 2, "name": "Decor", "slug": "decor"},
        "metaDescription": "Haldi decor",
        "metaKeywords": "haldi, decor , ",
        "isPublished": True,
        "publishedAt": "2024-05-01 10:30:00",
        "viewCount": 5,
        "relatedLinks": '[{"url":"/a","text":"A"}]',
        "createdAt": "2024-04-30 09:00:00",
        "updatedAt": "2024-05-01 10:30:00",
    }
    data.update(overrides)
    return data


def category_payload(slug: str = "decor", **overrides) -> dict:
    data = {
        "id": 2,
        "name": "Decor",
        "slug": slug,
        "description": "Decoration ideas",
        "featuredImageUrl": None,
        "isActive": True,
        "createdAt": "2024-01-01 00:00:00",
        "updatedAt": "2024-01-02 00:00:00",
    }
    data.update(overrides)
    return data
