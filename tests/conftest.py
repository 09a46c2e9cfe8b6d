"""Shared fixtures: a fake WordPress behind ``httpx.MockTransport``."""

from __future__ import annotations

import asyncio
import copy
from typing import Any, Callable, Union

import httpx
import pytest

from portfolio_content.client import ContentClient
from portfolio_content.config import Settings

BASE_URL = "https://cms.example.test/wp-json"

_ENV_KEYS = ("WP_API_URL", "LOCALE", "SKILL_FALLBACK_CATEGORY", "LOG_LEVEL")


# ── payloads as WordPress emits them ────────────────────────────────

POST_HELLO = {
    "id": 11,
    "slug": "hola-mundo",
    "date": "2024-03-02T10:00:00",
    "title": {"rendered": "Hola mundo"},
    "excerpt": {"rendered": "<p>Primer <b>post</b></p>\n"},
    "content": {"rendered": "<p>Contenido</p>"},
    "link": "https://cms.example.test/hola-mundo/",
    "_embedded": {
        "wp:featuredmedia": [
            {"id": 90, "source_url": "https://cms.example.test/img/hola.jpg", "alt_text": "Portada"},
        ],
        "wp:term": [
            [{"id": 3, "name": "Astro", "slug": "astro", "taxonomy": "category"}],
            [],
        ],
    },
    "acf": {"reading_time": 4, "subtitle": "Intro"},
}

POST_PLAIN = {
    "id": 12,
    "slug": "sin-imagen",
    "date": "2024-02-01T09:30:00",
    "title": {"rendered": "Sin imagen"},
    "excerpt": {"rendered": ""},
    "content": {"rendered": ""},
    "acf": False,
}

CATEGORIES = [
    {"id": 3, "name": "Astro", "slug": "astro", "count": 4, "taxonomy": "category"},
    {"id": 5, "name": "Python", "slug": "python", "count": 1, "taxonomy": "category"},
]

PROJECTS = [
    {
        "id": 21,
        "title": {"rendered": "Tienda online"},
        "acf": {
            "project_url": "https://shop.example.test",
            "github_url": "https://github.com/example/shop",
            "description": "E-commerce con pagos",
            "technologies": "Astro, Tailwind, Stripe",
            "featured_image": "https://cms.example.test/img/shop.png",
            "year": 2024,
            "category": "Web",
        },
    },
    {"id": 22, "title": {"rendered": "Borrador"}, "acf": False},
]

SKILLS = [
    {"id": 31, "title": {"rendered": "React"}, "acf": {"level": 90, "category": "Frontend", "icon": "react"}},
    {"id": 32, "title": {"rendered": "Docker"}, "acf": {"level": "70", "category": "DevOps", "icon": "docker"}},
    {"id": 33, "title": {"rendered": "Astro"}, "acf": {"level": 85, "category": "Frontend", "icon": "astro"}},
    {"id": 34, "title": {"rendered": "Figma"}, "acf": {"level": 60, "icon": "figma"}},
    {"id": 35, "title": {"rendered": "Node"}, "acf": {"level": 80, "category": "Backend", "icon": "node"}},
]

EXPERIENCES = [
    {
        "id": 41,
        "title": {"rendered": "Frontend Dev"},
        "acf": {
            "company": "Acme",
            "position": "Frontend Developer",
            "start_date": "2023-05",
            "end_date": "presente",
            "description": "<p>SPA y design system</p>",
            "technologies": "React, TypeScript",
            "company_url": "https://acme.example.test",
        },
    },
    {
        "id": 40,
        "title": {"rendered": "Intern"},
        "acf": {
            "company": "Globex",
            "position": "Intern",
            "start_date": "2021-01",
            "end_date": "2021-12",
            "description": "",
            "technologies": "",
            "company_url": None,
        },
    },
]

Body = Union[Any, Callable[[httpx.Request], Any]]


class FakeWordPress:
    """Route table keyed by REST endpoint (``/wp/v2/...``).

    A route value is ``(status, body)``; *body* may be a callable taking
    the request.  Unknown routes answer 404 like WordPress does.
    """

    def __init__(self, routes: dict[str, tuple[int, Body]] | None = None) -> None:
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.removeprefix("/wp-json")
        status, body = self.routes.get(
            endpoint, (404, {"code": "rest_no_route", "data": {"status": 404}})
        )
        if callable(body):
            body = body(request)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def posts_by_slug(request: httpx.Request) -> list[dict]:
    slug = request.url.params.get("slug")
    everything = [POST_HELLO, POST_PLAIN]
    if slug is None:
        return everything
    return [p for p in everything if p["slug"] == slug]


def default_routes() -> dict[str, tuple[int, Body]]:
    return {
        "/wp/v2/posts": (200, posts_by_slug),
        "/wp/v2/categories": (200, CATEGORIES),
        "/wp/v2/portfolio": (200, PROJECTS),
        "/wp/v2/skill": (200, SKILLS),
        "/wp/v2/experience": (200, EXPERIENCES),
    }


# ── fixtures ────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's shell settings out of the tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def test_settings() -> Settings:
    s = Settings()
    s.WP_API_URL = BASE_URL + "/"
    return s


@pytest.fixture
def wordpress() -> FakeWordPress:
    return FakeWordPress(default_routes())


@pytest.fixture
def make_client(test_settings):
    """Build a ContentClient whose requests go to a FakeWordPress."""

    def _make(fake: FakeWordPress) -> ContentClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        return ContentClient(copy.copy(test_settings), http=http)

    return _make


@pytest.fixture
def run(make_client, wordpress):
    """Run ``coro_fn(client)`` against the default fake WordPress."""

    def _run(coro_fn, fake: FakeWordPress | None = None):
        client = make_client(fake if fake is not None else wordpress)
        return asyncio.run(coro_fn(client))

    return _run
