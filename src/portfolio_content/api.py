"""
portfolio_content.api
=====================

Module-level entrypoints for the site build.

Each function delegates to a :class:`ContentClient` built once from the
process settings (``WP_API_URL``).  Pass ``client=`` to target another
WordPress instance or an injected transport.

Usage::

    from portfolio_content.api import fetch_latest_posts, fetch_projects

    latest = await fetch_latest_posts(3)
    projects = await fetch_projects()
"""

from __future__ import annotations

from typing import List, Optional

from portfolio_content.client import ContentClient
from portfolio_content.config import settings
from portfolio_content.model import Category, Experience, Post, Project, Skill

_default_client = ContentClient(settings)


def default_client() -> ContentClient:
    return _default_client


def _pick(client: Optional[ContentClient]) -> ContentClient:
    return client if client is not None else _default_client


async def fetch_posts(
    per_page: int = 10,
    page: int = 1,
    *,
    client: Optional[ContentClient] = None,
) -> List[Post]:
    return await _pick(client).fetch_posts(per_page, page)


async def fetch_post_by_slug(slug: str, *, client: Optional[ContentClient] = None) -> Optional[Post]:
    return await _pick(client).fetch_post_by_slug(slug)


async def fetch_latest_posts(count: int = 3, *, client: Optional[ContentClient] = None) -> List[Post]:
    return await _pick(client).fetch_latest_posts(count)


async def fetch_categories(*, client: Optional[ContentClient] = None) -> List[Category]:
    return await _pick(client).fetch_categories()


async def fetch_projects(*, client: Optional[ContentClient] = None) -> List[Project]:
    return await _pick(client).fetch_projects()


async def fetch_skills(*, client: Optional[ContentClient] = None) -> List[Skill]:
    return await _pick(client).fetch_skills()


async def fetch_experiences(*, client: Optional[ContentClient] = None) -> List[Experience]:
    return await _pick(client).fetch_experiences()
