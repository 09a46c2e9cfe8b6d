"""
portfolio_content.client
========================

Read-only façade over the WordPress REST API (``/wp-json``) and the ACF
custom post types the portfolio site is built from.

Every ``fetch_*`` coroutine performs exactly one GET and returns typed
records.  A non-2xx answer raises :class:`RemoteRequestError`; anything the
transport or the decoder raises is left alone.  There is no retry, timeout
or caching here: callers that want bounded latency wrap the call
themselves (``asyncio.wait_for``).

Usage::

    from portfolio_content.client import ContentClient

    client = ContentClient()
    posts, skills = await asyncio.gather(client.fetch_posts(), client.fetch_skills())
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx
from pydantic import TypeAdapter

from portfolio_content.config import Settings
from portfolio_content.config import settings as default_settings
from portfolio_content.errors import RemoteRequestError
from portfolio_content.model import Category, Experience, Post, Project, Skill

logger = logging.getLogger(__name__)

# WordPress REST routes (relative to WP_API_URL).
POSTS_ENDPOINT = "/wp/v2/posts"
CATEGORIES_ENDPOINT = "/wp/v2/categories"
PROJECTS_ENDPOINT = "/wp/v2/portfolio"
SKILLS_ENDPOINT = "/wp/v2/skill"
EXPERIENCE_ENDPOINT = "/wp/v2/experience"

# WordPress caps per_page at 100.
CPT_PAGE_SIZE = 100
CPT_FIELDS = "id,title,acf"

_REQUEST_HEADERS = {"Content-Type": "application/json"}

_POSTS = TypeAdapter(List[Post])
_CATEGORIES = TypeAdapter(List[Category])
_PROJECTS = TypeAdapter(List[Project])
_SKILLS = TypeAdapter(List[Skill])
_EXPERIENCES = TypeAdapter(List[Experience])


class ContentClient:
    """Typed access to the site's WordPress content.

    Parameters
    ----------
    settings:
        Resolved configuration; only ``WP_API_URL`` is read.  Defaults to
        the process-wide :data:`portfolio_content.config.settings`.
    http:
        Optional ``httpx.AsyncClient`` to issue requests with.  It is used
        as-is and never closed here.  Without one, each call opens and
        closes its own client.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        http: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings if settings is not None else default_settings
        self.base_url = self.settings.WP_API_URL.rstrip("/")
        self._http = http

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http is not None:
            yield self._http
            return
        async with httpx.AsyncClient(timeout=None) as http:
            yield http

    async def get_json(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Any:
        """GET ``{base}{endpoint}?{params}`` and return the decoded JSON body.

        Raises
        ------
        RemoteRequestError
            If the response status is not 2xx.
        """
        url = self.url_for(endpoint)
        logger.debug(f"GET {url} params={params}")
        async with self._session() as http:
            response = await http.get(url, params=params, headers=_REQUEST_HEADERS)
        if not response.is_success:
            logger.warning(f"WordPress answered {response.status_code} for {endpoint}")
            raise RemoteRequestError(response.status_code, endpoint)
        return response.json()

    # ── blog ────────────────────────────────────────────────────────

    async def fetch_posts(self, per_page: int = 10, page: int = 1) -> List[Post]:
        """Posts with featured media and terms embedded, newest first."""
        data = await self.get_json(
            POSTS_ENDPOINT,
            {"per_page": str(per_page), "page": str(page), "_embed": "1"},
        )
        return _POSTS.validate_python(data)

    async def fetch_post_by_slug(self, slug: str) -> Optional[Post]:
        """Return the post published under *slug*, or ``None``."""
        data = await self.get_json(POSTS_ENDPOINT, {"slug": slug, "_embed": "1"})
        posts = _POSTS.validate_python(data)
        return posts[0] if posts else None

    async def fetch_latest_posts(self, count: int = 3) -> List[Post]:
        return await self.fetch_posts(count, 1)

    async def fetch_categories(self) -> List[Category]:
        """Blog categories that have at least one post."""
        data = await self.get_json(CATEGORIES_ENDPOINT, {"hide_empty": "true"})
        return _CATEGORIES.validate_python(data)

    # ── custom post types ───────────────────────────────────────────

    async def fetch_projects(self) -> List[Project]:
        data = await self.get_json(
            PROJECTS_ENDPOINT,
            {
                "per_page": str(CPT_PAGE_SIZE),
                "_fields": CPT_FIELDS,
                "acf_format": "standard",
            },
        )
        return _PROJECTS.validate_python(data)

    async def fetch_skills(self) -> List[Skill]:
        data = await self.get_json(
            SKILLS_ENDPOINT,
            {"per_page": str(CPT_PAGE_SIZE), "_fields": CPT_FIELDS},
        )
        return _SKILLS.validate_python(data)

    async def fetch_experiences(self) -> List[Experience]:
        """Experience entries, most recently published first.

        Ordering is the WordPress publish date of each entry, not the ACF
        ``start_date``/``end_date`` values.
        """
        data = await self.get_json(
            EXPERIENCE_ENDPOINT,
            {
                "per_page": str(CPT_PAGE_SIZE),
                "_fields": CPT_FIELDS,
                "orderby": "date",
                "order": "desc",
            },
        )
        return _EXPERIENCES.validate_python(data)


def group_skills_by_category(
    skills: List[Skill],
    default_label: Optional[str] = None,
) -> Dict[str, List[Skill]]:
    """Bucket *skills* by ``acf.category``.

    Labels appear in first-encounter order and every skill keeps its input
    position within its bucket.  Skills whose category is missing or the
    empty string land in *default_label*, which defaults to
    ``settings.SKILL_FALLBACK_CATEGORY``.
    """
    if default_label is None:
        default_label = default_settings.SKILL_FALLBACK_CATEGORY
    groups: Dict[str, List[Skill]] = {}
    for skill in skills:
        label = skill.acf.category or default_label
        groups.setdefault(label, []).append(skill)
    return groups
