"""
Content Router
==============
Read-through endpoints mirroring the content client operations.
"""
from typing import Awaitable, Dict, List, TypeVar

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from portfolio_content.client import ContentClient, group_skills_by_category
from portfolio_content.errors import RemoteRequestError
from portfolio_content.model import Category, Experience, Post, Project, Skill
from portfolio_content.web_api.deps import get_client

router = APIRouter()

T = TypeVar("T")


async def _upstream(call: Awaitable[T]) -> T:
    """Await a client call; WordPress errors and outages become 502."""
    try:
        return await call
    except RemoteRequestError as e:
        raise HTTPException(
            status_code=502,
            detail={"upstream_status": e.status_code, "endpoint": e.endpoint},
        ) from e
    except httpx.TransportError as e:
        raise HTTPException(
            status_code=502,
            detail={"upstream_status": None, "error": f"WordPress unreachable: {e}"},
        ) from e


@router.get("/posts", response_model=List[Post])
async def list_posts(
    per_page: int = Query(default=10, ge=1, le=100),
    page: int = Query(default=1, ge=1),
    client: ContentClient = Depends(get_client),
):
    """
    Blog posts with embedded featured media and terms.

    - **per_page**: page size (WordPress caps it at 100)
    - **page**: 1-based page number
    """
    return await _upstream(client.fetch_posts(per_page, page))


@router.get("/posts/latest", response_model=List[Post])
async def latest_posts(
    count: int = Query(default=3, ge=1, le=100),
    client: ContentClient = Depends(get_client),
):
    return await _upstream(client.fetch_latest_posts(count))


@router.get("/posts/{slug}", response_model=Post)
async def post_by_slug(slug: str, client: ContentClient = Depends(get_client)):
    post = await _upstream(client.fetch_post_by_slug(slug))
    if post is None:
        raise HTTPException(status_code=404, detail=f"Post not found: {slug}")
    return post


@router.get("/categories", response_model=List[Category])
async def list_categories(client: ContentClient = Depends(get_client)):
    return await _upstream(client.fetch_categories())


@router.get("/projects", response_model=List[Project])
async def list_projects(client: ContentClient = Depends(get_client)):
    return await _upstream(client.fetch_projects())


@router.get("/skills", response_model=List[Skill])
async def list_skills(client: ContentClient = Depends(get_client)):
    return await _upstream(client.fetch_skills())


@router.get("/skills/grouped", response_model=Dict[str, List[Skill]])
async def grouped_skills(client: ContentClient = Depends(get_client)):
    """Skills bucketed by ACF category, in first-seen order."""
    skills = await _upstream(client.fetch_skills())
    return group_skills_by_category(skills)


@router.get("/experiences", response_model=List[Experience])
async def list_experiences(client: ContentClient = Depends(get_client)):
    """Experience entries, most recently published first."""
    return await _upstream(client.fetch_experiences())
