"""Blog records: ``/wp/v2/posts`` and ``/wp/v2/categories``."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .base import Rendered, acf_or_empty


class FeaturedMedia(BaseModel):
    """Entry of ``_embedded["wp:featuredmedia"]``."""

    source_url: str = ""
    alt_text: str = ""


class Term(BaseModel):
    """Taxonomy term (category or tag) from ``_embedded["wp:term"]``."""

    id: int
    name: str
    slug: str


class Embedded(BaseModel):
    """Resources inlined by ``_embed=1``."""

    featured_media: Optional[List[FeaturedMedia]] = Field(default=None, alias="wp:featuredmedia")
    terms: Optional[List[List[Term]]] = Field(default=None, alias="wp:term")

    class Config:
        populate_by_name = True


class Post(BaseModel):
    """A blog post.

    ``acf`` is whatever the site's field groups define for posts, so it is
    kept as a plain mapping.
    """

    id: int
    slug: str
    date: str
    title: Rendered
    excerpt: Rendered = Field(default_factory=Rendered)
    content: Rendered = Field(default_factory=Rendered)
    embedded: Optional[Embedded] = Field(default=None, alias="_embedded")
    acf: Optional[Dict[str, Any]] = None

    class Config:
        populate_by_name = True

    normalize_acf = field_validator("acf", mode="before")(acf_or_empty)


class Category(BaseModel):
    """Blog category."""

    id: int
    name: str
    slug: str
    count: int = 0
