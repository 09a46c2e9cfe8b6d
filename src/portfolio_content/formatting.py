"""Pure formatting helpers used by the page templates.

No I/O: everything here works on values already fetched by the client.
"""

from __future__ import annotations

import re
from typing import List, Optional

from portfolio_content.config import settings
from portfolio_content.i18n import load_catalog
from portfolio_content.model import Post

# YYYY-MM, tolerating a trailing day (YYYY-MM-DD) which is ignored.
_PERIOD_RE = re.compile(r"^(\d{4})-(\d{1,2})(?:-\d{1,2})?$")

# Heuristic only: a quoted ">" inside an attribute ends the tag early.
_TAG_RE = re.compile(r"<[^>]*>")

# The English keyword is always understood, whatever the display locale.
_PRESENT_KEYWORD = "present"


def format_period(value: Optional[str], locale: Optional[str] = None) -> str:
    """Render an ACF period (``YYYY-MM`` or "presente") for display.

    ``"2024-01"`` -> ``"ene 2024"`` with the ``es`` catalog.

    Raises
    ------
    ValueError
        If *value* is neither empty, a "present" keyword nor ``YYYY-MM``.
    """
    if not value:
        return ""
    periods = load_catalog(locale or settings.LOCALE)["periods"]
    text = value.strip()
    if text.lower() in (_PRESENT_KEYWORD, periods["present_keyword"].lower()):
        return periods["present"]

    m = _PERIOD_RE.match(text)
    if m is None:
        raise ValueError(f"format_period: expected YYYY-MM, got {value!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"format_period: month out of range in {value!r}")
    return f"{periods['months_short'][month - 1]} {year}"


def extract_featured_image(post: Post) -> str:
    """URL of the first embedded featured media, or ``""``."""
    embedded = post.embedded
    if embedded is None or not embedded.featured_media:
        return ""
    return embedded.featured_media[0].source_url or ""


def strip_html(html: str) -> str:
    """Drop every ``<...>`` tag and trim, e.g. for excerpt previews."""
    return _TAG_RE.sub("", html).strip()


def parse_tech_list(text: Optional[str]) -> List[str]:
    """``"React, Node ,  ,TypeScript"`` -> ``["React", "Node", "TypeScript"]``."""
    if not text:
        return []
    return [t.strip() for t in text.split(",") if t.strip()]
