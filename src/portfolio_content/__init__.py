"""portfolio_content: WordPress/ACF content source for the portfolio site."""

__all__ = [
    "__version__",
    "ContentClient",
    "RemoteRequestError",
    "fetch_posts",
    "fetch_post_by_slug",
    "fetch_latest_posts",
    "fetch_categories",
    "fetch_projects",
    "fetch_skills",
    "fetch_experiences",
    "group_skills_by_category",
    # Formatting helpers
    "format_period",
    "extract_featured_image",
    "strip_html",
    "parse_tech_list",
]
__version__ = "0.1.0"

# Programmatic entrypoints used by the site build.
from portfolio_content.api import (  # noqa: E402, F401
    fetch_categories,
    fetch_experiences,
    fetch_latest_posts,
    fetch_post_by_slug,
    fetch_posts,
    fetch_projects,
    fetch_skills,
)
from portfolio_content.client import ContentClient, group_skills_by_category  # noqa: E402, F401
from portfolio_content.errors import RemoteRequestError  # noqa: E402, F401
from portfolio_content.formatting import (  # noqa: E402, F401
    extract_featured_image,
    format_period,
    parse_tech_list,
    strip_html,
)
