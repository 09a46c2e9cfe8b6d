"""CLI entry-point for portfolio_content.

Usage:
    python -m portfolio_content posts [--per-page N] [--page N]
    python -m portfolio_content latest [--count N]
    python -m portfolio_content post <slug>
    python -m portfolio_content categories
    python -m portfolio_content projects
    python -m portfolio_content skills [--grouped]
    python -m portfolio_content experiences

Global options:
    --base-url URL     WordPress REST root (overrides WP_API_URL)
    --log-level LEVEL  DEBUG shows every outbound request

Output is canonical JSON on stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import copy
import sys
from typing import Any

import httpx

from portfolio_content import __version__
from portfolio_content.client import ContentClient, group_skills_by_category
from portfolio_content.config import settings
from portfolio_content.errors import RemoteRequestError
from portfolio_content.logging_setup import setup_logging
from portfolio_content.utils.exit_codes import ExitCode
from portfolio_content.utils.json_norm import stable_json_dump


def _build_client(base_url: str | None) -> ContentClient:
    if base_url:
        overridden = copy.copy(settings)
        overridden.WP_API_URL = base_url
        return ContentClient(overridden)
    return ContentClient(settings)


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="portfolio-content",
        description="Read portfolio and blog content from the WordPress REST API.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "--base-url",
        dest="base_url",
        default=None,
        help="WordPress REST root, e.g. https://example.com/wp-json (default: $WP_API_URL).",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default=settings.LOG_LEVEL,
        help="Logging level for stderr diagnostics (default: %(default)s).",
    )
    sub = p.add_subparsers(dest="command")

    posts_p = sub.add_parser("posts", help="List blog posts (embedded media and terms).")
    posts_p.add_argument("--per-page", dest="per_page", type=_positive_int, default=10)
    posts_p.add_argument("--page", type=_positive_int, default=1)

    latest_p = sub.add_parser("latest", help="Latest posts for the home page preview.")
    latest_p.add_argument("--count", type=_positive_int, default=3)

    post_p = sub.add_parser("post", help="A single post by slug (exit 1 when missing).")
    post_p.add_argument("slug")

    sub.add_parser("categories", help="Non-empty blog categories.")
    sub.add_parser("projects", help="Portfolio projects (CPT portfolio).")

    skills_p = sub.add_parser("skills", help="Skills (CPT skill).")
    skills_p.add_argument(
        "--grouped",
        action="store_true",
        default=False,
        help="Group skills by their ACF category.",
    )

    sub.add_parser("experiences", help="Work experience, most recently published first.")
    return p


async def _run_command(args: argparse.Namespace, client: ContentClient) -> Any:
    if args.command == "posts":
        return await client.fetch_posts(args.per_page, args.page)
    if args.command == "latest":
        return await client.fetch_latest_posts(args.count)
    if args.command == "post":
        return await client.fetch_post_by_slug(args.slug)
    if args.command == "categories":
        return await client.fetch_categories()
    if args.command == "projects":
        return await client.fetch_projects()
    if args.command == "skills":
        skills = await client.fetch_skills()
        if args.grouped:
            return group_skills_by_category(skills)
        return skills
    if args.command == "experiences":
        return await client.fetch_experiences()
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    client = _build_client(args.base_url)
    try:
        result = asyncio.run(_run_command(args, client))
    except RemoteRequestError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except httpx.TransportError as e:
        print(f"error: could not reach {client.base_url}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.command == "post" and result is None:
        print(f"error: no post with slug {args.slug!r}", file=sys.stderr)
        return ExitCode.NOT_FOUND

    stable_json_dump(result, sys.stdout)
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
