"""Logging bootstrap for the CLI and the preview API.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
handler is installed by whichever entrypoint runs.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = "WARNING") -> None:
    """Send package logs to stderr at *level* (name or number)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level!r}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("portfolio_content").setLevel(level)
