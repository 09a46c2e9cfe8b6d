"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success: content fetched and printed
  1   Not found: the requested item does not exist (``post <slug>``)
  2   Error: usage error, WordPress error status, transport failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    NOT_FOUND = 1
    ERROR = 2
