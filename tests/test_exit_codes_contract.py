"""Exit code contract tests — enforce stable CLI exit semantics.

Code  Meaning
----  -------
  0   Success — content fetched and printed
  1   Not found — ``post <slug>`` matched nothing
  2   Error — usage error, WordPress error status, transport failure
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from portfolio_content.utils.exit_codes import ExitCode

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    env = {**os.environ}
    env["PYTHONPATH"] = str(REPO_ROOT / "src") + (
        os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else ""
    )
    return subprocess.run(
        [sys.executable, "-m", "portfolio_content", *args],
        capture_output=True,
        text=True,
        env=env,
    )


def test_exit_code_values_are_frozen() -> None:
    assert [int(c) for c in ExitCode] == [0, 1, 2]
    assert ExitCode.SUCCESS == 0
    assert ExitCode.NOT_FOUND == 1
    assert ExitCode.ERROR == 2


def test_version_exits_0() -> None:
    r = _run("--version")
    assert r.returncode == 0, r.stderr
    assert "portfolio-content" in r.stdout


def test_no_command_exits_2() -> None:
    r = _run()
    assert r.returncode == ExitCode.ERROR


def test_unknown_command_exits_2() -> None:
    r = _run("pages")
    assert r.returncode == ExitCode.ERROR
