"""Shell, git and output utilities.

Provides simple wrappers around subprocess calls for running git, plus
output helpers that speak the GitHub Actions workflow command syntax.
"""

from __future__ import annotations

import subprocess
import sys
from typing import NoReturn


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "status", "--short").
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., tag lookup).

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.strip()


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a run in the workflow log.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    print(f"  {msg}")


def warning(msg: str) -> None:
    """Print a warning annotation, shown on the workflow run summary."""
    print(f"::warning::{msg}")


def fatal(msg: str) -> NoReturn:
    """Print an error annotation and exit with code 1.

    Use for unrecoverable errors that should fail the workflow step.
    """
    print(f"::error::{msg}", file=sys.stderr)
    sys.exit(1)


def set_output(name: str, value: str | bool, output_path: str | None = None) -> None:
    """Publish a step output.

    Appends ``name=value`` to the file GitHub Actions exposes as
    $GITHUB_OUTPUT. Outside of Actions (no output file) the pair is
    printed instead.
    """
    if isinstance(value, bool):
        value = "true" if value else "false"
    if not output_path:
        print(f"  {name}={value}")
        return
    with open(output_path, "a") as fh:
        fh.write(f"{name}={value}\n")
