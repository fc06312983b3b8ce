"""Shared utility functions for goat.

Provides async command execution, executable lookup, duration formatting and
the Rich console every part of the tool prints through.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console

console = Console(highlight=False, emoji=False, soft_wrap=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Program and arguments.  Never passed through a shell.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for as long as the process runs.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A program that cannot be
        started reports return code 127 with the OS error as stderr.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError as exc:
        return (127, "", str(exc))

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


def find_executable(name: str) -> str | None:
    """Resolve *name* on the current ``PATH``; ``None`` when it is missing."""
    return shutil.which(name, path=os.environ.get("PATH", os.defpath))


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


def last_line(text: str) -> str:
    """Return the last non-blank line of *text* (empty string if none)."""
    for line in reversed(text.splitlines()):
        if line.strip():
            return line.strip()
    return ""


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

SUCCESS_MARK = "✅"
FAILURE_MARK = "❌"
HINT_MARK = "👉"


def print_success(message: str) -> None:
    """Print a success line prefixed with the success marker."""
    console.print(f"{SUCCESS_MARK} {message}", markup=False)


def print_error(message: str) -> None:
    """Print a failure line in red, prefixed with the failure marker."""
    console.print(f"{FAILURE_MARK} {message}", style="bold red", markup=False)


def print_hint(message: str) -> None:
    """Print a follow-up suggestion (``👉 ...``)."""
    console.print(f"{HINT_MARK} {message}", markup=False)


def exit_with_error(message: str) -> NoReturn:
    """Print *message* with the failure marker and the help hint, then exit 1."""
    print_error(message)
    print_hint("goat help")
    sys.exit(1)
