"""Step runner and prerequisite checks.

A ``Step`` is one unit of scaffolding work: a loading message shown while it
runs, a completion message shown when it succeeds, and an async action that
raises on failure.  ``StepRunner`` executes steps strictly one at a time and
ends the process on the first failure, leaving whatever was already written
on disk.
"""

from __future__ import annotations

import time
import traceback
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .utils import (
    console,
    exit_with_error,
    find_executable,
    format_duration,
    print_success,
)

LOADING_MARK = "⌛️"
SPINNER = "line"


class StepError(Exception):
    """Raised by a step action when the step cannot be completed."""


class PrerequisiteError(StepError):
    """Raised when a required executable is not on the search path."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} not found")


@dataclass(frozen=True)
class Step:
    """A single named unit of pipeline work."""

    loading: str
    completed: str
    action: Callable[[], Awaitable[None]]


def check_prerequisite(name: str) -> str:
    """Return the resolved path of *name* or raise ``PrerequisiteError``."""
    path = find_executable(name)
    if path is None:
        raise PrerequisiteError(name)
    return path


def prerequisite_step(name: str) -> Step:
    """Build the step that verifies *name* is installed."""

    async def _check() -> None:
        check_prerequisite(name)

    return Step(
        loading=f"Checking if {name} is installed",
        completed=f"{name} is installed",
        action=_check,
    )


class StepRunner:
    """Runs steps sequentially with a spinner and fail-fast error handling.

    On an interactive terminal the loading message is animated with a Rich
    spinner that is torn down before the completion line is printed.  When
    output is redirected the loading message is printed as a plain line
    instead, so logs keep the full step sequence.

    Attributes:
        completed: Completion messages of the steps that succeeded, in order.
    """

    def __init__(self) -> None:
        self.completed: list[str] = []
        self._started = time.monotonic()

    async def run(self, step: Step) -> None:
        """Run *step*; on failure report it and exit with status 1."""
        if not console.is_terminal:
            console.print(f"{LOADING_MARK} {step.loading}", markup=False)

        try:
            # Leaving the status block stops the spinner's refresh thread.
            with console.status(step.loading, spinner=SPINNER):
                await step.action()
        except (StepError, OSError) as exc:
            exit_with_error(_describe(exc))
        except Exception as exc:
            console.print(traceback.format_exc(), style="dim", markup=False)
            exit_with_error(_describe(exc))

        self.completed.append(step.completed)
        print_success(step.completed)

    async def run_all(self, steps: list[Step]) -> None:
        """Run every step in declaration order."""
        for step in steps:
            await self.run(step)

    async def check_prerequisites(self, names: list[str]) -> None:
        """Verify each executable in *names* resolves on ``PATH``."""
        await self.run_all([prerequisite_step(name) for name in names])

    @property
    def elapsed(self) -> str:
        """Human-readable time since the runner was created."""
        return format_duration(time.monotonic() - self._started)


def _describe(exc: BaseException) -> str:
    """Render an exception for the failure line."""
    if isinstance(exc, OSError) and exc.strerror:
        target = exc.filename
        return f"{exc.strerror}: {target}" if target else exc.strerror
    return str(exc) or exc.__class__.__name__
