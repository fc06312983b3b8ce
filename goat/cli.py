"""Command-line entry point for goat.

Usage::

    goat new        create a new project (interactive)
    goat help       show the command summary
    goat version    show version information

Exactly one command is accepted; anything else exits with status 1.
"""

from __future__ import annotations

import asyncio
import sys

from rich.prompt import Prompt

from . import __version__
from .config import Config
from .scaffolder import ProjectDescriptor, ProjectGenerator
from .steps import StepRunner
from .utils import console, exit_with_error

HEADER = "The Goat Stack 🐐"

HELP_TEXT = "\n".join([
    "Usage: goat <command>",
    "Commands:",
    "  new\t\tcreate a new project",
    "  help\t\tshow this help message",
    "  version\tshow version information",
])


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def _ask(question: str, default: str = "") -> str:
    """Ask *question*; blank input or a closed stdin yields *default*."""
    try:
        answer = Prompt.ask(question, default=default, show_default=bool(default), console=console)
    except EOFError:
        console.print()
        return default
    answer = (answer or "").strip()
    return answer or default


def prompt_project(config: Config) -> ProjectDescriptor:
    """Collect the project descriptor interactively."""
    project_name = _ask("Project name", config.default_project_name)
    module_name = _ask("Module name", config.default_module_name)
    vscode = _ask("Are you using VS Code? (y/n)") in ("y", "Y")
    console.print()
    return ProjectDescriptor(
        project_name=project_name,
        module_name=module_name,
        vscode=vscode,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def new_project(config: Config, project: ProjectDescriptor) -> None:
    """Check prerequisites, then scaffold *project*."""
    runner = StepRunner()

    console.print("Checking prerequisites:")
    await runner.check_prerequisites(config.prerequisites)
    console.print()

    console.print("Creating project:")
    await ProjectGenerator(project, config).generate(runner)


def cmd_new() -> None:
    try:
        config = Config.from_env()
    except ValueError as exc:
        exit_with_error(f"Invalid configuration: {exc}")
    project = prompt_project(config)
    asyncio.run(new_project(config, project))


def cmd_help() -> None:
    console.print(HELP_TEXT, markup=False)


def cmd_version() -> None:
    console.print(f"v{__version__}", markup=False)


COMMANDS = {
    "new": cmd_new,
    "help": cmd_help,
    "version": cmd_version,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``goat`` and ``python -m goat``."""
    args = sys.argv[1:] if argv is None else argv

    console.print(HEADER, markup=False)
    console.print()

    if len(args) > 1:
        exit_with_error("Wrong number of arguments: too many")
    if len(args) < 1:
        exit_with_error("Wrong number of arguments: not enough")

    command = COMMANDS.get(args[0])
    if command is None:
        exit_with_error(f"Invalid command: {args[0]}")
    command()


if __name__ == "__main__":
    main()
