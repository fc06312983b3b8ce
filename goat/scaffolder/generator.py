"""Main scaffolding orchestrator.

Takes a ``ProjectDescriptor`` and materialises a Goat Stack project
(Go + Echo, Templ, Tailwind CSS, htmx, Air) under ``Config.output_dir``.
Every path and subprocess is anchored at the project root explicitly; the
process working directory is never changed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config import Config
from ..steps import Step, StepError, StepRunner
from ..utils import console, last_line, print_hint, run_command
from . import templates
from .patching import patch_air_config, set_tailwind_content


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectDescriptor(BaseModel):
    """What to scaffold, captured once from the user."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Directory and display name")
    module_name: str = Field(..., min_length=1, description="Go module path")
    vscode: bool = Field(default=False, description="Write VS Code settings and extensions")


class CommandError(StepError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = "") -> None:
        self.command = " ".join(cmd)
        self.returncode = returncode
        self.stderr = stderr
        message = f"{self.command} failed (exit {returncode})"
        detail = last_line(stderr)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Builds the ordered scaffolding steps for one project.

    Given a ``ProjectDescriptor``, the generated tree contains:
    - ``go.mod`` / ``go.sum`` from ``go mod init`` and ``go mod tidy``
    - a git repository with a ``.gitignore``
    - ``pkg/templates`` (Templ page), ``pkg/handlers`` (root route),
      ``pkg/services`` and ``pkg/db`` placeholders
    - ``main.go`` starting an Echo server
    - Tailwind config, ``input.css`` and compiled ``public/tailwind.css``
    - ``.air.toml`` wired for Tailwind and Templ rebuilds
    - optionally ``.vscode/settings.json`` and ``.vscode/extensions.json``
    """

    def __init__(self, project: ProjectDescriptor, config: Config | None = None) -> None:
        self.project = project
        self.config = config or Config()
        self.root = self.config.output_dir / project.project_name

    # -- Public API --------------------------------------------------------

    def steps(self) -> list[Step]:
        """Return the pipeline in execution order."""
        steps = [
            Step("Creating project directories", "Project directories created", self.create_directories),
            Step("Initializing Go module", "Go module initialized", self.init_go_module),
            Step("Setting up Git", "Git set up", self.setup_git),
            Step("Creating templates package", "templates package created", self.create_templates_package),
            Step("Creating handlers package", "handlers package created", self.create_handlers_package),
            Step("Creating services package", "services package created", self.create_services_package),
            Step("Creating db package", "db package created", self.create_db_package),
            Step("Creating main.go", "main.go created", self.create_main),
            Step("Tidying Go module", "Go module tidied", self.tidy_go_module),
            Step("Setting up Tailwind", "Tailwind set up", self.setup_tailwind),
            Step("Setting up Air", "Air set up", self.setup_air),
        ]
        if self.project.vscode:
            steps.append(Step("Setting up VS Code", "VS Code set up", self.setup_vscode))
        return steps

    async def generate(self, runner: StepRunner | None = None) -> Path:
        """Run every step and print the next commands for the user.

        Returns:
            Path to the generated project root.
        """
        runner = runner or StepRunner()
        await runner.run_all(self.steps())

        console.print()
        console.print(f"🎉 Project created successfully in {runner.elapsed}", markup=False)
        print_hint(f"cd {self.root}")
        print_hint("air")
        return self.root

    # -- Steps -------------------------------------------------------------

    async def create_directories(self) -> None:
        await asyncio.to_thread(self.root.mkdir)
        await asyncio.to_thread((self.root / "pkg").mkdir)

    async def init_go_module(self) -> None:
        await self._run("go", "mod", "init", self.project.module_name)

    async def setup_git(self) -> None:
        await self._run("git", "init")
        await self._write(".gitignore", templates.gitignore())

    async def create_templates_package(self) -> None:
        await self._mkdir("pkg/templates")
        await self._write("pkg/templates/index.templ", templates.index_templ())
        await self._run("templ", "generate")

    async def create_handlers_package(self) -> None:
        await self._mkdir("pkg/handlers")
        await self._write(
            "pkg/handlers/root.go", templates.root_handler(self.project.module_name)
        )

    async def create_services_package(self) -> None:
        await self._mkdir("pkg/services")
        await self._write("pkg/services/.gitkeep", "")

    async def create_db_package(self) -> None:
        await self._mkdir("pkg/db")
        await self._write("pkg/db/.gitkeep", "")

    async def create_main(self) -> None:
        await self._write(
            "main.go",
            templates.main_go(self.project.module_name, self.config.server_port),
        )

    async def tidy_go_module(self) -> None:
        await self._run("go", "mod", "tidy")

    async def setup_tailwind(self) -> None:
        await self._run("npm", "install", "-D", "tailwindcss")
        await self._run("npx", "tailwindcss", "init")
        config_text = await self._read("tailwind.config.js")
        await self._write("tailwind.config.js", set_tailwind_content(config_text))
        await self._write("input.css", templates.tailwind_input_css())
        await self._run(
            "npx", "tailwindcss",
            "-i", templates.TAILWIND_INPUT,
            "-o", templates.TAILWIND_OUTPUT,
            "--minify",
        )

    async def setup_air(self) -> None:
        await self._run("air", "init")
        air_text = await self._read(".air.toml")
        await self._write(".air.toml", patch_air_config(air_text))

    async def setup_vscode(self) -> None:
        await self._mkdir(".vscode")
        await self._write(".vscode/settings.json", templates.vscode_settings())
        await self._write(".vscode/extensions.json", templates.vscode_extensions())

    # -- Helpers -----------------------------------------------------------

    async def _run(self, *cmd: str) -> None:
        """Run *cmd* inside the project root; raise ``CommandError`` on failure."""
        returncode, _stdout, stderr = await run_command(
            list(cmd), cwd=self.root, timeout=self.config.command_timeout
        )
        if returncode != 0:
            raise CommandError(list(cmd), returncode, stderr)

    async def _mkdir(self, relative: str) -> None:
        await asyncio.to_thread((self.root / relative).mkdir)

    async def _read(self, relative: str) -> str:
        return await asyncio.to_thread((self.root / relative).read_text, "utf-8")

    async def _write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        await asyncio.to_thread(path.write_text, content, "utf-8")
        return path
