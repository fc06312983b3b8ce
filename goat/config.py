"""goat configuration.

Typed configuration for a scaffolding run.  Settings use Pydantic v2 models
so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PREREQUISITES: list[str] = ["go", "air", "npm", "npx", "templ", "git"]


class Config(BaseModel):
    """Global goat configuration.

    Created once by the CLI entry point and passed to the scaffolder.  Nothing
    here is persisted: every run starts from defaults plus the environment.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory in which the project directory is created",
    )
    default_project_name: str = Field(default="my-project", min_length=1)
    default_module_name: str = Field(default="my-module", min_length=1)
    server_port: int = Field(
        default=8080, ge=1, le=65535, description="Port the generated server listens on"
    )
    prerequisites: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PREREQUISITES),
        description="Executables that must resolve on PATH before scaffolding",
    )
    command_timeout: int | None = Field(
        default=None,
        ge=1,
        description="Per-command timeout in seconds; None waits forever",
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GOAT_OUTPUT_DIR, GOAT_SERVER_PORT, GOAT_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOAT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["GOAT_OUTPUT_DIR"])
        if os.environ.get("GOAT_SERVER_PORT"):
            kwargs["server_port"] = int(os.environ["GOAT_SERVER_PORT"])
        if os.environ.get("GOAT_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["GOAT_COMMAND_TIMEOUT"])
        return cls(**kwargs)
