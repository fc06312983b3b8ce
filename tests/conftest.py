"""Shared pytest fixtures for the goat test suite.

Provides reusable fixtures for:
- Config files exactly as ``air init`` and ``npx tailwindcss init`` write them
- A fake toolchain (go, git, templ, npm, npx, air) installed on ``PATH``
- An empty ``PATH`` for prerequisite failures
"""

from __future__ import annotations

import os
import stat
import sys
import textwrap
from dataclasses import dataclass
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Generated config files
# ---------------------------------------------------------------------------

AIR_TOML = textwrap.dedent("""\
    root = "."
    testdata_dir = "testdata"
    tmp_dir = "tmp"

    [build]
      args_bin = []
      bin = "./tmp/main"
      cmd = "go build -o ./tmp/main ."
      delay = 1000
      exclude_dir = ["assets", "tmp", "vendor", "testdata"]
      exclude_file = []
      exclude_regex = ["_test.go"]
      exclude_unchanged = false
      follow_symlink = false
      full_bin = ""
      include_dir = []
      include_ext = ["go", "tpl", "tmpl", "html"]
      include_file = []
      kill_delay = "0s"
      log = "build-errors.log"
      poll = false
      poll_interval = 0
      post_cmd = []
      pre_cmd = []
      rerun = false
      rerun_delay = 500
      send_interrupt = false
      stop_on_error = false

    [color]
      app = ""
      build = "yellow"
      main = "magenta"
      runner = "green"
      watcher = "cyan"

    [log]
      main_only = false
      time = false

    [misc]
      clean_on_exit = false

    [screen]
      clear_on_rebuild = false
      keep_scroll = true
""")

TAILWIND_CONFIG = textwrap.dedent("""\
    /** @type {import('tailwindcss').Config} */
    module.exports = {
      content: [],
      theme: {
        extend: {},
      },
      plugins: [],
    }
""")


@pytest.fixture
def air_toml_text() -> str:
    """``.air.toml`` as written by ``air init``."""
    return AIR_TOML


@pytest.fixture
def tailwind_config_text() -> str:
    """``tailwind.config.js`` as written by ``npx tailwindcss init``."""
    return TAILWIND_CONFIG


# ---------------------------------------------------------------------------
# Fake toolchain
# ---------------------------------------------------------------------------

# Each script appends its argv to $GOAT_FAKE_LOG and fails when its name is
# listed in $GOAT_FAKE_FAIL.
_PREAMBLE = """\
#!/bin/sh
echo "{name} $*" >> "$GOAT_FAKE_LOG"
case " $GOAT_FAKE_FAIL " in
  *" {name} "*) echo "{name}: simulated failure" >&2; exit 1 ;;
esac
"""

_FAKE_TOOLS: dict[str, str] = {
    "go": """\
case "$1 $2" in
  "mod init") printf 'module %s\\n\\ngo 1.22\\n' "$3" > go.mod ;;
  "mod tidy") : > go.sum ;;
esac
""",
    "git": """\
if [ "$1" = "init" ]; then mkdir .git; fi
""",
    "templ": """\
if [ "$1" = "generate" ]; then : > pkg/templates/index_templ.go; fi
""",
    "npm": """\
if [ "$1" = "install" ]; then mkdir -p node_modules; printf '{}\\n' > package.json; fi
""",
    "npx": """\
if [ "$2" = "init" ]; then
cat > tailwind.config.js <<'EOF'
""" + TAILWIND_CONFIG + """EOF
else
  mkdir -p public
  printf '*,:after,:before{box-sizing:border-box}' > public/tailwind.css
fi
""",
    "air": """\
if [ "$1" = "init" ]; then
cat > .air.toml <<'EOF'
""" + AIR_TOML + """EOF
fi
""",
}


@dataclass
class FakeToolchain:
    """Handle on the fake executables installed for a test."""

    bin_dir: Path
    log_path: Path

    @property
    def calls(self) -> list[str]:
        if not self.log_path.exists():
            return []
        return self.log_path.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def fake_toolchain(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeToolchain:
    """Install shell-script stand-ins for every external tool on ``PATH``.

    The scripts create the files the real tools would (``go.mod``,
    ``.air.toml``, ``tailwind.config.js`` ...) so the full pipeline runs
    without Go, Node or network access.
    """
    if sys.platform == "win32":
        pytest.skip("fake toolchain uses POSIX shell scripts")

    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    log_path = tmp_path / "fake-calls.log"

    for name, body in _FAKE_TOOLS.items():
        script = bin_dir / name
        script.write_text(_PREAMBLE.format(name=name) + body, encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    monkeypatch.setenv("PATH", os.pathsep.join([str(bin_dir), "/usr/bin", "/bin"]))
    monkeypatch.setenv("GOAT_FAKE_LOG", str(log_path))
    monkeypatch.setenv("GOAT_FAKE_FAIL", "")
    return FakeToolchain(bin_dir=bin_dir, log_path=log_path)


@pytest.fixture
def empty_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``PATH`` at an empty directory so no tool resolves."""
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory new projects are created in."""
    out = tmp_path / "projects"
    out.mkdir()
    return out
