"""In-place edits of config files generated by external tools.

These helpers work on the exact text ``npx tailwindcss init`` and
``air init`` produce.  They do not parse JS or TOML: each edit finds a
marker substring and splices literal text next to it.  All functions are
pure (text in, text out) and raise ``ConfigPatchError`` when the expected
marker is absent.  Applying a patch twice duplicates the spliced content.
"""

from __future__ import annotations

import json
import re

from ..steps import StepError
from .templates import AIR_BUILD_CMD, TAILWIND_CONTENT_GLOBS

TAILWIND_EMPTY_CONTENT = "content: []"


class ConfigPatchError(StepError):
    """Raised when a generated config does not contain the expected marker."""

    def __init__(self, filename: str, marker: str) -> None:
        self.filename = filename
        self.marker = marker
        super().__init__(f"Could not find {marker!r} in {filename}")


def _quote(value: str) -> str:
    return json.dumps(value)


def append_list_entry(text: str, key: str, entry: str, filename: str = "config") -> str:
    """Insert *entry* (quoted) at the end of the list following *key*.

    Finds the first occurrence of *key*, then the nearest ``]`` after it, and
    inserts ``, "entry"`` immediately before that bracket.  An empty list
    (``[]``) receives the entry without a leading separator.
    """
    key_idx = text.find(key)
    if key_idx == -1:
        raise ConfigPatchError(filename, key)
    close_idx = text.find("]", key_idx)
    if close_idx == -1:
        raise ConfigPatchError(filename, f"{key} = [...]")

    open_idx = text.rfind("[", key_idx, close_idx)
    is_empty = open_idx != -1 and not text[open_idx + 1:close_idx].strip()
    insertion = _quote(entry) if is_empty else f", {_quote(entry)}"
    return text[:close_idx] + insertion + text[close_idx:]


def replace_key_line(text: str, key: str, line: str, filename: str = "config") -> str:
    """Replace the first line assigning *key* with *line*, keeping its indent."""
    pattern = re.compile(rf"^([ \t]*){re.escape(key)}[ \t]*=.*$", re.MULTILINE)
    match = pattern.search(text)
    if match is None:
        raise ConfigPatchError(filename, key)
    return text[:match.start()] + match.group(1) + line + text[match.end():]


def set_tailwind_content(text: str, globs: list[str] | None = None) -> str:
    """Point Tailwind's ``content`` option at the project's templates."""
    if TAILWIND_EMPTY_CONTENT not in text:
        raise ConfigPatchError("tailwind.config.js", TAILWIND_EMPTY_CONTENT)
    globs = TAILWIND_CONTENT_GLOBS if globs is None else globs
    content = "content: [" + ", ".join(_quote(g) for g in globs) + "]"
    return text.replace(TAILWIND_EMPTY_CONTENT, content, 1)


def patch_air_config(text: str) -> str:
    """Apply every ``.air.toml`` edit the Goat Stack needs.

    - the build ``cmd`` also compiles Tailwind and Templ output;
    - ``node_modules`` is excluded from watching;
    - generated ``_templ.go`` files are excluded;
    - ``.templ`` sources trigger a rebuild.
    """
    name = ".air.toml"
    text = replace_key_line(text, "cmd", f"cmd = {_quote(AIR_BUILD_CMD)}", name)
    text = append_list_entry(text, "exclude_dir", "node_modules", name)
    text = append_list_entry(text, "exclude_regex", "_templ.go", name)
    return append_list_entry(text, "include_ext", "templ", name)
