"""Literal file contents written into a new Goat Stack project.

Every builder returns the complete text of one generated file.  Only the Go
module name and the server port are substituted; everything else is fixed.
"""

from __future__ import annotations

HTMX_SCRIPT = (
    '<script src="https://unpkg.com/htmx.org@1.9.10" '
    'integrity="sha384-D1Kt99CQMDuVetoL1lrYwg5t+9QdHe7NLX/SoJYkXDFfX37iInKRy5xLSi8nO7UC" '
    'crossorigin="anonymous"></script>'
)

TAILWIND_INPUT = "./input.css"
TAILWIND_OUTPUT = "./public/tailwind.css"
TAILWIND_CONTENT_GLOBS: list[str] = ["./pkg/templates/**/*.templ"]

# Build command Air runs on every change: CSS, templates, then the binary.
AIR_BUILD_CMD = (
    f"npx tailwindcss -i {TAILWIND_INPUT} -o {TAILWIND_OUTPUT} --minify"
    " && templ generate && go build -o ./tmp/main ."
)


def gitignore() -> str:
    return "node_modules/\ntmp/\n*_templ.go\n"


def index_templ() -> str:
    """``pkg/templates/index.templ``: the page rendered at ``/``."""
    lines = [
        "package templates",
        "",
        "templ Hello(name string) {",
        "\t<!DOCTYPE html>",
        '\t<html lang="en">',
        "\t\t<head>",
        '\t\t\t<meta charset="UTF-8"/>',
        '\t\t\t<meta name="viewport" content="width=device-width, initial-scale=1.0"/>',
        "\t\t\t<title>The Goat Stack</title>",
        '\t\t\t<link rel="stylesheet" href="/tailwind.css"/>',
        f"\t\t\t{HTMX_SCRIPT}",
        "\t\t</head>",
        "\t\t<body>",
        '\t\t\t<div class="flex flex-col items-center justify-center h-screen">',
        '\t\t\t\t<h1 class="text-4xl font-bold text-gray-800">Hello, { name }</h1>',
        "\t\t\t</div>",
        "\t\t</body>",
        "\t</html>",
        "}",
        "",
    ]
    return "\n".join(lines)


def root_handler(module_name: str) -> str:
    """``pkg/handlers/root.go``: renders the ``Hello`` template."""
    lines = [
        "package handlers",
        "",
        "import (",
        f'\t"{module_name}/pkg/templates"',
        "",
        '\t"github.com/labstack/echo/v4"',
        ")",
        "",
        "func Root(c echo.Context) error {",
        '\treturn templates.Hello("world 🐐").Render(c.Request().Context(), c.Response().Writer)',
        "}",
        "",
    ]
    return "\n".join(lines)


def main_go(module_name: str, port: int = 8080) -> str:
    """``main.go``: Echo server serving ``public/`` and the root route."""
    lines = [
        "package main",
        "",
        "import (",
        f'\t"{module_name}/pkg/handlers"',
        "",
        '\t"github.com/labstack/echo/v4"',
        ")",
        "",
        "func main() {",
        "\te := echo.New()",
        "",
        '\te.Static("/", "public")',
        "",
        '\te.GET("/", handlers.Root)',
        "",
        f'\te.Logger.Fatal(e.Start(":{port}"))',
        "}",
        "",
    ]
    return "\n".join(lines)


def tailwind_input_css() -> str:
    return "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"


def vscode_settings() -> str:
    lines = [
        "{",
        '\t"editor.formatOnSave": true,',
        '\t"[templ]": {',
        '\t\t"editor.defaultFormatter": "a-h.templ"',
        "\t},",
        '\t"tailwindCSS.includeLanguages": {',
        '\t\t"templ": "html"',
        "\t}",
        "}",
        "",
    ]
    return "\n".join(lines)


def vscode_extensions() -> str:
    lines = [
        "{",
        '\t"recommendations": [',
        '\t\t"golang.go",',
        '\t\t"a-h.templ",',
        '\t\t"bradlc.vscode-tailwindcss"',
        "\t]",
        "}",
        "",
    ]
    return "\n".join(lines)
