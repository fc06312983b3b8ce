"""goat -- scaffolding CLI for The Goat Stack (Go, Air, Templ, Tailwind, htmx).

Quick usage::

    $ goat new
    $ goat help
    $ goat version
"""

VERSION: tuple[int, int, int] = (0, 1, 0)

__version__ = ".".join(str(part) for part in VERSION)
