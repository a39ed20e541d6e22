"""Validated configuration model for a multi-locale documentation site.

This package loads the site's declarative configuration (navigation bars,
path-scoped sidebars, search copy and metadata per locale), enforces its
invariants, and answers the questions a site renderer and link checker ask
of it. The ``docsite`` console script wraps the same operations.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite_config import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
