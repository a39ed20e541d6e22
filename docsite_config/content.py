"""Discover the page paths that configured links may point at."""

from __future__ import annotations

import logging
import typing as typ

from ._constants import EXTERNAL_LINK_PREFIXES, PAGE_SUFFIXES

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SKIPPED_DIR_NAMES = frozenset({"node_modules", "public"})


def is_external_link(link: str) -> bool:
    """Return ``True`` for absolute URLs and same-page anchors."""
    return link.startswith(EXTERNAL_LINK_PREFIXES) or link.startswith("#")


def normalize_page_path(link: str) -> str:
    """Return the canonical page path for a link or a markdown file path.

    Fragments and query strings are dropped, ``.md``/``.html`` suffixes are
    removed and a trailing ``index`` collapses to its directory.

    Examples
    --------
    >>> normalize_page_path("/en/guides/index.md")
    '/en/guides/'
    >>> normalize_page_path("en/notes/setup.html#install")
    '/en/notes/setup'
    """
    path = link.split("#", 1)[0].split("?", 1)[0]
    if not path.startswith("/"):
        path = f"/{path}"
    for suffix in PAGE_SUFFIXES:
        if path.endswith(suffix):
            path = path.removesuffix(suffix)
            break
    if path.endswith("/index"):
        path = path.removesuffix("index")
    return path


def discover_pages(docs_root: Path) -> frozenset[str]:
    """Return the page path of every markdown file below ``docs_root``.

    Hidden directories (such as the generator's own config folder),
    ``node_modules`` and ``public`` are skipped.

    Raises
    ------
    FileNotFoundError
        If ``docs_root`` is not an existing directory.
    """
    if not docs_root.is_dir():
        msg = f"Docs root '{docs_root}' not found."
        raise FileNotFoundError(msg)

    pages: set[str] = set()
    for markdown_file in docs_root.rglob("*.md"):
        relative = markdown_file.relative_to(docs_root)
        if any(
            part.startswith(".") or part in SKIPPED_DIR_NAMES
            for part in relative.parts[:-1]
        ):
            continue
        pages.add(normalize_page_path(relative.as_posix()))
    logger.debug("Discovered %d page(s) under %s", len(pages), docs_root)
    return frozenset(pages)


__all__ = ["discover_pages", "is_external_link", "normalize_page_path"]
