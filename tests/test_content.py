"""Unit tests for markdown page discovery and path normalization."""

from __future__ import annotations

import typing as typ

import pytest

from docsite_config.content import discover_pages, is_external_link, normalize_page_path

if typ.TYPE_CHECKING:
    from pathlib import Path


def _touch(root: Path, relative: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("# page\n", encoding="utf-8")


def test_discover_pages_maps_files_to_page_paths(tmp_path: Path) -> None:
    _touch(tmp_path, "index.md")
    _touch(tmp_path, "es/index.md")
    _touch(tmp_path, "es/guides/mcp/mcp-setup-guide.md")
    _touch(tmp_path, "en/modules/mcp/index.md")
    _touch(tmp_path, "en/notes/readme.txt")

    pages = discover_pages(tmp_path)

    assert pages == {
        "/",
        "/es/",
        "/es/guides/mcp/mcp-setup-guide",
        "/en/modules/mcp/",
    }, f"unexpected pages {sorted(pages)!r}"


def test_discover_pages_skips_hidden_and_build_dirs(tmp_path: Path) -> None:
    _touch(tmp_path, ".vitepress/theme/notes.md")
    _touch(tmp_path, "node_modules/pkg/README.md")
    _touch(tmp_path, "en/guide.md")
    assert discover_pages(tmp_path) == {"/en/guide"}


def test_discover_pages_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        discover_pages(tmp_path / "missing")


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("/en/", "/en/"),
        ("/en/index", "/en/"),
        ("/en/guide.html?x=1", "/en/guide"),
        ("en/guide.md#intro", "/en/guide"),
    ],
)
def test_normalize_page_path(link: str, expected: str) -> None:
    assert normalize_page_path(link) == expected


def test_is_external_link() -> None:
    assert is_external_link("https://github.com/LIDR-IT")
    assert is_external_link("#section")
    assert not is_external_link("/en/guides/")
