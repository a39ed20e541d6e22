"""Tests for the ``docsite`` CLI commands, invoked as plain functions."""

from __future__ import annotations

import json
import typing as typ
from textwrap import dedent

import pytest

from docsite_config import cli
from docsite_config.config import load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def _write_config(tmp_path: Path, *, ignore_dead_links: bool) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(
        dedent(
            f"""
            title: Docs
            ignoreDeadLinks: {str(ignore_dead_links).lower()}
            locales:
              es:
                label: Español
                lang: es
                link: /es/
                themeConfig:
                  nav:
                    - {{text: Inicio, link: /es/}}
                  sidebar:
                    /es/guides/:
                      - text: Guías
                        items:
                          - {{text: Setup, link: /es/guides/setup}}
              en:
                label: English
                lang: en
                link: /en/
                themeConfig:
                  nav:
                    - {{text: Home, link: /en/}}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def _write_docs(tmp_path: Path, *pages: str) -> Path:
    root = tmp_path / "docs"
    for page in pages:
        path = root / page
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("# page\n", encoding="utf-8")
    root.mkdir(exist_ok=True)
    return root


def test_check_reports_success(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(tmp_path, ignore_dead_links=False)
    docs = _write_docs(tmp_path, "es/index.md", "es/guides/setup.md", "en/index.md")

    cli.check(config=config, docs_root=docs)

    out = capsys.readouterr().out
    assert "ok: 2 locale(s), 3 link(s), 3 page(s)" in out
    assert "under-localized search: en uses es copy" in out


def test_check_fails_on_dead_link(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(tmp_path, ignore_dead_links=False)
    docs = _write_docs(tmp_path, "es/index.md", "en/index.md")

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config, docs_root=docs)

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "dead link: /es/guides/setup (es:sidebar['/es/guides/'][0].items[0])" in err


def test_check_downgrades_ignored_dead_link(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(tmp_path, ignore_dead_links=True)
    docs = _write_docs(tmp_path, "es/index.md", "en/index.md")

    cli.check(config=config, docs_root=docs)

    out = capsys.readouterr().out
    assert "ignored dead link: /es/guides/setup" in out
    assert "ok: 2 locale(s)" in out


def test_check_reports_schema_errors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "site.yaml"
    config.write_text("title: Docs\nlocales: {}\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config, docs_root=tmp_path)

    assert excinfo.value.code == 1
    assert "error: locales: at least one locale" in capsys.readouterr().err


def test_check_reports_missing_docs_root(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(tmp_path, ignore_dead_links=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config, docs_root=tmp_path / "nope")

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("error: Docs root"), f"unexpected stderr: {err!r}"


def test_check_reports_repeated_yaml_key(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "site.yaml"
    config.write_text("title: Docs\ntitle: Again\nlocales: {}\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config, docs_root=tmp_path)

    assert excinfo.value.code == 1
    assert "[duplicate_key]" in capsys.readouterr().err


def test_check_resolves_against_discovered_pages(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    mocker: MockerFixture,
) -> None:
    """The page set comes from ``discover_pages`` on the requested docs root."""
    config = _write_config(tmp_path, ignore_dead_links=False)
    docs_root = tmp_path / "site-docs"
    discover = mocker.patch.object(
        cli,
        "discover_pages",
        return_value=frozenset({"/es/", "/es/guides/setup", "/en/"}),
    )

    cli.check(config=config, docs_root=docs_root)

    discover.assert_called_once_with(docs_root)
    assert "ok: 2 locale(s), 3 link(s), 3 page(s)" in capsys.readouterr().out


def test_links_prints_locale_tagged_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(tmp_path, ignore_dead_links=False)

    cli.links(config=config)

    payload = json.loads(capsys.readouterr().out)
    assert payload[0] == {"locale": "es", "link": "/es/", "source": "nav[0]"}
    assert [entry["locale"] for entry in payload] == ["es", "es", "en"]


def test_dump_writes_normalized_yaml(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(tmp_path, ignore_dead_links=False)
    output = tmp_path / "normalized.yaml"

    cli.dump(config=config, output=output)

    assert load_site_config(output) == load_site_config(config)
    assert "wrote" in capsys.readouterr().out


def test_route_prints_locale_and_sidebar(
    shipped_config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.route("/en/modules/mcp/01-fundamentals/lifecycle", config=shipped_config_path)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "locale: en (English)",
        "sidebar: /en/modules/mcp/",
        "search: local",
    ]
