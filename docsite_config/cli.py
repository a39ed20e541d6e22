"""Cyclopts CLI entrypoint for validating the documentation site configuration.

The ``docsite`` console script defined here loads ``config/site.yaml``,
checks it against the schema, cross-checks every navigation and sidebar link
against the markdown pages under ``docs/``, and exposes the resolved data to
other tooling. Typical usage involves running ``docsite check`` locally or in
CI before the site generator builds, and ``docsite links`` to feed the
flattened link set to an external link checker.

Examples
--------
Validate the default configuration against the default docs tree:

>>> from docsite_config.cli import main
>>> main()  # doctest: +SKIP

Show which locale and sidebar serve a request path:

>>> from docsite_config.cli import app
>>> app(["route", "/en/guides/mcp/mcp-setup-guide"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH, DEFAULT_DOCS_ROOT
from .config import (
    DeadLinkError,
    SchemaError,
    SiteConfig,
    ValidationReport,
    load_site_config,
    write_site_config,
)
from .content import discover_pages
from .resolver import collect_links, resolve_links, resolve_page
from .search import merge_search_strings

app = App(name="docsite", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]
VerboseOption = typ.Annotated[
    bool, Parameter(help="Log debug details to stderr", env_var="INPUT_VERBOSE")
]


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_or_exit(config: Path) -> SiteConfig:
    """Load the configuration, turning schema failures into exit status 1."""
    try:
        return load_site_config(config)
    except SchemaError as exc:
        print(f"error: {exc.field}: {exc.reason} [{exc.kind}]", file=sys.stderr)
        raise SystemExit(1) from exc


def _print_report(report: ValidationReport, *, stream: typ.TextIO) -> None:
    label = "dead link" if report.is_fatal else "ignored dead link"
    for warning in report.dead_links:
        sources = ", ".join(
            f"{ref.locale}:{ref.source}" for ref in warning.referenced_by
        )
        print(f"{label}: {warning.path} ({sources})", file=stream)
    for orphan in report.orphan_sidebars:
        print(
            f"orphan sidebar: {orphan.prefix} (locale {orphan.locale})", file=stream
        )


@app.command(help="Validate the site config and check its links against the docs.")
def check(
    *,
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    docs_root: typ.Annotated[
        Path, Parameter(help="Directory holding the markdown pages", env_var="INPUT_DOCS_ROOT")
    ] = DEFAULT_DOCS_ROOT,
    verbose: VerboseOption = False,
) -> None:
    """Load the configuration, resolve its links, and report diagnostics.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    docs_root : Path, optional
        Directory whose ``*.md`` files define the known pages (overridable via
        ``INPUT_DOCS_ROOT``).
    verbose : bool, optional
        Emit debug logging on stderr.

    Returns
    -------
    None
        Prints diagnostics and a summary line.

    Raises
    ------
    SystemExit
        With status 1 when the configuration violates the schema, when
        ``docs_root`` does not exist, or when dead links are found while
        ``ignoreDeadLinks`` is false.
    """
    _configure_logging(verbose=verbose)
    site_config = _load_or_exit(config)
    try:
        pages = discover_pages(docs_root)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    try:
        report = resolve_links(site_config, pages)
    except DeadLinkError as exc:
        _print_report(exc.report, stream=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    _print_report(report, stream=sys.stdout)
    for code in site_config.locales:
        merged = merge_search_strings(site_config, code)
        if merged.note:
            missing = ", ".join(merged.note.missing_fields)
            print(
                f"under-localized search: {code} uses "
                f"{merged.note.fallback_language} copy for {missing}"
            )
    checked = len(collect_links(site_config))
    print(
        f"ok: {len(site_config.locales)} locale(s), {checked} link(s), "
        f"{len(pages)} page(s)"
    )


@app.command(help="Print every nav and sidebar link as JSON for link checkers.")
def links(*, config: ConfigOption = DEFAULT_CONFIG_PATH) -> None:
    """Print the flattened, locale-tagged link set as a JSON array."""
    site_config = _load_or_exit(config)
    payload = msgspec.json.encode(collect_links(site_config))
    print(msgspec.json.format(payload, indent=2).decode("utf-8"))


@app.command(help="Write the validated configuration back out as normalized YAML.")
def dump(
    *,
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    output: typ.Annotated[
        Path, Parameter(help="Destination YAML file", env_var="INPUT_OUTPUT")
    ],
) -> None:
    """Load ``config`` and write its normalized form to ``output``."""
    site_config = _load_or_exit(config)
    write_site_config(site_config, output)
    print(f"wrote {output}")


@app.command(help="Show the locale and sidebar that serve a request path.")
def route(path: str, *, config: ConfigOption = DEFAULT_CONFIG_PATH) -> None:
    """Print the locale, sidebar prefix and search provider for ``path``."""
    site_config = _load_or_exit(config)
    page = resolve_page(site_config, path)
    print(f"locale: {page.locale} ({page.locale_config.label})")
    print(f"sidebar: {page.sidebar_prefix or '-'}")
    print(f"search: {page.search.provider.value if page.search else '-'}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
