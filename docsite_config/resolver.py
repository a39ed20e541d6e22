"""Resolve request paths and links against a loaded site configuration.

Every function here is a pure function of its arguments: the configuration
is immutable once loaded, so results can be cached or computed per locale in
parallel without coordination.

The rendering side asks :func:`resolve_page` which locale, navigation bar,
sidebar tree and search settings apply to a request path. The link-checking
side gets the flattened link set from :func:`collect_links` and the verdict
from :func:`resolve_links`.

Examples
--------
>>> from docsite_config.config import load
>>> from docsite_config.resolver import default_locale, sidebar_for_path
>>> config = load(
...     {
...         "title": "Docs",
...         "locales": {
...             "es": {"label": "Español", "lang": "es", "link": "/es/"},
...             "en": {
...                 "label": "English",
...                 "lang": "en",
...                 "link": "/en/",
...                 "themeConfig": {
...                     "sidebar": {
...                         "/en/guides/": [{"text": "Setup", "link": "/en/guides/setup"}]
...                     }
...                 },
...             },
...         },
...     }
... )
>>> default_locale(config)
'es'
>>> [entry.text for entry in sidebar_for_path(config, "/en/guides/setup")]
['Setup']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from .config.models import (
    DeadLinkError,
    DeadLinkWarning,
    LinkReference,
    OrphanSidebarWarning,
    SidebarGroup,
    SidebarItem,
    ValidationReport,
)
from .content import is_external_link, normalize_page_path
from .search import MergedSearchStrings, merge_search_strings

if typ.TYPE_CHECKING:
    from .config.models import (
        LocaleConfig,
        NavItem,
        SearchConfig,
        SidebarEntry,
        SiteConfig,
    )

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PageContext:
    """Everything the renderer needs to lay out a single request path."""

    path: str
    locale: str
    locale_config: LocaleConfig
    nav: tuple[NavItem, ...]
    sidebar_prefix: str | None
    sidebar: tuple[SidebarEntry, ...]
    search: SearchConfig | None
    search_strings: MergedSearchStrings


def default_locale(config: SiteConfig) -> str:
    """Return the locale served at ``/``, else the first declared locale."""
    return config.default_locale()


def locale_for_path(config: SiteConfig, path: str) -> str:
    """Return the locale whose ``link`` is the longest prefix of ``path``.

    Paths that fall outside every locale resolve to :func:`default_locale`.
    """
    candidate = path if path.endswith("/") else f"{path}/"
    best: tuple[int, str] | None = None
    for code, locale in config.locales.items():
        if candidate.startswith(locale.link) and (
            best is None or len(locale.link) > best[0]
        ):
            best = (len(locale.link), code)
    return best[1] if best else default_locale(config)


def match_sidebar_prefix(
    sidebar: cabc.Mapping[str, typ.Any], path: str
) -> str | None:
    """Return the longest key of ``sidebar`` that prefixes ``path``."""
    return max(
        (prefix for prefix in sidebar if path.startswith(prefix)),
        key=len,
        default=None,
    )


def sidebar_for_path(config: SiteConfig, path: str) -> tuple[SidebarEntry, ...]:
    """Return the sidebar tree for ``path``; empty when no prefix matches."""
    sidebar = config.locales[locale_for_path(config, path)].theme.sidebar
    prefix = match_sidebar_prefix(sidebar, path)
    return sidebar[prefix] if prefix is not None else ()


def resolve_page(config: SiteConfig, path: str) -> PageContext:
    """Bundle the locale, navigation, sidebar and search settings for ``path``."""
    code = locale_for_path(config, path)
    locale = config.locales[code]
    prefix = match_sidebar_prefix(locale.theme.sidebar, path)
    return PageContext(
        path=path,
        locale=code,
        locale_config=locale,
        nav=locale.theme.nav,
        sidebar_prefix=prefix,
        sidebar=locale.theme.sidebar[prefix] if prefix is not None else (),
        search=locale.theme.search,
        search_strings=merge_search_strings(config, code),
    )


def edit_link_for(config: SiteConfig, locale: str, relative_path: str) -> str | None:
    """Return the edit URL for a source file, or ``None`` when not configured."""
    edit_link = config.get_locale(locale).theme.edit_link
    if edit_link is None:
        return None
    return edit_link.url_for(relative_path)


def collect_links(config: SiteConfig) -> list[LinkReference]:
    """Flatten every internal nav and sidebar link, tagged with its locale.

    Links are returned in declaration order; absolute URLs and anchors are
    left out since they cannot be checked against local pages.
    """
    references: list[LinkReference] = []
    for code, locale in config.locales.items():
        for index, item in enumerate(locale.theme.nav):
            references.append(LinkReference(code, item.link, f"nav[{index}]"))
        for prefix, entries in locale.theme.sidebar.items():
            for index, entry in enumerate(entries):
                references.extend(
                    _walk_sidebar(entry, code, f"sidebar[{prefix!r}][{index}]")
                )
    return [ref for ref in references if not is_external_link(ref.link)]


def _walk_sidebar(
    entry: SidebarEntry, locale: str, source: str
) -> cabc.Iterator[LinkReference]:
    match entry:
        case SidebarItem(link=link):
            yield LinkReference(locale, link, source)
        case SidebarGroup(items=items, link=link):
            if link:
                yield LinkReference(locale, link, source)
            for index, child in enumerate(items):
                yield from _walk_sidebar(child, locale, f"{source}.items[{index}]")
        case _:  # pragma: no cover - exhaustive over SidebarEntry
            typ.assert_never(entry)


def find_orphan_sidebars(config: SiteConfig) -> list[OrphanSidebarWarning]:
    """Return sidebar prefixes that no nav link in the same locale leads into.

    A prefix is reachable when some nav link is a path ancestor of it (the
    link with a trailing ``/`` is a prefix of it) or it is a prefix of some
    nav link. ``/es/guides`` therefore reaches ``/es/guides/`` but not
    ``/es/guidesx/``.
    """
    orphans: list[OrphanSidebarWarning] = []
    for code, locale in config.locales.items():
        nav_links = [
            normalize_page_path(item.link)
            for item in locale.theme.nav
            if not is_external_link(item.link)
        ]
        for prefix in locale.theme.sidebar:
            if not any(_nav_reaches(link, prefix) for link in nav_links):
                orphans.append(OrphanSidebarWarning(locale=code, prefix=prefix))
    return orphans


def _nav_reaches(link: str, prefix: str) -> bool:
    link_dir = link if link.endswith("/") else f"{link}/"
    return prefix.startswith(link_dir) or link.startswith(prefix)


def resolve_links(
    config: SiteConfig, pages: cabc.Iterable[str]
) -> ValidationReport:
    """Cross-check configured links against the set of existing page paths.

    Parameters
    ----------
    config : SiteConfig
        Loaded configuration whose nav and sidebar links are checked.
    pages : Iterable[str]
        Known page paths, typically from
        :func:`docsite_config.content.discover_pages`.

    Returns
    -------
    ValidationReport
        Every unresolved link path with the entries referencing it, plus any
        orphan sidebar prefixes.

    Raises
    ------
    DeadLinkError
        If unresolved links exist and ``config.ignore_dead_links`` is false.
    """
    known = {normalize_page_path(page) for page in pages}
    unresolved: dict[str, list[LinkReference]] = {}
    for reference in collect_links(config):
        path = normalize_page_path(reference.link)
        if _page_exists(path, known):
            continue
        unresolved.setdefault(path, []).append(reference)

    report = ValidationReport(
        dead_links=tuple(
            DeadLinkWarning(path=path, referenced_by=tuple(refs))
            for path, refs in unresolved.items()
        ),
        orphan_sidebars=tuple(find_orphan_sidebars(config)),
        ignore_dead_links=config.ignore_dead_links,
    )
    for orphan in report.orphan_sidebars:
        logger.warning(
            "Sidebar '%s' in locale '%s' is not reachable from the nav bar",
            orphan.prefix,
            orphan.locale,
        )
    if report.is_fatal:
        raise DeadLinkError(report)
    for warning in report.dead_links:
        logger.warning(
            "Ignoring dead link %s (referenced %d time(s))",
            warning.path,
            len(warning.referenced_by),
        )
    return report


def _page_exists(path: str, known: cabc.Set[str]) -> bool:
    return path in known or (not path.endswith("/") and f"{path}/" in known)


__all__ = [
    "PageContext",
    "collect_links",
    "default_locale",
    "edit_link_for",
    "find_orphan_sidebars",
    "locale_for_path",
    "match_sidebar_prefix",
    "resolve_links",
    "resolve_page",
    "sidebar_for_path",
]
