"""Serialize a :class:`SiteConfig` back into its raw document shape.

``dump_site_config`` is the inverse of :func:`~docsite_config.config.load`:
feeding its output back through the loader yields an equal configuration.
Optional fields that are unset are omitted rather than written as ``null``.

Examples
--------
>>> from docsite_config.config import dump_site_config, load
>>> raw = {
...     "title": "Docs",
...     "locales": {"en": {"label": "English", "lang": "en", "link": "/en/"}},
... }
>>> load(dump_site_config(load(raw))) == load(raw)
True
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .models import (
    LocaleConfig,
    LocalizedSearchStrings,
    SearchConfig,
    SearchProvider,
    SidebarEntry,
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    ThemeConfig,
    thaw_value,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def dump_site_config(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the raw mapping that :func:`load` would turn into ``config``."""
    return {
        "title": config.title,
        "description": config.description,
        "ignoreDeadLinks": config.ignore_dead_links,
        "locales": {
            code: _dump_locale(locale) for code, locale in config.locales.items()
        },
        "markdown": {
            "lineNumbers": config.markdown.line_numbers,
            **typ.cast("dict[str, typ.Any]", thaw_value(config.markdown.extra)),
        },
    }


def write_site_config(config: SiteConfig, path: Path) -> None:
    """Write ``config`` as a YAML document at ``path``."""
    yaml = _build_roundtrip_yaml()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.dump(dump_site_config(config), handle)


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _compact(payload: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Drop keys whose values are ``None``."""
    return {key: value for key, value in payload.items() if value is not None}


def _dump_locale(locale: LocaleConfig) -> dict[str, typ.Any]:
    return _compact(
        {
            "label": locale.label,
            "lang": locale.lang,
            "link": locale.link,
            "title": locale.title,
            "description": locale.description,
            "themeConfig": _dump_theme(locale.theme),
        }
    )


def _dump_theme(theme: ThemeConfig) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {
        "siteTitle": theme.site_title,
        "nav": [{"text": item.text, "link": item.link} for item in theme.nav],
        "sidebar": {
            prefix: [_dump_sidebar_entry(entry) for entry in entries]
            for prefix, entries in theme.sidebar.items()
        },
        "search": _dump_search(theme.search) if theme.search else None,
        "footer": (
            _compact(
                {"message": theme.footer.message, "copyright": theme.footer.copyright}
            )
            if theme.footer
            else None
        ),
        "editLink": (
            _compact({"pattern": theme.edit_link.pattern, "text": theme.edit_link.text})
            if theme.edit_link
            else None
        ),
        "lastUpdated": (
            _compact({"text": theme.last_updated.text}) if theme.last_updated else None
        ),
        "socialLinks": [
            {"icon": link.icon, "link": link.link} for link in theme.social_links
        ],
        "outlineTitle": theme.outline_title,
        "returnToTopLabel": theme.return_to_top_label,
        "sidebarMenuLabel": theme.sidebar_menu_label,
        "darkModeSwitchLabel": theme.dark_mode_switch_label,
    }
    return _compact(payload)


def _dump_sidebar_entry(entry: SidebarEntry) -> dict[str, typ.Any]:
    match entry:
        case SidebarGroup(text=text, items=items, collapsed=collapsed, link=link):
            return _compact(
                {
                    "text": text,
                    "collapsed": collapsed,
                    "link": link,
                    "items": [_dump_sidebar_entry(child) for child in items],
                }
            )
        case SidebarItem(text=text, link=link):
            return {"text": text, "link": link}
        case _:  # pragma: no cover - exhaustive over SidebarEntry
            typ.assert_never(entry)


def _dump_search(search: SearchConfig) -> dict[str, typ.Any]:
    options: dict[str, typ.Any] = {
        "locales": {
            code: _dump_search_strings(strings)
            for code, strings in search.locales.items()
        }
    }
    if search.provider is SearchProvider.ALGOLIA and search.algolia:
        options.update(
            appId=search.algolia.app_id,
            apiKey=search.algolia.api_key,
            indexName=search.algolia.index_name,
        )
    return {"provider": search.provider.value, "options": options}


def _dump_search_strings(strings: LocalizedSearchStrings) -> dict[str, typ.Any]:
    footer = _compact(
        {
            "selectText": strings.select_text,
            "navigateText": strings.navigate_text,
            "closeText": strings.close_text,
        }
    )
    modal = _compact(
        {
            "noResultsText": strings.no_results_text,
            "resetButtonTitle": strings.reset_button_title,
        }
    )
    if footer:
        modal["footer"] = footer
    button = _compact(
        {
            "buttonText": strings.button_text,
            "buttonAriaLabel": strings.button_aria_label,
        }
    )
    return {"translations": {"button": button, "modal": modal}}


__all__ = ["dump_site_config", "write_site_config"]
