"""Theme configuration builders for a single locale."""

from __future__ import annotations

import collections.abc as cabc

from .._constants import EDIT_LINK_PLACEHOLDER
from .helpers import (
    _field_path,
    _normalize_locale_code,
    _optional_bool,
    _optional_mapping,
    _optional_str,
    _require_list,
    _require_mapping,
    _require_str,
)
from .models import (
    AlgoliaOptions,
    EditLinkConfig,
    FrozenMapping,
    FooterConfig,
    LastUpdatedConfig,
    LocalizedSearchStrings,
    NavItem,
    SchemaError,
    SchemaErrorKind,
    SearchConfig,
    SearchProvider,
    SidebarEntry,
    SidebarGroup,
    SidebarItem,
    SocialLink,
    ThemeConfig,
)


def _build_theme_config(
    payload: object, *, locale_link: str, parent: str
) -> ThemeConfig:
    """Build the ThemeConfig of one locale from its ``themeConfig`` mapping."""
    data = _optional_mapping(payload, parent)
    search_raw = data.get("search")
    return ThemeConfig(
        site_title=_optional_str(data, "siteTitle", parent),
        nav=_build_nav(data.get("nav"), _field_path(parent, "nav")),
        sidebar=_build_sidebar(
            data.get("sidebar"),
            locale_link=locale_link,
            parent=_field_path(parent, "sidebar"),
        ),
        search=(
            _build_search_config(search_raw, _field_path(parent, "search"))
            if search_raw is not None
            else None
        ),
        footer=_build_footer(data.get("footer"), _field_path(parent, "footer")),
        edit_link=_build_edit_link(data.get("editLink"), _field_path(parent, "editLink")),
        last_updated=_build_last_updated(
            data.get("lastUpdated"), _field_path(parent, "lastUpdated")
        ),
        social_links=_build_social_links(
            data.get("socialLinks"), _field_path(parent, "socialLinks")
        ),
        outline_title=_optional_str(data, "outlineTitle", parent),
        return_to_top_label=_optional_str(data, "returnToTopLabel", parent),
        sidebar_menu_label=_optional_str(data, "sidebarMenuLabel", parent),
        dark_mode_switch_label=_optional_str(data, "darkModeSwitchLabel", parent),
    )


def _build_nav(entries: object, field: str) -> tuple[NavItem, ...]:
    """Build navigation bar entries, preserving declaration order."""
    items: list[NavItem] = []
    for index, entry in enumerate(_require_list(entries, field)):
        entry_field = _field_path(field, index)
        data = _require_mapping(entry, entry_field)
        items.append(
            NavItem(
                text=_require_str(data, "text", entry_field),
                link=_require_str(data, "link", entry_field),
            )
        )
    return tuple(items)


def _build_sidebar(
    payload: object, *, locale_link: str, parent: str
) -> cabc.Mapping[str, tuple[SidebarEntry, ...]]:
    """Build the prefix-keyed sidebar trees of one locale."""
    data = _optional_mapping(payload, parent)
    sidebar: dict[str, tuple[SidebarEntry, ...]] = {}
    for prefix, groups_raw in data.items():
        prefix_field = _field_path(parent, str(prefix))
        if not isinstance(prefix, str) or not prefix.endswith("/"):
            msg = "sidebar prefixes must be paths ending with '/'"
            raise SchemaError(prefix_field, msg)
        if not prefix.startswith(locale_link):
            msg = f"sidebar prefix must start with the locale link '{locale_link}'"
            raise SchemaError(prefix_field, msg, kind=SchemaErrorKind.PREFIX_MISMATCH)
        sidebar[prefix] = tuple(
            _build_sidebar_entry(entry, _field_path(prefix_field, index))
            for index, entry in enumerate(_require_list(groups_raw, prefix_field))
        )
    return FrozenMapping(sidebar)


def _build_sidebar_entry(payload: object, field: str) -> SidebarEntry:
    """Build a sidebar group (when ``items`` is present) or a leaf item."""
    data = _require_mapping(payload, field)
    text = _require_str(data, "text", field)
    match data:
        case {"items": items_raw}:
            items_field = _field_path(field, "items")
            children = tuple(
                _build_sidebar_entry(child, _field_path(items_field, index))
                for index, child in enumerate(_require_list(items_raw, items_field))
            )
            return SidebarGroup(
                text=text,
                items=children,
                collapsed=_optional_bool(data, "collapsed", field),
                link=_optional_str(data, "link", field),
            )
        case _:
            return SidebarItem(text=text, link=_require_str(data, "link", field))


def _build_search_config(payload: object, field: str) -> SearchConfig:
    """Build the search provider configuration and its localized copy."""
    data = _require_mapping(payload, field)
    provider_raw = data.get("provider", SearchProvider.LOCAL.value)
    try:
        provider = SearchProvider(provider_raw)
    except ValueError as exc:
        choices = ", ".join(member.value for member in SearchProvider)
        msg = f"unknown provider {provider_raw!r}; expected one of {choices}"
        raise SchemaError(_field_path(field, "provider"), msg) from exc

    options_field = _field_path(field, "options")
    options = _optional_mapping(data.get("options"), options_field)
    locales_field = _field_path(options_field, "locales")
    locales: dict[str, LocalizedSearchStrings] = {}
    for key, strings_raw in _optional_mapping(options.get("locales"), locales_field).items():
        key_field = _field_path(locales_field, str(key))
        code = _normalize_locale_code(key, key_field)
        if code in locales:
            msg = f"search strings for locale '{code}' are declared twice"
            raise SchemaError(key_field, msg, kind=SchemaErrorKind.DUPLICATE_KEY)
        locales[code] = _build_search_strings(strings_raw, key_field)

    algolia = None
    if provider is SearchProvider.ALGOLIA:
        algolia = AlgoliaOptions(
            app_id=_require_str(options, "appId", options_field),
            api_key=_require_str(options, "apiKey", options_field),
            index_name=_require_str(options, "indexName", options_field),
        )
    return SearchConfig(
        provider=provider, locales=FrozenMapping(locales), algolia=algolia
    )


def _build_search_strings(payload: object, field: str) -> LocalizedSearchStrings:
    """Build search UI copy from the nested ``translations`` mapping."""
    data = _optional_mapping(payload, field)
    translations_field = _field_path(field, "translations")
    translations = _optional_mapping(data.get("translations"), translations_field)
    button_field = _field_path(translations_field, "button")
    button = _optional_mapping(translations.get("button"), button_field)
    modal_field = _field_path(translations_field, "modal")
    modal = _optional_mapping(translations.get("modal"), modal_field)
    footer_field = _field_path(modal_field, "footer")
    footer = _optional_mapping(modal.get("footer"), footer_field)
    return LocalizedSearchStrings(
        button_text=_optional_str(button, "buttonText", button_field),
        button_aria_label=_optional_str(button, "buttonAriaLabel", button_field),
        no_results_text=_optional_str(modal, "noResultsText", modal_field),
        reset_button_title=_optional_str(modal, "resetButtonTitle", modal_field),
        select_text=_optional_str(footer, "selectText", footer_field),
        navigate_text=_optional_str(footer, "navigateText", footer_field),
        close_text=_optional_str(footer, "closeText", footer_field),
    )


def _build_footer(payload: object, field: str) -> FooterConfig | None:
    if payload is None:
        return None
    data = _require_mapping(payload, field)
    return FooterConfig(
        message=_optional_str(data, "message", field),
        copyright=_optional_str(data, "copyright", field),
    )


def _build_edit_link(payload: object, field: str) -> EditLinkConfig | None:
    if payload is None:
        return None
    data = _require_mapping(payload, field)
    pattern = _require_str(data, "pattern", field)
    if EDIT_LINK_PLACEHOLDER not in pattern:
        msg = f"pattern must contain the '{EDIT_LINK_PLACEHOLDER}' placeholder"
        raise SchemaError(_field_path(field, "pattern"), msg)
    return EditLinkConfig(pattern=pattern, text=_optional_str(data, "text", field))


def _build_last_updated(payload: object, field: str) -> LastUpdatedConfig | None:
    if payload is None:
        return None
    data = _require_mapping(payload, field)
    return LastUpdatedConfig(text=_optional_str(data, "text", field))


def _build_social_links(entries: object, field: str) -> tuple[SocialLink, ...]:
    links: list[SocialLink] = []
    for index, entry in enumerate(_require_list(entries, field)):
        entry_field = _field_path(field, index)
        data = _require_mapping(entry, entry_field)
        links.append(
            SocialLink(
                icon=_require_str(data, "icon", entry_field),
                link=_require_str(data, "link", entry_field),
            )
        )
    return tuple(links)


__all__ = ["_build_search_strings", "_build_theme_config"]
