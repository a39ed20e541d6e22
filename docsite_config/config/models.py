"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ

from .._constants import EDIT_LINK_PLACEHOLDER, ROOT_LOCALE_LINK


class FrozenMapping(cabc.Mapping):
    """Read-only, hashable mapping that keeps insertion order.

    Configuration records use it instead of ``dict`` so a loaded
    :class:`SiteConfig` can be shared between callers and used as a cache key.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: cabc.Mapping[typ.Any, typ.Any] | None = None) -> None:
        self._data = dict(data or {})
        self._hash: int | None = None

    def __getitem__(self, key: object) -> typ.Any:  # noqa: ANN401 - mapping values are untyped
        return self._data[key]

    def __iter__(self) -> cabc.Iterator[typ.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, cabc.Mapping):
            return self._data == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def freeze_value(value: object) -> object:
    """Return ``value`` with nested mappings and lists made immutable."""
    match value:
        case cabc.Mapping():
            return FrozenMapping(
                {key: freeze_value(item) for key, item in value.items()}
            )
        case list() | tuple():
            return tuple(freeze_value(item) for item in value)
        case _:
            return value


def thaw_value(value: object) -> object:
    """Return plain ``dict``/``list`` copies of a value built by :func:`freeze_value`."""
    match value:
        case cabc.Mapping():
            return {key: thaw_value(item) for key, item in value.items()}
        case tuple():
            return [thaw_value(item) for item in value]
        case _:
            return value


def _empty_mapping() -> cabc.Mapping[str, typ.Any]:
    return FrozenMapping()


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class SchemaErrorKind(enum.StrEnum):
    """Categories of structural configuration failures."""

    MISSING = "missing"
    TYPE = "type"
    VALUE = "value"
    DUPLICATE_KEY = "duplicate_key"
    PREFIX_MISMATCH = "prefix_mismatch"


class SchemaError(SiteConfigError):
    """Raised when a configuration field is missing, mistyped, or inconsistent.

    Parameters
    ----------
    field : str
        Path of the offending field, for example
        ``locales.en.themeConfig.nav[2].link``.
    reason : str
        Human readable description of the failure.
    kind : SchemaErrorKind, optional
        Failure category; defaults to :attr:`SchemaErrorKind.VALUE`.
    """

    def __init__(
        self, field: str, reason: str, *, kind: SchemaErrorKind = SchemaErrorKind.VALUE
    ) -> None:
        self.field = field
        self.reason = reason
        self.kind = kind
        super().__init__(f"{field}: {reason}")


class DeadLinkError(SiteConfigError):
    """Raised when unresolved links are found and dead links are not ignored."""

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        paths = ", ".join(report.unresolved_paths)
        count = len(report.dead_links)
        super().__init__(f"{count} dead link(s) found: {paths}")


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Top navigation bar entry."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarItem:
    """Leaf page entry inside a sidebar tree."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Titled group of sidebar entries; groups may nest.

    ``collapsed`` is ``None`` when the group is not collapsible at all.
    """

    text: str
    items: tuple[SidebarEntry, ...] = ()
    collapsed: bool | None = None
    link: str | None = None


SidebarEntry: typ.TypeAlias = SidebarItem | SidebarGroup


class SearchProvider(enum.StrEnum):
    """Supported full-text search backends."""

    LOCAL = "local"
    ALGOLIA = "algolia"


@dc.dataclass(frozen=True, slots=True)
class LocalizedSearchStrings:
    """UI copy shown by the search button and modal for one locale."""

    button_text: str | None = None
    button_aria_label: str | None = None
    no_results_text: str | None = None
    reset_button_title: str | None = None
    select_text: str | None = None
    navigate_text: str | None = None
    close_text: str | None = None

    def missing_fields(self) -> tuple[str, ...]:
        """Return the names of fields that are unset or blank."""
        return tuple(
            field.name
            for field in dc.fields(self)
            if not getattr(self, field.name)
        )

    def merged_with(self, fallback: LocalizedSearchStrings) -> LocalizedSearchStrings:
        """Fill every missing field from ``fallback``."""
        values = {
            field.name: getattr(self, field.name) or getattr(fallback, field.name)
            for field in dc.fields(self)
        }
        return LocalizedSearchStrings(**values)


@dc.dataclass(frozen=True, slots=True)
class AlgoliaOptions:
    """Credentials and index for the hosted Algolia provider."""

    app_id: str
    api_key: str
    index_name: str


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search provider selection and its per-locale UI copy."""

    provider: SearchProvider = SearchProvider.LOCAL
    locales: cabc.Mapping[str, LocalizedSearchStrings] = dc.field(
        default_factory=_empty_mapping
    )
    algolia: AlgoliaOptions | None = None


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer copy rendered at the bottom of every page."""

    message: str | None = None
    copyright: str | None = None


@dc.dataclass(frozen=True, slots=True)
class EditLinkConfig:
    """Template used to link each page to its source for editing."""

    pattern: str
    text: str | None = None

    def url_for(self, relative_path: str) -> str:
        """Return the edit URL for a page path relative to the docs root."""
        return self.pattern.replace(EDIT_LINK_PLACEHOLDER, relative_path.lstrip("/"))


@dc.dataclass(frozen=True, slots=True)
class LastUpdatedConfig:
    """Label shown next to the last-updated timestamp."""

    text: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Icon link rendered in the navigation bar."""

    icon: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Per-locale UI configuration consumed by the site theme.

    The label overrides (``outline_title`` and friends) are optional; the
    renderer falls back to its own defaults when they are ``None``.
    """

    site_title: str | None = None
    nav: tuple[NavItem, ...] = ()
    sidebar: cabc.Mapping[str, tuple[SidebarEntry, ...]] = dc.field(
        default_factory=_empty_mapping
    )
    search: SearchConfig | None = None
    footer: FooterConfig | None = None
    edit_link: EditLinkConfig | None = None
    last_updated: LastUpdatedConfig | None = None
    social_links: tuple[SocialLink, ...] = ()
    outline_title: str | None = None
    return_to_top_label: str | None = None
    sidebar_menu_label: str | None = None
    dark_mode_switch_label: str | None = None


@dc.dataclass(frozen=True, slots=True)
class LocaleConfig:
    """A language variant of the site with its own theme configuration."""

    code: str
    label: str
    lang: str
    link: str
    title: str | None = None
    description: str | None = None
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)

    @property
    def is_root(self) -> bool:
        """Return ``True`` when the locale is served from the site root."""
        return self.link == ROOT_LOCALE_LINK


@dc.dataclass(frozen=True, slots=True)
class MarkdownOptions:
    """Options passed through to the markdown renderer.

    Keys other than ``lineNumbers`` are preserved verbatim in ``extra``.
    """

    line_numbers: bool = False
    extra: cabc.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Validated root configuration shared by every locale."""

    title: str
    description: str
    locales: cabc.Mapping[str, LocaleConfig]
    ignore_dead_links: bool = False
    markdown: MarkdownOptions = dc.field(default_factory=MarkdownOptions)

    @property
    def is_multilingual(self) -> bool:
        """Return ``True`` when more than one locale is configured."""
        return len(self.locales) > 1

    def default_locale(self) -> str:
        """Return the root locale's code, or the first declared locale."""
        for code, locale in self.locales.items():
            if locale.is_root:
                return code
        if not self.locales:  # pragma: no cover - the loader rejects this
            msg = "No locales configured."
            raise SiteConfigError(msg)
        return next(iter(self.locales))

    def get_locale(self, code: str) -> LocaleConfig:
        """Return the locale registered under ``code``."""
        try:
            return self.locales[code]
        except KeyError as exc:
            available = ", ".join(self.locales)
            msg = f"Unknown locale '{code}'. Known locales: {available}"
            raise KeyError(msg) from exc


@dc.dataclass(frozen=True, slots=True)
class LinkReference:
    """A single navigation or sidebar link tagged with its owning locale.

    ``source`` names where the link was declared, for example
    ``nav[1]`` or ``sidebar['/en/guides/'][0].items[2]``.
    """

    locale: str
    link: str
    source: str


@dc.dataclass(frozen=True, slots=True)
class DeadLinkWarning:
    """A link target that does not match any known page."""

    path: str
    referenced_by: tuple[LinkReference, ...]


@dc.dataclass(frozen=True, slots=True)
class OrphanSidebarWarning:
    """A sidebar prefix that no navigation entry leads into."""

    locale: str
    prefix: str


@dc.dataclass(frozen=True, slots=True)
class UnderLocalizedSearch:
    """Informational note that a locale's search copy came from a fallback."""

    locale: str
    fallback_language: str
    missing_fields: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of cross-checking configured links against known pages."""

    dead_links: tuple[DeadLinkWarning, ...] = ()
    orphan_sidebars: tuple[OrphanSidebarWarning, ...] = ()
    ignore_dead_links: bool = False

    @property
    def unresolved_paths(self) -> tuple[str, ...]:
        """Return the unresolved link paths in report order."""
        return tuple(warning.path for warning in self.dead_links)

    @property
    def is_fatal(self) -> bool:
        """Return ``True`` when dead links must abort the build."""
        return bool(self.dead_links) and not self.ignore_dead_links

    @property
    def ok(self) -> bool:
        """Return ``True`` when the report carries no diagnostics."""
        return not (self.dead_links or self.orphan_sidebars)


__all__ = [
    "AlgoliaOptions",
    "DeadLinkError",
    "DeadLinkWarning",
    "EditLinkConfig",
    "FrozenMapping",
    "FooterConfig",
    "LastUpdatedConfig",
    "LinkReference",
    "LocaleConfig",
    "LocalizedSearchStrings",
    "MarkdownOptions",
    "NavItem",
    "OrphanSidebarWarning",
    "SchemaError",
    "SchemaErrorKind",
    "SearchConfig",
    "SearchProvider",
    "SidebarEntry",
    "SidebarGroup",
    "SidebarItem",
    "SiteConfig",
    "SiteConfigError",
    "SocialLink",
    "ThemeConfig",
    "UnderLocalizedSearch",
    "ValidationReport",
    "freeze_value",
    "thaw_value",
]
