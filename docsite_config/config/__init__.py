"""Load and validate the multi-locale documentation site configuration.

This subpackage parses the project's ``site.yaml`` document (JSON is accepted
too), checks every locale, navigation bar, sidebar tree and search setting
against the schema, and produces frozen dataclasses (:class:`SiteConfig`,
:class:`LocaleConfig`, :class:`ThemeConfig`, etc.) that the site renderer and
link checker consume. The entry points are :func:`load` for an in-memory
mapping and :func:`load_site_config` for a file on disk; both raise
:class:`SchemaError` naming the offending field.

Examples
--------
>>> from docsite_config.config import load
>>> config = load(
...     {
...         "title": "Docs",
...         "locales": {
...             "es": {"label": "Español", "lang": "es", "link": "/es/"},
...             "en": {"label": "English", "lang": "en", "link": "/en/"},
...         },
...     }
... )
>>> list(config.locales)
['es', 'en']
"""

from .loader import load, load_site_config
from .models import (
    AlgoliaOptions,
    DeadLinkError,
    DeadLinkWarning,
    EditLinkConfig,
    FrozenMapping,
    FooterConfig,
    LastUpdatedConfig,
    LinkReference,
    LocaleConfig,
    LocalizedSearchStrings,
    MarkdownOptions,
    NavItem,
    OrphanSidebarWarning,
    SchemaError,
    SchemaErrorKind,
    SearchConfig,
    SearchProvider,
    SidebarEntry,
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    SiteConfigError,
    SocialLink,
    ThemeConfig,
    UnderLocalizedSearch,
    ValidationReport,
)
from .serializer import dump_site_config, write_site_config

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
    "dump_site_config",
    "load",
    "load_site_config",
    "write_site_config",
]
