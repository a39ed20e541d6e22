"""Localized search UI copy with fallbacks for under-localized locales.

The search modal must always show *some* label, so
:func:`merge_search_strings` never raises: when a locale has no (or only
partial) copy of its own, the missing fields are taken from the default
locale's configured copy and then from the built-in strings for the default
locale's language.

Examples
--------
>>> from docsite_config.search import builtin_search_strings
>>> builtin_search_strings("es-MX").button_text
'Buscar'
>>> builtin_search_strings("fr").button_text
'Search'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .config.helpers import _normalize_locale_code
from .config.models import LocalizedSearchStrings, SchemaError, UnderLocalizedSearch

if typ.TYPE_CHECKING:
    from .config.models import SiteConfig

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

BUILTIN_SEARCH_STRINGS: dict[str, LocalizedSearchStrings] = {
    "en": LocalizedSearchStrings(
        button_text="Search",
        button_aria_label="Search",
        no_results_text="No results found",
        reset_button_title="Clear search",
        select_text="Select",
        navigate_text="Navigate",
        close_text="Close",
    ),
    "es": LocalizedSearchStrings(
        button_text="Buscar",
        button_aria_label="Buscar",
        no_results_text="No se encontraron resultados",
        reset_button_title="Limpiar búsqueda",
        select_text="Seleccionar",
        navigate_text="Navegar",
        close_text="Cerrar",
    ),
}


@dc.dataclass(frozen=True, slots=True)
class MergedSearchStrings:
    """Fully populated search copy plus a note when fallbacks were used."""

    strings: LocalizedSearchStrings
    note: UnderLocalizedSearch | None = None

    @property
    def under_localized(self) -> bool:
        """Return ``True`` when any field came from a fallback."""
        return self.note is not None


def builtin_search_strings(lang: str) -> LocalizedSearchStrings:
    """Return the built-in copy for ``lang``, or English when unknown."""
    primary = lang.split("-", 1)[0].casefold()
    return BUILTIN_SEARCH_STRINGS.get(primary, BUILTIN_SEARCH_STRINGS[FALLBACK_LANGUAGE])


def merge_search_strings(config: SiteConfig, locale: str) -> MergedSearchStrings:
    """Return complete search copy for ``locale``.

    Lookup order for every field: the locale's own search options (declared
    in its own theme, else in the default locale's theme), the default
    locale's own search options, then the built-in strings for the default
    locale's language. Unknown locale codes are treated as entirely
    under-localized.
    """
    try:
        locale = _normalize_locale_code(locale, "locale")
    except SchemaError:
        logger.debug("Locale %r is not a valid locale code; using it verbatim", locale)
    fallback_code = config.default_locale()
    fallback_locale = config.locales[fallback_code]
    own = _configured_strings(config, locale, locale) or _configured_strings(
        config, fallback_code, locale
    )

    fallback = builtin_search_strings(fallback_locale.lang)
    configured_fallback = _configured_strings(config, fallback_code, fallback_code)
    if configured_fallback is not None:
        fallback = configured_fallback.merged_with(fallback)

    if own is None:
        missing = tuple(field.name for field in dc.fields(LocalizedSearchStrings))
        merged = fallback
    else:
        missing = own.missing_fields()
        merged = own.merged_with(fallback)

    if not missing:
        return MergedSearchStrings(strings=merged)
    note = UnderLocalizedSearch(
        locale=locale,
        fallback_language=fallback_locale.lang,
        missing_fields=missing,
    )
    logger.info(
        "Search copy for locale '%s' falls back to '%s' for: %s",
        locale,
        fallback_locale.lang,
        ", ".join(missing),
    )
    return MergedSearchStrings(strings=merged, note=note)


def _configured_strings(
    config: SiteConfig, owner: str, locale: str
) -> LocalizedSearchStrings | None:
    """Return the strings ``owner``'s theme declares for ``locale``, if any."""
    owner_config = config.locales.get(owner)
    if owner_config is None or owner_config.theme.search is None:
        return None
    return owner_config.theme.search.locales.get(locale)


__all__ = [
    "BUILTIN_SEARCH_STRINGS",
    "MergedSearchStrings",
    "builtin_search_strings",
    "merge_search_strings",
]
