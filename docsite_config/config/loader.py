"""Load site configuration documents into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.constructor import DuplicateKeyError

from .._constants import ROOT_LOCALE_LINK
from .helpers import (
    _field_path,
    _lang_refines,
    _normalize_locale_code,
    _optional_bool,
    _optional_mapping,
    _optional_str,
    _require_mapping,
    _require_str,
)
from .models import (
    FrozenMapping,
    LocaleConfig,
    MarkdownOptions,
    SchemaError,
    SchemaErrorKind,
    SiteConfig,
    freeze_value,
)
from .theme import _build_theme_config

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DOCUMENT_FIELD = "(document)"


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML (or JSON) document describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Validated configuration with every locale, navigation bar, sidebar
        tree, and search setting resolved.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SchemaError
        If the document is not a mapping, repeats a key inside one mapping, or
        any field violates the schema.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite_config.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> list(config.locales)  # doctest: +SKIP
    ['es', 'en']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = loader.load(handle)
        except DuplicateKeyError as exc:
            raise _duplicate_key_error(exc) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "top-level structure must be a mapping"
        raise SchemaError(DOCUMENT_FIELD, msg, kind=SchemaErrorKind.TYPE)
    config = load(loaded)
    logger.debug("Loaded %s with locales: %s", path, ", ".join(config.locales))
    return config


def _duplicate_key_error(exc: DuplicateKeyError) -> SchemaError:
    """Describe a key repeated inside one YAML mapping as a schema error."""
    field = DOCUMENT_FIELD
    if exc.problem_mark is not None:
        field = f"{DOCUMENT_FIELD} line {exc.problem_mark.line + 1}"
    reason = exc.problem or "duplicate key"
    return SchemaError(field, reason, kind=SchemaErrorKind.DUPLICATE_KEY)


def load(raw: cabc.Mapping[str, typ.Any]) -> SiteConfig:
    """Validate a raw configuration mapping and build a :class:`SiteConfig`.

    Raises
    ------
    SchemaError
        When a required field is missing or mistyped, when no locales are
        configured, when two locale keys normalize to the same code, or when a
        locale's ``link`` is not prefixed with its own code.
    """
    data = _require_mapping(raw, DOCUMENT_FIELD)
    ignore_dead_links = _optional_bool(data, "ignoreDeadLinks", "")
    return SiteConfig(
        title=_require_str(data, "title", ""),
        description=_optional_str(data, "description", "") or "",
        locales=_build_locales(data.get("locales"), "locales"),
        ignore_dead_links=bool(ignore_dead_links),
        markdown=_build_markdown_options(data.get("markdown"), "markdown"),
    )


def _build_locales(
    payload: object, field: str
) -> cabc.Mapping[str, LocaleConfig]:
    """Build every locale in declaration order, enforcing unique codes."""
    if payload is None:
        raise SchemaError(field, "required field is missing", kind=SchemaErrorKind.MISSING)
    data = _require_mapping(payload, field)
    if not data:
        msg = "at least one locale must be configured"
        raise SchemaError(field, msg, kind=SchemaErrorKind.MISSING)

    locales: dict[str, LocaleConfig] = {}
    root_code: str | None = None
    for key, locale_raw in data.items():
        key_field = _field_path(field, str(key))
        code = _normalize_locale_code(key, key_field)
        if code in locales:
            msg = f"locale key '{key}' duplicates the already configured '{code}'"
            raise SchemaError(key_field, msg, kind=SchemaErrorKind.DUPLICATE_KEY)
        locale = _build_locale_config(code, locale_raw, key_field)
        if locale.is_root:
            if root_code is not None:
                msg = f"only one locale may use '{ROOT_LOCALE_LINK}'; '{root_code}' already does"
                raise SchemaError(_field_path(key_field, "link"), msg)
            root_code = code
        locales[code] = locale
    return FrozenMapping(locales)


def _build_locale_config(code: str, payload: object, field: str) -> LocaleConfig:
    """Build one LocaleConfig and check its ``lang`` and ``link`` against ``code``."""
    data = _require_mapping(payload, field)
    lang = _require_str(data, "lang", field)
    if not _lang_refines(lang, code):
        msg = f"lang '{lang}' must equal or refine the locale code '{code}'"
        raise SchemaError(_field_path(field, "lang"), msg)
    link = _require_str(data, "link", field)
    if link != ROOT_LOCALE_LINK and not link.startswith(f"/{code}/"):
        msg = f"link '{link}' must start with '/{code}/'"
        raise SchemaError(
            _field_path(field, "link"), msg, kind=SchemaErrorKind.PREFIX_MISMATCH
        )

    theme_key = "themeConfig" if "themeConfig" in data else "theme"
    return LocaleConfig(
        code=code,
        label=_require_str(data, "label", field),
        lang=lang,
        link=link,
        title=_optional_str(data, "title", field),
        description=_optional_str(data, "description", field),
        theme=_build_theme_config(
            data.get(theme_key),
            locale_link=link,
            parent=_field_path(field, theme_key),
        ),
    )


def _build_markdown_options(payload: object, field: str) -> MarkdownOptions:
    """Build markdown passthrough options, keeping unknown keys verbatim."""
    data = _optional_mapping(payload, field)
    line_numbers = _optional_bool(data, "lineNumbers", field)
    extra = {key: value for key, value in data.items() if key != "lineNumbers"}
    return MarkdownOptions(
        line_numbers=bool(line_numbers), extra=freeze_value(extra)
    )


__all__ = ["load", "load_site_config"]
