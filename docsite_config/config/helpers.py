"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import LOCALE_CODE_PATTERN
from .models import SchemaError, SchemaErrorKind


def _field_path(parent: str, key: str | int) -> str:
    """Join a parent field path with a mapping key or sequence index."""
    match key:
        case int() as index:
            return f"{parent}[{index}]"
        case str() as name if name.startswith("/"):
            return f"{parent}[{name!r}]"
        case _:
            return f"{parent}.{key}" if parent else str(key)


def _require_mapping(value: object, field: str) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise raise a type error."""
    if not isinstance(value, cabc.Mapping):
        msg = f"expected a mapping, got {type(value).__name__}"
        raise SchemaError(field, msg, kind=SchemaErrorKind.TYPE)
    return value


def _optional_mapping(value: object, field: str) -> cabc.Mapping[str, typ.Any]:
    """Return an empty mapping for ``None``, otherwise require a mapping."""
    if value is None:
        return {}
    return _require_mapping(value, field)


def _require_list(value: object, field: str) -> list[typ.Any]:
    """Return ``value`` as a list when it is a non-string sequence."""
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, cabc.Sequence):
        msg = f"expected a list, got {type(value).__name__}"
        raise SchemaError(field, msg, kind=SchemaErrorKind.TYPE)
    return list(value)


def _require_str(payload: cabc.Mapping[str, typ.Any], key: str, parent: str) -> str:
    """Return a required, non-blank string stored under ``key``."""
    field = _field_path(parent, key)
    if key not in payload or payload[key] is None:
        raise SchemaError(field, "required field is missing", kind=SchemaErrorKind.MISSING)
    value = payload[key]
    if not isinstance(value, str):
        msg = f"expected a string, got {type(value).__name__}"
        raise SchemaError(field, msg, kind=SchemaErrorKind.TYPE)
    text = value.strip()
    if not text:
        raise SchemaError(field, "must not be empty", kind=SchemaErrorKind.MISSING)
    return text


def _optional_str(
    payload: cabc.Mapping[str, typ.Any], key: str, parent: str
) -> str | None:
    """Return a stripped string value or None when absent or empty."""
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"expected a string, got {type(value).__name__}"
        raise SchemaError(_field_path(parent, key), msg, kind=SchemaErrorKind.TYPE)
    return value.strip() or None


def _optional_bool(
    payload: cabc.Mapping[str, typ.Any], key: str, parent: str
) -> bool | None:
    """Return a boolean flag, or None when the key is absent."""
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        msg = f"expected a boolean, got {type(value).__name__}"
        raise SchemaError(_field_path(parent, key), msg, kind=SchemaErrorKind.TYPE)
    return value


def _normalize_locale_code(raw: object, field: str) -> str:
    """Return the canonical spelling of a locale code (``pt-br`` -> ``pt-BR``)."""
    if not isinstance(raw, str):
        msg = f"locale code must be a string, got {type(raw).__name__}"
        raise SchemaError(field, msg, kind=SchemaErrorKind.TYPE)
    language, sep, region = raw.strip().replace("_", "-").partition("-")
    code = language.lower() + (f"-{region.upper()}" if sep else "")
    if not LOCALE_CODE_PATTERN.fullmatch(code):
        msg = f"'{raw}' is not a locale code such as 'en' or 'pt-BR'"
        raise SchemaError(field, msg)
    return code


def _lang_refines(lang: str, code: str) -> bool:
    """Return ``True`` when ``lang`` equals ``code`` or narrows it (BCP-47)."""
    lang_folded = lang.casefold()
    code_folded = code.casefold()
    return lang_folded == code_folded or lang_folded.startswith(f"{code_folded}-")


__all__ = [
    "_field_path",
    "_lang_refines",
    "_normalize_locale_code",
    "_optional_bool",
    "_optional_mapping",
    "_optional_str",
    "_require_list",
    "_require_mapping",
    "_require_str",
]
