"""Behaviour tests for default locale selection using pytest-bdd."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from docsite_config.config import load
from docsite_config.resolver import default_locale

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "default_locale.feature"
)
scenarios(FEATURE_FILE)

LABELS = {"es": "Español", "en": "English"}


@pytest.fixture
def context() -> dict[str, typ.Any]:
    return {}


@given(parsers.parse('locales declared in the order "{order}"'))
def locales_declared_in_order(order: str, context: dict[str, typ.Any]) -> None:
    codes = [code.strip() for code in order.split(",")]
    context["raw"] = {
        "title": "Docs",
        "locales": {
            code: {"label": LABELS[code], "lang": code, "link": f"/{code}/"}
            for code in codes
        },
    }


@given(parsers.parse('the "{code}" locale is served from the root'))
def locale_served_from_root(code: str, context: dict[str, typ.Any]) -> None:
    context["raw"]["locales"][code]["link"] = "/"


@when("the default locale is selected")
def default_locale_is_selected(context: dict[str, typ.Any]) -> None:
    context["selected"] = default_locale(load(context["raw"]))


@then(parsers.parse('the default locale is "{code}"'))
def the_default_locale_is(code: str, context: dict[str, typ.Any]) -> None:
    assert context["selected"] == code
