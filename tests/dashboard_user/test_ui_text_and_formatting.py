# This test file checks translated UI strings and display formatting helpers.

from __future__ import annotations

from src.dashboard_user.formatting import (
    format_change,
    format_count,
    format_currency,
    format_fraction,
    format_percent,
)
from src.dashboard_user.ui_text import UI_TEXT, t


def test_languages_define_the_same_keys() -> None:
    assert set(UI_TEXT["en"]) == set(UI_TEXT["fr"])


def test_translation_lookup_and_fallbacks() -> None:
    assert t("source_label", "en", source="demo") == "Source: demo"
    assert t("source_label", "fr", source="api") == "Source : api"
    assert t("source_label", "de", source="api") == "Source: api"
    assert t("missing_key", "fr") == "missing_key"


def test_formatting_helpers() -> None:
    assert format_currency(1234.4) == "€1,234"
    assert format_currency(99.5, symbol="$", decimals=2) == "$99.50"
    assert format_currency(None) == "-"
    assert format_percent(12.345) == "12.3%"
    assert format_fraction(0.785) == "78.5%"
    assert format_change(3.21) == "+3.2%"
    assert format_change(-0.5) == "-0.5%"
    assert format_change(None) is None
    assert format_count(12345) == "12,345"
    assert format_count(None) == "0"
