# This file collects small formatting helpers used across dashboard pages.
# It exists so metric cards and tables present prices and percentages consistently.
# The functions return simple strings that Streamlit can display directly.

from __future__ import annotations


def format_currency(value: float | int | None, *, symbol: str = "€", decimals: int = 0) -> str:
    if value is None:
        return "-"
    return f"{symbol}{float(value):,.{decimals}f}"


def format_percent(value: float | int | None, *, decimals: int = 1) -> str:
    """Format a value already expressed in percent."""

    if value is None:
        return "-"
    return f"{float(value):.{decimals}f}%"


def format_fraction(value: float | int | None) -> str:
    if value is None:
        return "-"
    return format_percent(100.0 * float(value))


def format_change(value: float | int | None) -> str | None:
    if value is None:
        return None
    return f"{float(value):+.1f}%"


def format_count(value: int | float | None) -> str:
    if value is None:
        return "0"
    return f"{int(value):,}"
