"""
Schema normalization for uploaded booking datasets.
Booking exports name the same field in several ways (`date`, `check_in`, `booking_date`; `price`, `rate`),
so every ingestion path maps rows onto one typed frame here and reports the rows it had to reject.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import pandas as pd

DATE_FIELD_ALIASES = ("date", "check_in", "booking_date")
PRICE_FIELD_ALIASES = ("price", "rate")
OCCUPANCY_FIELD_ALIASES = ("occupancy", "occupancy_rate")

COLUMN_ALIASES = {
    "checkin": "check_in",
    "check_in_date": "check_in",
    "bookingdate": "booking_date",
    "occupancyrate": "occupancy_rate",
    "weathercondition": "weather_condition",
    "weather": "weather_condition",
    "isholiday": "is_holiday",
    "holidayname": "holiday_name",
    "accommodationtype": "accommodation_type",
}

NUMERIC_PASSTHROUGH_COLUMNS = ("temperature", "precipitation")
TEXT_PASSTHROUGH_COLUMNS = ("weather_condition", "holiday_name", "accommodation_type")

NORMALIZED_BOOKING_COLUMNS = [
    "source_row_number",
    "stay_date",
    "price",
    "occupancy",
    "temperature",
    "precipitation",
    "weather_condition",
    "is_holiday",
    "holiday_name",
    "accommodation_type",
]

_NUMERIC_NOISE_RE = re.compile(r"[€$£%\s]")
_TRUE_FLAGS = {"1", "true", "yes", "y", "t"}
_FALSE_FLAGS = {"0", "false", "no", "n", "f"}


@dataclass(frozen=True)
class RejectedRow:
    row_number: int
    reason: str
    raw_date: str | None = None


@dataclass(frozen=True)
class NormalizedBookings:
    """Typed booking frame plus the rows that could not be placed on a date."""

    frame: pd.DataFrame
    input_row_count: int
    rejected_rows: list[RejectedRow] = field(default_factory=list)
    invalid_price_count: int = 0
    invalid_occupancy_count: int = 0

    @property
    def accepted_row_count(self) -> int:
        return int(len(self.frame))


def _to_snake_case(value: str) -> str:
    split_camel = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", value.strip())
    normalized = re.sub(r"[^a-zA-Z0-9]+", "_", split_camel).strip("_")
    return normalized.lower()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _parse_number(value: Any) -> float | None:
    if _is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = _NUMERIC_NOISE_RE.sub("", value)
        try:
            return float(cleaned)
        except ValueError:
            return None
    return None


def _parse_flag(value: Any) -> bool | None:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_FLAGS:
        return True
    if text in _FALSE_FLAGS:
        return False
    return None


def parse_price(value: Any) -> float | None:
    """Return a positive price or None when the value is missing or invalid."""

    parsed = _parse_number(value)
    if parsed is None or parsed <= 0:
        return None
    return parsed


def normalize_occupancy(value: Any) -> float | None:
    """Normalize occupancy to a fraction of one.

    Values in (0, 1] are already fractional, values in (1, 100] are percentages.
    Anything else is invalid and returned as None.
    """

    parsed = _parse_number(value)
    if parsed is None or parsed <= 0 or parsed > 100:
        return None
    if parsed <= 1:
        return parsed
    return parsed / 100.0


def parse_stay_date(value: Any) -> date | None:
    """Parse a date-like value into a UTC calendar date."""

    if _is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        ts = pd.Timestamp(value)
        ts = ts.tz_localize("UTC") if ts.tzinfo is None else ts.tz_convert("UTC")
        return ts.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    parsed = pd.to_datetime(value.strip(), errors="coerce", utc=True)
    if pd.isna(parsed):
        return None
    return parsed.date()


def _rename_columns(df: pd.DataFrame) -> pd.DataFrame:
    renamed_columns = {}
    for column in df.columns:
        snake = _to_snake_case(str(column))
        renamed_columns[column] = COLUMN_ALIASES.get(snake, snake)
    renamed = df.rename(columns=renamed_columns)
    return renamed.loc[:, ~renamed.columns.duplicated()].reset_index(drop=True)


def _coalesce(frame: pd.DataFrame, aliases: tuple[str, ...]) -> pd.Series:
    result = pd.Series([None] * len(frame), index=frame.index, dtype="object")
    for column in aliases:
        if column not in frame.columns:
            continue
        candidate = frame[column].astype("object")
        fill_mask = result.map(_is_blank) & ~candidate.map(_is_blank)
        result = result.where(~fill_mask, candidate)
    return result


def _optional_column(frame: pd.DataFrame, column: str) -> pd.Series:
    if column in frame.columns:
        return frame[column].astype("object")
    return pd.Series([None] * len(frame), index=frame.index, dtype="object")


def empty_booking_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "source_row_number": pd.Series(dtype="int64"),
            "stay_date": pd.Series(dtype="object"),
            "price": pd.Series(dtype="float64"),
            "occupancy": pd.Series(dtype="float64"),
            "temperature": pd.Series(dtype="float64"),
            "precipitation": pd.Series(dtype="float64"),
            "weather_condition": pd.Series(dtype="object"),
            "is_holiday": pd.Series(dtype="object"),
            "holiday_name": pd.Series(dtype="object"),
            "accommodation_type": pd.Series(dtype="object"),
        }
    )


def extract_stay_dates(df: pd.DataFrame) -> pd.Series:
    """Resolve the stay date of every row, None where it cannot be parsed."""

    if df.empty:
        return pd.Series(dtype="object")
    renamed = _rename_columns(df)
    return _coalesce(renamed, DATE_FIELD_ALIASES).map(parse_stay_date)


def normalize_booking_frame(df: pd.DataFrame) -> NormalizedBookings:
    """Normalize raw booking rows to the canonical typed schema."""

    input_row_count = int(len(df))
    if input_row_count == 0:
        return NormalizedBookings(frame=empty_booking_frame(), input_row_count=0)

    renamed = _rename_columns(df.reset_index(drop=True))
    raw_dates = _coalesce(renamed, DATE_FIELD_ALIASES)
    raw_prices = _coalesce(renamed, PRICE_FIELD_ALIASES)
    raw_occupancies = _coalesce(renamed, OCCUPANCY_FIELD_ALIASES)

    stay_dates = raw_dates.map(parse_stay_date)
    prices = raw_prices.map(parse_price)
    occupancies = raw_occupancies.map(normalize_occupancy)

    rejected_rows: list[RejectedRow] = []
    for position in stay_dates.index[stay_dates.isna()]:
        raw_value = raw_dates.iloc[position]
        if _is_blank(raw_value):
            rejected_rows.append(RejectedRow(row_number=int(position) + 1, reason="missing_date"))
        else:
            rejected_rows.append(
                RejectedRow(
                    row_number=int(position) + 1,
                    reason="unparseable_date",
                    raw_date=str(raw_value),
                )
            )

    invalid_price_count = int((~raw_prices.map(_is_blank) & prices.isna()).sum())
    invalid_occupancy_count = int((~raw_occupancies.map(_is_blank) & occupancies.isna()).sum())

    normalized = pd.DataFrame(
        {
            "source_row_number": pd.Series(range(1, input_row_count + 1), dtype="int64"),
            "stay_date": stay_dates,
            "price": prices.astype("float64"),
            "occupancy": occupancies.astype("float64"),
        }
    )
    for column in NUMERIC_PASSTHROUGH_COLUMNS:
        normalized[column] = _optional_column(renamed, column).map(_parse_number).astype("float64")
    for column in TEXT_PASSTHROUGH_COLUMNS:
        normalized[column] = _optional_column(renamed, column).map(
            lambda value: None if _is_blank(value) else str(value).strip()
        )
    normalized["is_holiday"] = _optional_column(renamed, "is_holiday").map(_parse_flag)

    accepted = normalized[normalized["stay_date"].notna()].reset_index(drop=True)

    return NormalizedBookings(
        frame=accepted[NORMALIZED_BOOKING_COLUMNS],
        input_row_count=input_row_count,
        rejected_rows=rejected_rows,
        invalid_price_count=invalid_price_count,
        invalid_occupancy_count=invalid_occupancy_count,
    )


def normalize_booking_rows(rows: Iterable[Mapping[str, Any]]) -> NormalizedBookings:
    """Normalize an iterable of loosely-keyed booking records."""

    return normalize_booking_frame(pd.DataFrame([dict(row) for row in rows]))
