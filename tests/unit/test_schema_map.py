"""
Unit tests for booking schema normalization.
Rows must land on one typed frame regardless of the column naming used by the export.
"""

from datetime import date

import pandas as pd

from src.common.schema_map import (
    NORMALIZED_BOOKING_COLUMNS,
    extract_stay_dates,
    normalize_booking_frame,
    normalize_booking_rows,
    normalize_occupancy,
    parse_price,
    parse_stay_date,
)


def test_normalize_booking_frame_schema_and_aliases() -> None:
    sample = pd.DataFrame(
        {
            "Check In": ["2024-07-01", "2024-07-02"],
            "Rate": ["€120", "95.5"],
            "OccupancyRate": ["85%", 0.6],
            "WeatherCondition": ["Sunny", None],
            "IsHoliday": ["yes", "0"],
        }
    )

    normalized = normalize_booking_frame(sample)

    assert list(normalized.frame.columns) == NORMALIZED_BOOKING_COLUMNS
    assert normalized.accepted_row_count == 2
    first = normalized.frame.iloc[0]
    assert first["stay_date"] == date(2024, 7, 1)
    assert first["price"] == 120.0
    assert first["occupancy"] == 0.85
    assert first["weather_condition"] == "Sunny"
    assert first["is_holiday"] == True  # noqa: E712
    assert normalized.frame.iloc[1]["occupancy"] == 0.6
    assert normalized.frame.iloc[1]["is_holiday"] == False  # noqa: E712


def test_rows_without_usable_dates_are_rejected_with_reasons() -> None:
    normalized = normalize_booking_rows(
        [
            {"date": "2024-07-01", "price": 100},
            {"date": "", "price": 90},
            {"date": "not a date", "price": 80},
        ]
    )

    assert normalized.input_row_count == 3
    assert normalized.accepted_row_count == 1
    assert [(row.row_number, row.reason) for row in normalized.rejected_rows] == [
        (2, "missing_date"),
        (3, "unparseable_date"),
    ]
    assert normalized.rejected_rows[1].raw_date == "not a date"


def test_invalid_prices_and_occupancies_are_counted_not_rejected() -> None:
    normalized = normalize_booking_rows(
        [
            {"date": "2024-07-01", "price": 0, "occupancy": 150},
            {"date": "2024-07-02", "price": "abc", "occupancy": None},
        ]
    )

    assert normalized.accepted_row_count == 2
    assert normalized.invalid_price_count == 2
    assert normalized.invalid_occupancy_count == 1
    assert normalized.frame["price"].isna().all()


def test_date_alias_precedence_and_empty_input() -> None:
    frame = pd.DataFrame({"booking_date": ["2024-01-05"], "date": [None], "check_in": ["2024-01-03"]})

    assert list(extract_stay_dates(frame)) == [date(2024, 1, 3)]
    empty = normalize_booking_frame(pd.DataFrame())
    assert empty.input_row_count == 0
    assert list(empty.frame.columns) == NORMALIZED_BOOKING_COLUMNS


def test_scalar_parsers() -> None:
    assert normalize_occupancy(1) == 1
    assert normalize_occupancy("50") == 0.5
    assert normalize_occupancy(0) is None
    assert normalize_occupancy(101) is None
    assert parse_price("$ 42") == 42.0
    assert parse_price(-1) is None
    assert parse_stay_date("2024-03-02T23:30:00Z") == date(2024, 3, 2)
    assert parse_stay_date(True) is None
