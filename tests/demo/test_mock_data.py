"""
Unit tests for the seeded demo dataset.
The demo API and dashboard fallback depend on identical output for the same seed and reference date.
"""

from __future__ import annotations

from datetime import date

from src.demo.mock_data import (
    ACCOMMODATION_BASE_PRICES,
    DEMO_FILE_ID,
    demo_bookings_frame,
    demo_competitor_prices,
    demo_competitor_range,
    demo_kpi,
    demo_uploaded_file,
    generate_demo_bookings,
)

TODAY = date(2024, 7, 10)


def test_bookings_cover_one_year_for_every_accommodation_type() -> None:
    rows = generate_demo_bookings(today=TODAY)

    assert len(rows) == 366 * len(ACCOMMODATION_BASE_PRICES)
    assert rows[0]["date"] == "2023-07-11"
    assert rows[-1]["date"] == "2024-07-10"
    assert {row["accommodation_type"] for row in rows} == set(ACCOMMODATION_BASE_PRICES)


def test_bookings_are_reproducible_for_the_same_seed() -> None:
    assert generate_demo_bookings(today=TODAY, days=10) == generate_demo_bookings(today=TODAY, days=10)
    assert generate_demo_bookings(today=TODAY, days=10) != generate_demo_bookings(today=TODAY, days=10, seed=7)


def test_booking_values_stay_in_range() -> None:
    rows = generate_demo_bookings(today=TODAY, days=60)

    for row in rows:
        assert 10 <= row["occupancy"] <= 100
        assert row["price"] > 0
        assert row["season"] in {"low", "shoulder", "high"}
        assert row["is_holiday"] == (row["holiday_name"] is not None)


def test_uploaded_file_describes_the_frame() -> None:
    frame = demo_bookings_frame(today=TODAY)

    uploaded = demo_uploaded_file(frame)

    assert uploaded.id == DEMO_FILE_ID
    assert uploaded.rows == len(frame)
    assert uploaded.columns == len(frame.columns)
    assert uploaded.enrichment_status == "completed"
    assert len(uploaded.preview) <= 5


def test_kpi_compares_latest_window_with_previous_window() -> None:
    rows = generate_demo_bookings(today=TODAY)

    kpi = demo_kpi(rows)

    assert kpi.total_records == len(rows)
    assert 10 <= kpi.avg_occupancy <= 100
    assert kpi.avg_price > 0
    assert demo_kpi([]).total_records == 0


def test_competitor_prices_and_range() -> None:
    prices = demo_competitor_prices(today=TODAY)
    band = demo_competitor_range(date(2024, 7, 1), date(2024, 7, 3))

    assert len(prices) == 4
    assert all(85 <= item.price <= 145 for item in prices)
    assert all(item.date == "2024-07-10" for item in prices)
    assert [row["date"] for row in band] == ["2024-07-01", "2024-07-02", "2024-07-03"]
    assert all(row["price_p10"] < row["price_p50"] < row["price_p90"] for row in band)
    assert band == demo_competitor_range(date(2024, 7, 1), date(2024, 7, 3))
    assert demo_competitor_range(date(2024, 7, 3), date(2024, 7, 1)) == []
