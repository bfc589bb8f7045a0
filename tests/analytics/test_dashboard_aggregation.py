"""
Unit tests for the row-to-dashboard aggregation pipeline.
They pin down how malformed rows, zero occupancy, same-date averaging, and forward calendar entries behave.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.analytics.dashboard_aggregation import aggregate_bookings
from src.pricing_engine.recommendation import PricingRecommendation

TODAY = date(2024, 7, 10)


def _recommendation(day: date, *, recommended_price: float = 150.0) -> PricingRecommendation:
    return PricingRecommendation(
        date=day.isoformat(),
        current_price=120.0,
        recommended_price=recommended_price,
        price_change=recommended_price - 120.0,
        price_change_percent=round((recommended_price - 120.0) / 120.0 * 100, 1),
        predicted_occupancy=88.0,
        expected_revenue=recommended_price * 74.8,
        revenue_impact=2550.0,
        confidence="high",
        explanation="Peak season",
    )


def test_same_date_rows_are_averaged_into_one_calendar_entry() -> None:
    rows = [
        {"date": "2024-07-01", "price": 100, "occupancy": 80},
        {"date": "2024-07-01", "price": 120, "occupancy": 60},
    ]

    summary = aggregate_bookings(rows, today=TODAY)

    assert len(summary.calendar) == 1
    day = summary.calendar[0]
    assert day.date == "2024-07-01"
    assert day.price == pytest.approx(110.0)
    assert day.occupancy == pytest.approx(0.70)
    assert day.demand == pytest.approx(0.84)
    assert day.is_past is True


def test_unparseable_dates_are_excluded_from_every_series_without_raising() -> None:
    rows = [
        {"date": "not-a-date", "price": 500, "occupancy": 90},
        {"date": "", "price": 500, "occupancy": 90},
        {"date": "2024-07-01", "price": 100, "occupancy": 50},
    ]

    summary = aggregate_bookings(rows, today=TODAY)

    assert summary.total_records == 3
    assert [point.revenue for point in summary.revenue_by_month] == [100]
    assert [day.date for day in summary.calendar] == ["2024-07-01"]
    assert [point.price for point in summary.price_time_series] == [100.0]
    assert [row.reason for row in summary.rejected_rows] == ["unparseable_date", "missing_date"]
    assert summary.rejected_rows[0].raw_date == "not-a-date"


def test_zero_occupancy_is_treated_as_absent() -> None:
    rows = [
        {"date": "2024-07-01", "price": 100, "occupancy": 0},
        {"date": "2024-07-01", "price": 100, "occupancy": 60},
    ]

    summary = aggregate_bookings(rows, today=TODAY)

    assert summary.calendar[0].occupancy == pytest.approx(0.60)
    monday = next(point for point in summary.occupancy_by_weekday if point.day == "Mon")
    assert monday.occupancy == 60


def test_weekday_occupancy_reports_zero_for_weekdays_without_samples() -> None:
    rows = [{"date": "2024-07-03", "price": 90, "occupancy": 0.45}]

    summary = aggregate_bookings(rows, today=TODAY)

    by_day = {point.day: point.occupancy for point in summary.occupancy_by_weekday}
    assert list(by_day) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert by_day["Wed"] == 45
    assert by_day["Mon"] == 0


def test_price_time_series_is_the_latest_thirty_dates_in_order() -> None:
    start = date(2024, 5, 1)
    rows = [{"date": (start + timedelta(days=offset)).isoformat(), "price": 100 + offset} for offset in range(45)]

    summary = aggregate_bookings(list(reversed(rows)), today=TODAY)

    series = summary.price_time_series
    assert len(series) == 30
    assert series[0].date == (start + timedelta(days=15)).isoformat()
    assert series[-1].date == (start + timedelta(days=44)).isoformat()
    assert [point.date for point in series] == sorted(point.date for point in series)


def test_historical_days_are_never_replaced_by_forward_recommendations() -> None:
    tomorrow = TODAY + timedelta(days=1)
    day_after = TODAY + timedelta(days=2)
    rows = [{"date": tomorrow.isoformat(), "price": 100, "occupancy": 50}]
    recommendations = {
        tomorrow.isoformat(): _recommendation(tomorrow),
        day_after.isoformat(): _recommendation(day_after, recommended_price=160.0),
    }

    summary = aggregate_bookings(rows, recommendations=recommendations, today=TODAY)

    by_date = {day.date: day for day in summary.calendar}
    assert by_date[tomorrow.isoformat()].price == pytest.approx(100.0)
    assert by_date[tomorrow.isoformat()].recommended_price == 150.0
    assert by_date[day_after.isoformat()].price == 160.0
    assert by_date[day_after.isoformat()].occupancy == pytest.approx(0.88)
    assert by_date[day_after.isoformat()].is_past is False


def test_competitor_prices_join_on_exact_date() -> None:
    rows = [{"date": "2024-07-01", "price": 100, "occupancy": 50}]

    summary = aggregate_bookings(rows, competitor_prices={"2024-07-01": 118.5, "2024-07-02": 90.0}, today=TODAY)

    assert summary.calendar[0].competitor_price == 118.5


def test_field_aliases_are_resolved() -> None:
    rows = [
        {"check_in": "2024-07-02", "rate": "€130", "occupancy_rate": "75%"},
        {"booking_date": "2024-07-02", "rate": 110, "occupancy_rate": 0.25},
    ]

    summary = aggregate_bookings(rows, today=TODAY)

    assert summary.avg_price == 120
    assert summary.avg_occupancy == 50
    assert summary.calendar[0].price == pytest.approx(120.0)


def test_monthly_revenue_counts_only_priced_rows_and_keeps_six_months() -> None:
    rows = [{"date": f"2024-{month:02d}-10", "price": 10 * month} for month in range(1, 9)]
    rows.append({"date": "2024-08-11", "price": "n/a", "occupancy": 50})

    summary = aggregate_bookings(rows, today=TODAY)

    assert [point.month for point in summary.revenue_by_month] == [
        "Mar 2024",
        "Apr 2024",
        "May 2024",
        "Jun 2024",
        "Jul 2024",
        "Aug 2024",
    ]
    assert summary.revenue_by_month[-1].revenue == 80
    assert summary.revenue_by_month[-1].avg_revenue == 80


def test_empty_input_yields_all_zero_summary() -> None:
    summary = aggregate_bookings([], today=TODAY)

    assert summary.is_empty
    assert summary.avg_price == 0
    assert summary.avg_occupancy == 0
    assert summary.calendar == []
    assert summary.revenue_by_month == []
    assert summary.metrics is None


def test_input_order_does_not_change_the_result() -> None:
    rows = [
        {"date": "2024-07-01", "price": 100, "occupancy": 80},
        {"date": "2024-06-30", "price": 90, "occupancy": 70},
        {"date": "2024-07-01", "price": 120, "occupancy": 60},
    ]

    forward = aggregate_bookings(rows, today=TODAY)
    backward = aggregate_bookings(list(reversed(rows)), today=TODAY)

    assert forward.calendar == backward.calendar
    assert forward.price_time_series == backward.price_time_series
    assert forward.revenue_by_month == backward.revenue_by_month
