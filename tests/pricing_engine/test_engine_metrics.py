"""
Unit tests for Pricing Engine page derivations.
Covers the recommendation-to-row mapping, confidence buckets, business metrics, and CSV export.
"""

from __future__ import annotations

from datetime import date

from src.pricing_engine.engine_metrics import (
    DEFAULT_METRICS,
    build_pricing_rows,
    build_table_recommendations,
    calculate_business_metrics,
    export_filename,
    recommendations_to_csv,
)
from src.pricing_engine.recommendation import PricingRecommendation


def _recommendation(day: str, *, current: float, recommended: float, occupancy: float) -> PricingRecommendation:
    return PricingRecommendation(
        date=day,
        current_price=current,
        recommended_price=recommended,
        price_change=recommended - current,
        price_change_percent=0.0,
        predicted_occupancy=occupancy,
        expected_revenue=0.0,
        revenue_impact=0.0,
        confidence="medium",
    )


def test_pricing_row_derivations() -> None:
    (row,) = build_pricing_rows([_recommendation("2024-07-11", current=120, recommended=150, occupancy=88)])

    assert row.day == "Thu"
    assert row.occupancy_optimized == 88
    assert row.occupancy_current == 70
    assert row.demand_forecast == 97
    assert row.revenue_current == 8400
    assert row.revenue_optimized == 13200


def test_demand_forecast_is_capped_at_one_hundred() -> None:
    (row,) = build_pricing_rows([_recommendation("2024-07-12", current=100, recommended=100, occupancy=95)])

    assert row.demand_forecast == 100


def test_table_confidence_buckets_and_revenue_impact() -> None:
    rows = build_pricing_rows(
        [
            _recommendation("2024-07-11", current=120, recommended=150, occupancy=88),
            _recommendation("2024-07-12", current=100, recommended=110, occupancy=70),
            _recommendation("2024-07-13", current=100, recommended=90, occupancy=45),
        ]
    )

    table = build_table_recommendations(rows)

    assert [item.confidence for item in table] == ["high", "medium", "low"]
    assert [item.revenue_impact for item in table] == [25.0, 10.0, -10.0]
    assert table[0].expected_occupancy == 88


def test_business_metrics_for_one_day() -> None:
    rows = build_pricing_rows([_recommendation("2024-07-11", current=120, recommended=150, occupancy=88)])

    metrics = calculate_business_metrics(rows)

    assert metrics.current_revenue == 8400
    assert metrics.optimized_revenue == 13200
    assert metrics.revenue_uplift == 4800
    assert metrics.uplift_percentage == 57.1
    assert metrics.avg_price_current == 120
    assert metrics.avg_price_optimized == 150
    assert metrics.total_bookings == 100


def test_business_metrics_default_to_zero_when_empty() -> None:
    assert calculate_business_metrics([]) == DEFAULT_METRICS
    assert DEFAULT_METRICS.current_revenue == 0
    assert DEFAULT_METRICS.uplift_percentage == 0.0


def test_csv_export_uses_display_headers_and_percent_suffixes() -> None:
    table = build_table_recommendations(
        build_pricing_rows([_recommendation("2024-07-11", current=120, recommended=150, occupancy=88)])
    )

    lines = recommendations_to_csv(table).strip().split("\n")

    assert lines[0] == "Date,Day,Current Price,Recommended Price,Expected Occupancy,Revenue Impact,Confidence"
    assert lines[1] == "2024-07-11,Thu,120,150,88%,25.0%,high"
    assert export_filename(date(2024, 7, 10)) == "pricing_recommendations_2024-07-10.csv"
