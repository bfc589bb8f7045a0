# This file derives the Pricing Engine page rows, table recommendations, and business metrics.
# It exists so the page renders pure, tested transformations of a RecommendationSet.
# Revenue figures on this page use a fixed 100-unit capacity independent of the property size.
# The CSV export mirrors the recommendations table shown to the user.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from datetime import date

import pandas as pd

from src.analytics.rounding import round_half_up, round_int
from src.pricing_engine.recommendation import PricingRecommendation

TABLE_CAPACITY = 100
DEMAND_FORECAST_FACTOR = 1.1
WEEKDAY_SHORT_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

CSV_COLUMNS = {
    "date": "Date",
    "day": "Day",
    "current_price": "Current Price",
    "recommended_price": "Recommended Price",
    "expected_occupancy": "Expected Occupancy",
    "revenue_impact": "Revenue Impact",
    "confidence": "Confidence",
}


@dataclass(frozen=True)
class PricingRow:
    date: str
    day: str
    current_price: int
    optimized_price: int
    demand_forecast: int
    occupancy_current: int
    occupancy_optimized: int
    revenue_current: int
    revenue_optimized: int


@dataclass(frozen=True)
class TableRecommendation:
    date: str
    day: str
    current_price: int
    recommended_price: int
    expected_occupancy: int
    revenue_impact: float
    confidence: str


@dataclass(frozen=True)
class BusinessMetrics:
    current_revenue: int = 0
    optimized_revenue: int = 0
    revenue_uplift: int = 0
    uplift_percentage: float = 0.0
    avg_price_current: int = 0
    avg_price_optimized: int = 0
    avg_occupancy_current: int = 0
    avg_occupancy_optimized: int = 0
    total_bookings: int = 0


DEFAULT_METRICS = BusinessMetrics()


def weekday_label(iso_date: str) -> str:
    return WEEKDAY_SHORT_LABELS[date.fromisoformat(iso_date[:10]).weekday()]


def to_pricing_row(recommendation: PricingRecommendation, *, capacity: int = TABLE_CAPACITY) -> PricingRow:
    current_price = recommendation.current_price
    optimized_price = recommendation.recommended_price
    occupancy_optimized = round_int(recommendation.predicted_occupancy)
    occupancy_current = round_int(current_price / optimized_price * occupancy_optimized) if optimized_price else 0
    demand_forecast = min(100, round_int(occupancy_optimized * DEMAND_FORECAST_FACTOR))

    return PricingRow(
        date=recommendation.date,
        day=weekday_label(recommendation.date),
        current_price=round_int(current_price),
        optimized_price=round_int(optimized_price),
        demand_forecast=demand_forecast,
        occupancy_current=occupancy_current,
        occupancy_optimized=occupancy_optimized,
        revenue_current=round_int(current_price * occupancy_current * capacity / 100),
        revenue_optimized=round_int(optimized_price * occupancy_optimized * capacity / 100),
    )


def build_pricing_rows(
    recommendations: Iterable[PricingRecommendation], *, capacity: int = TABLE_CAPACITY
) -> list[PricingRow]:
    return [to_pricing_row(item, capacity=capacity) for item in recommendations]


def classify_confidence(row: PricingRow) -> str:
    if row.demand_forecast > 80 and row.occupancy_optimized > 75:
        return "high"
    if row.demand_forecast < 50 or row.occupancy_optimized < 50:
        return "low"
    return "medium"


def build_table_recommendations(rows: Iterable[PricingRow]) -> list[TableRecommendation]:
    table: list[TableRecommendation] = []
    for row in rows:
        price_diff = row.optimized_price - row.current_price
        revenue_impact = price_diff / row.current_price * 100.0 if row.current_price else 0.0
        table.append(
            TableRecommendation(
                date=row.date,
                day=row.day,
                current_price=row.current_price,
                recommended_price=row.optimized_price,
                expected_occupancy=row.occupancy_optimized,
                revenue_impact=round_half_up(revenue_impact, 1),
                confidence=classify_confidence(row),
            )
        )
    return table


def calculate_business_metrics(rows: list[PricingRow]) -> BusinessMetrics:
    if not rows:
        return DEFAULT_METRICS

    count = len(rows)
    current_revenue = sum(row.revenue_current for row in rows)
    optimized_revenue = sum(row.revenue_optimized for row in rows)
    revenue_uplift = optimized_revenue - current_revenue
    uplift_percentage = revenue_uplift / current_revenue * 100.0 if current_revenue else 0.0

    return BusinessMetrics(
        current_revenue=current_revenue,
        optimized_revenue=optimized_revenue,
        revenue_uplift=revenue_uplift,
        uplift_percentage=round_half_up(uplift_percentage, 1),
        avg_price_current=round_int(sum(row.current_price for row in rows) / count),
        avg_price_optimized=round_int(sum(row.optimized_price for row in rows) / count),
        avg_occupancy_current=round_int(sum(row.occupancy_current for row in rows) / count),
        avg_occupancy_optimized=round_int(sum(row.occupancy_optimized for row in rows) / count),
        total_bookings=count * TABLE_CAPACITY,
    )


def pricing_rows_frame(rows: list[PricingRow]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=list(PricingRow.__dataclass_fields__))
    return pd.DataFrame([asdict(row) for row in rows])


def recommendations_to_csv(table: list[TableRecommendation]) -> str:
    """Render table recommendations as CSV with percent-suffixed occupancy and impact."""

    frame = pd.DataFrame([asdict(item) for item in table], columns=list(CSV_COLUMNS))
    frame["expected_occupancy"] = frame["expected_occupancy"].map(lambda value: f"{value}%")
    frame["revenue_impact"] = frame["revenue_impact"].map(lambda value: f"{value}%")
    return frame.rename(columns=CSV_COLUMNS).to_csv(index=False, lineterminator="\n")


def export_filename(today: date) -> str:
    return f"pricing_recommendations_{today.isoformat()}.csv"
