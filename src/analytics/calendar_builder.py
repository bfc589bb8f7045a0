"""
Per-date calendar model for the price and demand calendar.
Groups normalized booking rows by stay date, merges pricing recommendations and competitor medians,
and appends forward-looking days that only have a recommendation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Any

import pandas as pd

from src.analytics.rounding import round_half_up
from src.pricing_engine.recommendation import PricingRecommendation

DEMAND_OCCUPANCY_FACTOR = 1.2
FORWARD_DAYS = 30


@dataclass(frozen=True)
class DayData:
    date: str
    price: float
    demand: float
    occupancy: float
    is_weekend: bool
    is_past: bool
    is_holiday: bool = False
    holiday_name: str | None = None
    price_change: float | None = None
    competitor_price: float | None = None
    temperature: float | None = None
    precipitation: float | None = None
    weather_condition: str | None = None
    recommended_price: float | None = None
    predicted_occupancy: float | None = None
    revenue_impact: float | None = None
    confidence: str | None = None
    explanation: str | None = None


def _optional_float(value: Any) -> float | None:
    if value is None or pd.isna(value):
        return None
    return float(value)


def _optional_text(value: Any) -> str | None:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    return str(value)


def _recommendation_fields(recommendation: PricingRecommendation | None) -> dict[str, Any]:
    if recommendation is None:
        return {}
    return {
        "recommended_price": recommendation.recommended_price,
        "predicted_occupancy": recommendation.predicted_occupancy,
        "revenue_impact": recommendation.revenue_impact,
        "confidence": recommendation.confidence,
        "explanation": recommendation.explanation,
    }


def _historical_day(
    stay_date: date,
    group: pd.DataFrame,
    *,
    today: date,
    recommendation: PricingRecommendation | None,
    competitor_price: float | None,
) -> DayData:
    prices = group["price"].dropna()
    occupancies = group["occupancy"].dropna()
    avg_price = float(prices.mean()) if not prices.empty else 0.0
    avg_occupancy = float(occupancies.mean()) if not occupancies.empty else 0.0

    holiday_rows = group[group["is_holiday"].map(lambda flag: flag is True)]
    holiday_name = None
    if not holiday_rows.empty:
        names = holiday_rows["holiday_name"].dropna()
        holiday_name = str(names.iloc[0]) if not names.empty else None

    first = group.iloc[0]
    return DayData(
        date=stay_date.isoformat(),
        price=avg_price,
        demand=min(1.0, avg_occupancy * DEMAND_OCCUPANCY_FACTOR),
        occupancy=avg_occupancy,
        is_weekend=stay_date.weekday() >= 5,
        is_past=stay_date < today,
        is_holiday=not holiday_rows.empty,
        holiday_name=holiday_name,
        competitor_price=competitor_price,
        temperature=_optional_float(first["temperature"]),
        precipitation=_optional_float(first["precipitation"]),
        weather_condition=_optional_text(first["weather_condition"]),
        **_recommendation_fields(recommendation),
    )


def _forward_day(
    future_date: date,
    recommendation: PricingRecommendation,
    *,
    competitor_price: float | None,
) -> DayData:
    predicted_fraction = recommendation.predicted_occupancy / 100.0
    return DayData(
        date=future_date.isoformat(),
        price=recommendation.recommended_price,
        demand=predicted_fraction,
        occupancy=predicted_fraction,
        is_weekend=future_date.weekday() >= 5,
        is_past=False,
        competitor_price=competitor_price,
        **_recommendation_fields(recommendation),
    )


def _with_price_changes(days: list[DayData]) -> list[DayData]:
    """Attach day-over-day price change in percent between consecutive calendar entries."""

    result: list[DayData] = []
    previous_price: float | None = None
    for day in days:
        change = None
        if previous_price:
            change = round_half_up((day.price - previous_price) / previous_price * 100.0, 1)
        result.append(DayData(**{**asdict(day), "price_change": change}))
        previous_price = day.price
    return result


def build_calendar(
    frame: pd.DataFrame,
    *,
    today: date,
    recommendations: Mapping[str, PricingRecommendation] | None = None,
    competitor_prices: Mapping[str, float] | None = None,
    forward_days: int = FORWARD_DAYS,
) -> list[DayData]:
    """Build calendar entries ordered by date.

    Historical entries come from booking rows and are never replaced by forward entries.
    """

    recommendations = recommendations or {}
    competitor_prices = competitor_prices or {}
    days: dict[str, DayData] = {}

    if not frame.empty:
        for stay_date, group in frame.groupby("stay_date", sort=True):
            date_key = stay_date.isoformat()
            days[date_key] = _historical_day(
                stay_date,
                group,
                today=today,
                recommendation=recommendations.get(date_key),
                competitor_price=competitor_prices.get(date_key),
            )

    for offset in range(1, forward_days + 1):
        future_date = today + timedelta(days=offset)
        date_key = future_date.isoformat()
        if date_key in days:
            continue
        recommendation = recommendations.get(date_key)
        if recommendation is None:
            continue
        days[date_key] = _forward_day(
            future_date,
            recommendation,
            competitor_price=competitor_prices.get(date_key),
        )

    return _with_price_changes([days[key] for key in sorted(days)])


def calendar_frame(days: list[DayData]) -> pd.DataFrame:
    if not days:
        return pd.DataFrame(columns=[name for name in DayData.__dataclass_fields__])
    return pd.DataFrame([asdict(day) for day in days])
