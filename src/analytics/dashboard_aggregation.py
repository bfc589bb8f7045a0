"""
Row-to-dashboard aggregation pipeline.
Takes raw booking rows from an uploaded file, normalizes them once, and derives the summary cards,
monthly revenue, weekday occupancy, recent price trend, calendar, and KPI metrics shown on the Dashboard page.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any

import pandas as pd

from src.analytics.calendar_builder import FORWARD_DAYS, DayData, build_calendar
from src.analytics.kpi_metrics import MetricsData, compute_kpi_metrics
from src.analytics.rounding import round_half_up, round_int
from src.common.schema_map import (
    NormalizedBookings,
    RejectedRow,
    normalize_booking_frame,
    normalize_booking_rows,
)
from src.pricing_engine.recommendation import PricingRecommendation

logger = logging.getLogger(__name__)

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
REVENUE_MONTH_WINDOW = 6
PRICE_SERIES_WINDOW = 30

BookingInput = pd.DataFrame | Iterable[Mapping[str, Any]]


@dataclass(frozen=True)
class RevenuePoint:
    month: str
    month_start: date
    revenue: int
    avg_revenue: int


@dataclass(frozen=True)
class WeekdayOccupancyPoint:
    day: str
    occupancy: int


@dataclass(frozen=True)
class PricePoint:
    date: str
    day_label: str
    price: float


@dataclass(frozen=True)
class DashboardSummary:
    total_records: int
    avg_price: int
    avg_occupancy: int
    revenue_by_month: list[RevenuePoint] = field(default_factory=list)
    occupancy_by_weekday: list[WeekdayOccupancyPoint] = field(default_factory=list)
    price_time_series: list[PricePoint] = field(default_factory=list)
    calendar: list[DayData] = field(default_factory=list)
    metrics: MetricsData | None = None
    rejected_rows: list[RejectedRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.total_records == 0


def empty_dashboard_summary() -> DashboardSummary:
    return DashboardSummary(total_records=0, avg_price=0, avg_occupancy=0)


def monthly_revenue(frame: pd.DataFrame, *, window: int = REVENUE_MONTH_WINDOW) -> list[RevenuePoint]:
    """Sum prices per calendar month; only rows with a valid price are counted."""

    priced = frame[frame["price"].notna()]
    if priced.empty:
        return []

    month_start = priced["stay_date"].map(lambda day: day.replace(day=1))
    grouped = (
        priced.assign(month_start=month_start)
        .groupby("month_start")["price"]
        .agg(["sum", "count"])
        .sort_index()
        .tail(window)
    )
    return [
        RevenuePoint(
            month=f"{MONTH_LABELS[month.month - 1]} {month.year}",
            month_start=month,
            revenue=round_int(float(row["sum"])),
            avg_revenue=round_int(float(row["sum"]) / int(row["count"])),
        )
        for month, row in grouped.iterrows()
    ]


def weekday_occupancy(frame: pd.DataFrame) -> list[WeekdayOccupancyPoint]:
    """Mean occupancy percentage per weekday, Monday first; weekdays without samples report 0."""

    valid = frame[frame["occupancy"].notna()]
    means: dict[int, float] = {}
    if not valid.empty:
        weekday_index = valid["stay_date"].map(lambda day: day.weekday())
        means = (valid["occupancy"] * 100.0).groupby(weekday_index).mean().to_dict()
    return [
        WeekdayOccupancyPoint(day=label, occupancy=round_int(means.get(index, 0.0)))
        for index, label in enumerate(WEEKDAY_LABELS)
    ]


def price_time_series(frame: pd.DataFrame, *, window: int = PRICE_SERIES_WINDOW) -> list[PricePoint]:
    priced = frame[frame["price"].notna()]
    if priced.empty:
        return []
    per_date = priced.groupby("stay_date")["price"].mean().sort_index().tail(window)
    return [
        PricePoint(date=day.isoformat(), day_label=str(day.day), price=round_half_up(float(price), 2))
        for day, price in per_date.items()
    ]


def _normalize(rows: BookingInput) -> NormalizedBookings:
    if isinstance(rows, pd.DataFrame):
        return normalize_booking_frame(rows)
    return normalize_booking_rows(rows)


def aggregate_bookings(
    rows: BookingInput,
    *,
    recommendations: Mapping[str, PricingRecommendation] | None = None,
    competitor_prices: Mapping[str, float] | None = None,
    today: date | None = None,
    forward_days: int = FORWARD_DAYS,
    last_year_rows: BookingInput | None = None,
) -> DashboardSummary:
    """Aggregate booking rows into the Dashboard page summary."""

    normalized = _normalize(rows)
    if normalized.input_row_count == 0:
        return empty_dashboard_summary()

    today = today or datetime.now(tz=UTC).date()
    frame = normalized.frame

    prices = frame["price"].dropna()
    occupancies = frame["occupancy"].dropna()
    avg_price = round_int(float(prices.mean())) if not prices.empty else 0
    avg_occupancy = round_int(float(occupancies.mean()) * 100.0) if not occupancies.empty else 0

    last_year_frame = _normalize(last_year_rows).frame if last_year_rows is not None else None

    summary = DashboardSummary(
        total_records=normalized.input_row_count,
        avg_price=avg_price,
        avg_occupancy=avg_occupancy,
        revenue_by_month=monthly_revenue(frame),
        occupancy_by_weekday=weekday_occupancy(frame),
        price_time_series=price_time_series(frame),
        calendar=build_calendar(
            frame,
            today=today,
            recommendations=recommendations,
            competitor_prices=competitor_prices,
            forward_days=forward_days,
        ),
        metrics=compute_kpi_metrics(frame, today=today, last_year_frame=last_year_frame),
        rejected_rows=list(normalized.rejected_rows),
    )

    if normalized.rejected_rows:
        logger.warning(
            "Rejected %d of %d booking rows without a usable date",
            len(normalized.rejected_rows),
            normalized.input_row_count,
        )
    logger.info(
        "Aggregated %d booking rows into %d calendar days",
        normalized.input_row_count,
        len(summary.calendar),
    )
    return summary
