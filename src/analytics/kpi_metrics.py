"""
Headline KPI metrics for the dashboard metrics bar.
Computes occupancy rate, ADR, RevPAR, and expected revenue from normalized booking rows,
plus year-over-year changes when last year's rows are supplied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

import pandas as pd

ESTIMATE_DAYS = 30
LAST_YEAR_DAYS = 365


@dataclass(frozen=True)
class MetricsData:
    occupancy_rate: float
    adr: float
    revpar: float
    expected_revenue: float
    occupancy_change: float | None = None
    adr_change: float | None = None
    revpar_change: float | None = None
    revenue_change: float | None = None


def _month_rows(frame: pd.DataFrame, *, year: int, month: int) -> pd.DataFrame:
    if frame.empty:
        return frame
    mask = frame["stay_date"].map(lambda day: day.year == year and day.month == month)
    return frame[mask.astype(bool)]


def rows_within_last_year(frame: pd.DataFrame, *, today: date) -> pd.DataFrame:
    """Rows staying after `today - 365 days`, the complement of the last-year partition."""

    if frame.empty:
        return frame
    cutoff = today - timedelta(days=LAST_YEAR_DAYS)
    mask = frame["stay_date"].map(lambda day: isinstance(day, date) and day > cutoff)
    return frame[mask.astype(bool)]


def _pct_change(current: float, previous: float) -> float:
    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100.0


def _base_metrics(frame: pd.DataFrame, *, reference_day: date) -> tuple[float, float, float, float]:
    occupancies = frame["occupancy"].dropna() if not frame.empty else pd.Series(dtype="float64")
    prices = frame["price"].dropna() if not frame.empty else pd.Series(dtype="float64")

    occupancy_rate = float(occupancies.mean() * 100.0) if not occupancies.empty else 0.0
    adr = float(prices.mean()) if not prices.empty else 0.0
    revpar = adr * occupancy_rate / 100.0

    this_month = _month_rows(frame, year=reference_day.year, month=reference_day.month)
    if this_month.empty:
        expected_revenue = revpar * ESTIMATE_DAYS
    else:
        expected_revenue = float((this_month["price"].fillna(0.0) * this_month["occupancy"].fillna(0.0)).sum())
    return occupancy_rate, adr, revpar, expected_revenue


def compute_kpi_metrics(
    frame: pd.DataFrame,
    *,
    today: date,
    last_year_frame: pd.DataFrame | None = None,
) -> MetricsData:
    """Compute KPI metrics from a normalized booking frame.

    Change fields stay None unless `last_year_frame` holds rows. In that case the current
    figures use only rows from the last 365 days and compare against the same month one year earlier.
    """

    if last_year_frame is None or last_year_frame.empty:
        occupancy_rate, adr, revpar, expected_revenue = _base_metrics(frame, reference_day=today)
        return MetricsData(
            occupancy_rate=occupancy_rate,
            adr=adr,
            revpar=revpar,
            expected_revenue=expected_revenue,
        )

    current_frame = rows_within_last_year(frame, today=today)
    occupancy_rate, adr, revpar, expected_revenue = _base_metrics(current_frame, reference_day=today)
    last_year_day = date(today.year - 1, today.month, min(today.day, 28))
    ly_occupancy, ly_adr, ly_revpar, ly_revenue = _base_metrics(last_year_frame, reference_day=last_year_day)
    return MetricsData(
        occupancy_rate=occupancy_rate,
        adr=adr,
        revpar=revpar,
        expected_revenue=expected_revenue,
        occupancy_change=_pct_change(occupancy_rate, ly_occupancy),
        adr_change=_pct_change(adr, ly_adr),
        revpar_change=_pct_change(revpar, ly_revpar),
        revenue_change=_pct_change(expected_revenue, ly_revenue),
    )
