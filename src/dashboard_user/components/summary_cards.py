# This file renders compact KPI cards for the dashboard and pricing engine pages.
# It exists so key metrics share one consistent visual and tooltip pattern.
# The functions expect business-ready values and do not perform heavy computation.

from __future__ import annotations

import streamlit as st

from src.analytics.dashboard_aggregation import DashboardSummary
from src.dashboard_user.formatting import format_change, format_count, format_currency, format_percent
from src.pricing_engine.engine_metrics import BusinessMetrics


def render_kpi_cards(
    summary: DashboardSummary,
    *,
    tooltips: dict[str, str],
    currency_symbol: str = "€",
) -> None:
    metrics = summary.metrics
    col1, col2, col3, col4, col5 = st.columns(5)

    col1.metric("Records", format_count(summary.total_records), help=tooltips["total_records_card"])
    col2.metric(
        "Occupancy",
        format_percent(metrics.occupancy_rate if metrics else summary.avg_occupancy),
        format_change(metrics.occupancy_change) if metrics else None,
        help=tooltips["occupancy_rate_card"],
    )
    col3.metric(
        "ADR",
        format_currency(metrics.adr if metrics else summary.avg_price, symbol=currency_symbol, decimals=2),
        format_change(metrics.adr_change) if metrics else None,
        help=tooltips["adr_card"],
    )
    col4.metric(
        "RevPAR",
        format_currency(metrics.revpar if metrics else None, symbol=currency_symbol, decimals=2),
        format_change(metrics.revpar_change) if metrics else None,
        help=tooltips["revpar_card"],
    )
    col5.metric(
        "Expected Revenue",
        format_currency(metrics.expected_revenue if metrics else None, symbol=currency_symbol),
        format_change(metrics.revenue_change) if metrics else None,
        help=tooltips["expected_revenue_card"],
    )


def render_business_metric_cards(
    metrics: BusinessMetrics,
    *,
    tooltips: dict[str, str],
    currency_symbol: str = "€",
) -> None:
    col1, col2, col3, col4 = st.columns(4)

    col1.metric(
        "Current Revenue",
        format_currency(metrics.current_revenue, symbol=currency_symbol),
        help=tooltips["current_revenue_card"],
    )
    col2.metric(
        "Optimized Revenue",
        format_currency(metrics.optimized_revenue, symbol=currency_symbol),
        help=tooltips["optimized_revenue_card"],
    )
    col3.metric(
        "Revenue Uplift",
        format_currency(metrics.revenue_uplift, symbol=currency_symbol),
        format_change(metrics.uplift_percentage),
        help=tooltips["revenue_uplift_card"],
    )
    col4.metric(
        "Avg Recommended Price",
        format_currency(metrics.avg_price_optimized, symbol=currency_symbol),
        help=tooltips["avg_price_optimized_card"],
    )
