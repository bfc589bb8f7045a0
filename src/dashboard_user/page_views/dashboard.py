# This file renders the Dashboard tab for the active booking dataset.
# It exists so owners can read headline KPIs, revenue, weekday occupancy, and the pricing calendar at a glance.
# All numbers come from the aggregated summary; this page only reshapes them for charts.

from __future__ import annotations

from dataclasses import asdict

import pandas as pd
import streamlit as st

from src.analytics.calendar_builder import calendar_frame
from src.analytics.dashboard_aggregation import DashboardSummary
from src.dashboard_user.components.charts import (
    render_calendar_heatmap,
    render_price_trend,
    render_revenue_by_month,
    render_weekday_occupancy,
)
from src.dashboard_user.components.summary_cards import render_kpi_cards
from src.dashboard_user.ui_state import BusinessProfile
from src.dashboard_user.ui_text import t


def render(
    *,
    summary: DashboardSummary,
    business: BusinessProfile,
    language: str,
    tooltips: dict[str, str],
    currency_symbol: str,
) -> None:
    st.header(business.business_name)
    st.caption(business.location)

    if summary.is_empty:
        st.info(t("empty_dashboard", language))
        return

    if summary.rejected_rows:
        st.warning(t("rejected_rows", language, count=len(summary.rejected_rows)))

    st.subheader(t("dashboard_kpis", language))
    render_kpi_cards(summary, tooltips=tooltips, currency_symbol=currency_symbol)

    left, right = st.columns(2)
    with left:
        render_revenue_by_month(
            pd.DataFrame([asdict(point) for point in summary.revenue_by_month]),
            title=t("chart_revenue_by_month", language),
            help_text=tooltips["revenue_by_month_chart"],
        )
    with right:
        render_weekday_occupancy(
            pd.DataFrame([asdict(point) for point in summary.occupancy_by_weekday]),
            title=t("chart_weekday_occupancy", language),
            help_text=tooltips["weekday_occupancy_chart"],
        )

    render_price_trend(
        pd.DataFrame([asdict(point) for point in summary.price_time_series]),
        title=t("chart_price_trend", language),
        help_text=tooltips["price_trend_chart"],
    )

    render_calendar_heatmap(
        calendar_frame(summary.calendar).tail(90),
        title=t("chart_calendar", language),
        help_text=tooltips["calendar_heatmap"],
    )
