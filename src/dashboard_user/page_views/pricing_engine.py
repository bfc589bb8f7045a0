# This file renders the Pricing Engine tab with daily price recommendations for the active dataset.
# It exists so owners can compare current and recommended prices under a chosen strategy preset.
# Recommendations come from the backend, or from the seeded synthetic provider in demo mode.

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime

import pandas as pd
import streamlit as st

from src.dashboard_user.components.charts import render_pricing_timeline
from src.dashboard_user.components.summary_cards import render_business_metric_cards
from src.dashboard_user.components.tables import render_table
from src.dashboard_user.data_access import DashboardDataAccess
from src.dashboard_user.ui_text import t
from src.pricing_engine.engine_metrics import (
    CSV_COLUMNS,
    build_pricing_rows,
    build_table_recommendations,
    calculate_business_metrics,
    export_filename,
    pricing_rows_frame,
    recommendations_to_csv,
)


def render(
    *,
    data_access: DashboardDataAccess,
    file_id: str | None,
    language: str,
    tooltips: dict[str, str],
    currency_symbol: str,
) -> None:
    st.header(t("pricing_header", language))
    if not file_id:
        st.info(t("pricing_no_file", language))
        return

    strategies = data_access.pricing_config.strategies
    strategy_key = st.radio(
        t("pricing_strategy", language),
        options=list(strategies.keys()),
        index=list(strategies.keys()).index("balanced") if "balanced" in strategies else 0,
        format_func=lambda key: strategies[key].name,
        horizontal=True,
        help=tooltips["strategy_selector"],
    )
    preset = strategies[strategy_key]
    st.caption(
        f"{preset.description} | demand sensitivity {preset.demand_sensitivity:.1f} | "
        f"price aggression {preset.price_aggression:.1f} | occupancy target {preset.occupancy_target}%"
    )
    days = st.slider(t("pricing_days", language), min_value=7, max_value=90, value=data_access.config.forecast_days)

    recommendation_set, source = data_access.get_recommendations(
        property_id=file_id,
        days=days,
        strategy=strategy_key,
        target_occupancy=float(preset.occupancy_target),
    )
    st.caption(t("source_label", language, source=f"{source} ({recommendation_set.model})"))
    if not recommendation_set.recommendations:
        st.info(t("pricing_empty", language))
        return

    rows = build_pricing_rows(recommendation_set.recommendations, capacity=data_access.pricing_config.table_capacity)
    render_business_metric_cards(calculate_business_metrics(rows), tooltips=tooltips, currency_symbol=currency_symbol)

    render_pricing_timeline(
        pricing_rows_frame(rows),
        title=t("pricing_timeline", language),
        help_text=tooltips["pricing_timeline_chart"],
    )

    table = build_table_recommendations(rows)
    table_df = pd.DataFrame([asdict(item) for item in table], columns=list(CSV_COLUMNS)).rename(columns=CSV_COLUMNS)
    render_table(
        table_df,
        title=t("pricing_table_header", language),
        empty_message=t("pricing_empty", language),
        help_text=tooltips["recommendation_table"],
        height=360,
    )

    st.download_button(
        t("pricing_download", language),
        data=recommendations_to_csv(table),
        file_name=export_filename(datetime.now(tz=UTC).date()),
        mime="text/csv",
    )

    with st.expander("Why these prices?"):
        for item in recommendation_set.recommendations[:7]:
            st.markdown(f"- **{item.date}**: {item.reasoning_primary or item.explanation}")
