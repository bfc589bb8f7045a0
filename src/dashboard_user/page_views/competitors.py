# This file renders the Competitors tab with current competitor prices and the market price band.
# It exists so owners can see where their average price sits against nearby properties.

from __future__ import annotations

from dataclasses import asdict
from datetime import date, timedelta

import pandas as pd
import streamlit as st

from src.dashboard_user.components.charts import render_competitor_band
from src.dashboard_user.components.tables import render_table
from src.dashboard_user.data_access import DashboardDataAccess
from src.dashboard_user.formatting import format_currency, format_percent
from src.dashboard_user.ui_text import t
from src.pricing_engine.competitor_analysis import analyze_competitor_prices, suggest_price

BAND_DAYS = 30


def render(
    *,
    data_access: DashboardDataAccess,
    file_id: str | None,
    your_price: float,
    today: date,
    language: str,
    tooltips: dict[str, str],
    currency_symbol: str,
) -> None:
    st.header(t("competitors_header", language))

    prices, source = data_access.get_competitor_prices(on_date=today)
    st.caption(t("source_label", language, source=source))
    if not prices:
        st.info(t("competitors_empty", language))
        return

    analysis = analyze_competitor_prices(prices, your_price)
    suggestion = suggest_price(analysis, your_price, currency_symbol=currency_symbol)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Your Avg Price", format_currency(your_price, symbol=currency_symbol))
    col2.metric("Market Average", format_currency(analysis.avg_price, symbol=currency_symbol))
    col3.metric(
        "Position",
        analysis.your_position.title(),
        format_currency(analysis.price_gap, symbol=currency_symbol),
        help=tooltips["competitor_position_card"],
    )
    col4.metric(
        t("competitors_suggestion", language),
        format_currency(suggestion.recommended_price, symbol=currency_symbol),
        format_percent(suggestion.change_percent),
    )
    st.caption(suggestion.reasoning)

    render_table(
        pd.DataFrame([asdict(item) for item in prices]),
        title=t("competitors_prices", language),
        empty_message=t("competitors_empty", language),
        help_text=tooltips["competitor_prices_table"],
        height=220,
    )

    if not file_id:
        return
    band_rows, _ = data_access.get_competitor_range(
        file_id,
        start_date=today,
        end_date=today + timedelta(days=BAND_DAYS),
    )
    render_competitor_band(
        pd.DataFrame(band_rows),
        title=t("competitors_band", language),
        help_text=tooltips["competitor_band_chart"],
    )
