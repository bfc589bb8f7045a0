# This file contains reusable chart renderers for the dashboard, pricing engine, and competitor views.
# It exists so chart logic is shared and consistently handles empty datasets.
# The charts use Altair because it integrates cleanly with Streamlit and supports layered visuals.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

WEEKDAY_ORDER = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def render_revenue_by_month(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("No priced rows available for monthly revenue.")
        return

    chart = (
        alt.Chart(dataframe)
        .mark_bar()
        .encode(
            x=alt.X("month:N", sort=alt.SortField("month_start"), title="Month"),
            y=alt.Y("revenue:Q", title="Revenue"),
            tooltip=["month:N", alt.Tooltip("revenue:Q", format=",.0f"), alt.Tooltip("avg_revenue:Q", format=",.0f")],
        )
        .properties(height=280)
    )
    st.altair_chart(chart, use_container_width=True)


def render_weekday_occupancy(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("No occupancy rows available.")
        return

    chart = (
        alt.Chart(dataframe)
        .mark_bar(color="#0e7490")
        .encode(
            x=alt.X("day:N", sort=WEEKDAY_ORDER, title="Weekday"),
            y=alt.Y("occupancy:Q", title="Occupancy (%)", scale=alt.Scale(domain=[0, 100])),
            tooltip=["day:N", "occupancy:Q"],
        )
        .properties(height=280)
    )
    st.altair_chart(chart, use_container_width=True)


def render_price_trend(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("No priced dates available for the trend.")
        return

    chart = (
        alt.Chart(dataframe)
        .mark_line(point=True)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("price:Q", title="Average price"),
            tooltip=[alt.Tooltip("date:T"), alt.Tooltip("price:Q", format=".2f")],
        )
        .properties(height=280)
    )
    st.altair_chart(chart, use_container_width=True)


def render_calendar_heatmap(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("No calendar days available.")
        return

    frame = dataframe.copy()
    frame["day"] = pd.to_datetime(frame["date"])
    frame["week"] = frame["day"].dt.strftime("%G-W%V")
    frame["weekday"] = frame["day"].dt.strftime("%a")
    chart = (
        alt.Chart(frame)
        .mark_rect()
        .encode(
            x=alt.X("weekday:N", sort=WEEKDAY_ORDER, title=None),
            y=alt.Y("week:O", title=None),
            color=alt.Color("demand:Q", scale=alt.Scale(scheme="orangered", domain=[0, 1]), title="Demand"),
            tooltip=[
                alt.Tooltip("date:N", title="Date"),
                alt.Tooltip("price:Q", format=".2f"),
                alt.Tooltip("occupancy:Q", format=".0%"),
                alt.Tooltip("recommended_price:Q", format=".0f"),
                alt.Tooltip("competitor_price:Q", format=".0f"),
                alt.Tooltip("holiday_name:N"),
            ],
        )
        .properties(height=max(200, 18 * frame["week"].nunique()))
    )
    st.altair_chart(chart, use_container_width=True)


def render_pricing_timeline(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("No recommendations available for the timeline.")
        return

    long_df = dataframe.melt(
        id_vars=["date"],
        value_vars=["current_price", "optimized_price"],
        var_name="series",
        value_name="price",
    )
    chart = (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("price:Q", title="Price"),
            color=alt.Color("series:N", title=None),
            tooltip=[alt.Tooltip("date:T"), "series:N", "price:Q"],
        )
        .properties(height=300)
    )
    st.altair_chart(chart, use_container_width=True)


def render_competitor_band(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("No competitor price band available for this window.")
        return

    base = alt.Chart(dataframe).encode(x=alt.X("date:T", title="Date"))
    band = base.mark_area(opacity=0.25).encode(
        y=alt.Y("price_p10:Q", title="Competitor price"),
        y2="price_p90:Q",
    )
    line = base.mark_line(color="#0e7490").encode(y=alt.Y("price_p50:Q", title="Competitor price"))

    chart = (band + line).properties(height=300)
    st.altair_chart(chart, use_container_width=True)
