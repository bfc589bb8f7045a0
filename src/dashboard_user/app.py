# This file is the Streamlit entrypoint for the hospitality pricing dashboard.
# It exists to combine persisted UI preferences, API-first data retrieval, and page-level storytelling in one app.
# Preferences are read once per session into an immutable object that is passed to every page.

from __future__ import annotations

from typing import Any

import streamlit as st

from src.analytics.dashboard_aggregation import DashboardSummary
from src.common.logging import configure_logging
from src.dashboard_user.dashboard_config import SUPPORTED_LANGUAGES, DashboardConfig, load_dashboard_config
from src.dashboard_user.data_access import DashboardDataAccess
from src.dashboard_user.page_views import assistant, competitors, dashboard, data_management, pricing_engine
from src.dashboard_user.tooltips import TOOLTIPS
from src.dashboard_user.ui_state import NavigationFlags, UiPreferences, UiStateStore
from src.dashboard_user.ui_text import APP_TITLE, t
from src.pricing_engine.competitor_analysis import CompetitorPrice

PREFERENCES_KEY = "ui_preferences"


@st.cache_resource
def get_data_access() -> DashboardDataAccess:
    configure_logging()
    config = load_dashboard_config()
    return DashboardDataAccess(config=config)


def load_preferences(store: UiStateStore, config: DashboardConfig) -> UiPreferences:
    if PREFERENCES_KEY not in st.session_state:
        st.session_state[PREFERENCES_KEY] = store.load(default_language=config.default_language)
    return st.session_state[PREFERENCES_KEY]


def assistant_context(
    preferences: UiPreferences,
    summary: DashboardSummary,
    competitor_prices: list[CompetitorPrice],
) -> dict[str, Any]:
    business = preferences.business
    current_data: dict[str, Any] = {}
    if not summary.is_empty:
        current_data = {
            "avg_price": summary.avg_price,
            "occupancy_rate": summary.avg_occupancy,
            "total_bookings": summary.total_records,
            "revenue": summary.metrics.expected_revenue if summary.metrics else None,
        }
    return {
        "business_name": business.business_name,
        "location": business.location,
        "currency": business.currency,
        "current_data": current_data or None,
        "competitor_prices": [{"competitor": item.competitor_name, "price": item.price} for item in competitor_prices],
    }


def render_sidebar(
    *,
    preferences: UiPreferences,
    store: UiStateStore,
    file_options: dict[str, str],
) -> UiPreferences:
    language = preferences.language
    selected_language = st.sidebar.selectbox(
        t("sidebar_language", language),
        options=list(SUPPORTED_LANGUAGES),
        index=list(SUPPORTED_LANGUAGES).index(language) if language in SUPPORTED_LANGUAGES else 0,
    )

    active_file_id = preferences.active_file_id
    if file_options:
        ids = list(file_options.keys())
        index = ids.index(active_file_id) if active_file_id in ids else 0
        active_file_id = st.sidebar.selectbox(
            t("sidebar_active_file", language),
            options=ids,
            index=index,
            format_func=lambda file_id: file_options[file_id],
        )

    st.sidebar.markdown("---")
    st.sidebar.caption(t("sidebar_navigation", language))
    navigation = NavigationFlags(
        show_pricing_engine=st.sidebar.checkbox(
            t("tab_pricing_engine", language), value=preferences.navigation.show_pricing_engine
        ),
        show_competitors=st.sidebar.checkbox(t("tab_competitors", language), value=preferences.navigation.show_competitors),
        show_assistant=st.sidebar.checkbox(t("tab_assistant", language), value=preferences.navigation.show_assistant),
    )

    if (selected_language, active_file_id, navigation) != (
        preferences.language,
        preferences.active_file_id,
        preferences.navigation,
    ):
        preferences = store.update(
            preferences,
            language=selected_language,
            active_file_id=active_file_id,
            navigation=navigation,
        )
    return preferences


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide")

    data_access = get_data_access()
    config = data_access.config
    store = UiStateStore(config.state_file_path)
    preferences = load_preferences(store, config)

    files, files_source = data_access.list_files()
    known = {item.id: item.name for item in files}
    known.update({item.id: item.name for item in preferences.uploaded_files if item.status == "success"})
    preferences = render_sidebar(preferences=preferences, store=store, file_options=known)

    language = preferences.language
    currency_symbol = config.currency_symbol
    file_id = preferences.active_file_id or next(iter(known), None)

    st.title(APP_TITLE)
    st.caption(t("app_subtitle", language))
    if config.demo_mode:
        st.info(t("demo_mode_banner", language))

    summary, summary_source = data_access.get_dashboard_summary(file_id)
    today = data_access.today_fn()
    competitor_prices, competitor_source = data_access.get_competitor_prices(on_date=today)

    st.sidebar.markdown("---")
    st.sidebar.caption(t("sidebar_sources", language))
    st.sidebar.caption(f"Files: {files_source}")
    st.sidebar.caption(f"Bookings: {summary_source}")
    st.sidebar.caption(f"Competitors: {competitor_source}")

    pages: list[tuple[str, str]] = [("dashboard", t("tab_dashboard", language)), ("data", t("tab_data", language))]
    if preferences.navigation.show_pricing_engine:
        pages.append(("pricing_engine", t("tab_pricing_engine", language)))
    if preferences.navigation.show_competitors:
        pages.append(("competitors", t("tab_competitors", language)))
    if preferences.navigation.show_assistant:
        pages.append(("assistant", t("tab_assistant", language)))

    tabs = dict(zip([key for key, _ in pages], st.tabs([label for _, label in pages]), strict=True))

    with tabs["dashboard"]:
        dashboard.render(
            summary=summary,
            business=preferences.business,
            language=language,
            tooltips=TOOLTIPS,
            currency_symbol=currency_symbol,
        )

    with tabs["data"]:
        preferences = data_management.render(
            data_access=data_access,
            preferences=preferences,
            store=store,
            tooltips=TOOLTIPS,
        )

    if "pricing_engine" in tabs:
        with tabs["pricing_engine"]:
            pricing_engine.render(
                data_access=data_access,
                file_id=file_id,
                language=language,
                tooltips=TOOLTIPS,
                currency_symbol=currency_symbol,
            )

    if "competitors" in tabs:
        with tabs["competitors"]:
            competitors.render(
                data_access=data_access,
                file_id=file_id,
                your_price=float(summary.avg_price),
                today=today,
                language=language,
                tooltips=TOOLTIPS,
                currency_symbol=currency_symbol,
            )

    if "assistant" in tabs:
        with tabs["assistant"]:
            assistant.render(
                data_access=data_access,
                business=preferences.business,
                context=assistant_context(preferences, summary, competitor_prices),
                language=language,
                tooltips=TOOLTIPS,
            )

    st.session_state[PREFERENCES_KEY] = preferences


if __name__ == "__main__":
    main()
