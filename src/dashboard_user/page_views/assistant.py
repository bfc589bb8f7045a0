# This file renders the Assistant tab, a chat over the active dataset's headline numbers.
# It exists so owners can ask quick pricing questions in plain language.
# Conversation history lives in the Streamlit session and is sent with every message.

from __future__ import annotations

from typing import Any

import streamlit as st

from src.dashboard_user.data_access import DashboardDataAccess
from src.dashboard_user.ui_state import BusinessProfile
from src.dashboard_user.ui_text import t

HISTORY_KEY = "assistant_history"


def render(
    *,
    data_access: DashboardDataAccess,
    business: BusinessProfile,
    context: dict[str, Any],
    language: str,
    tooltips: dict[str, str],
) -> None:
    st.header(t("assistant_header", language))
    history: list[dict[str, str]] = st.session_state.setdefault(HISTORY_KEY, [])

    suggestion_col, clear_col = st.columns([4, 1])
    if suggestion_col.button(t("assistant_quick_suggestion", language), help=tooltips["quick_suggestion"]):
        suggestion, _ = data_access.quick_suggestion(context=context)
        st.info(suggestion)
    if clear_col.button(t("assistant_clear", language)):
        history.clear()

    for turn in history:
        with st.chat_message(turn["role"]):
            st.markdown(turn["content"])

    message = st.chat_input(t("assistant_placeholder", language))
    if not message:
        return

    with st.chat_message("user"):
        st.markdown(message)
    reply, _ = data_access.assistant_reply(
        message,
        history=list(history),
        context=context,
        business_name=business.business_name,
    )
    history.append({"role": "user", "content": message})
    history.append({"role": "assistant", "content": reply})
    with st.chat_message("assistant"):
        st.markdown(reply)
