# This file renders the Data tab: upload, list, enrich, and delete booking files.
# It exists so the upload and enrichment workflow lives in one place with visible progress.
# Every change to the file list is written back to the persisted UI state.

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.dashboard_user.components.tables import render_table, uploaded_files_frame
from src.dashboard_user.data_access import DashboardDataAccess
from src.dashboard_user.enrichment_poller import EnrichmentProgress
from src.dashboard_user.ui_state import UiPreferences, UiStateStore
from src.dashboard_user.ui_text import t
from src.ingestion.uploads import ALLOWED_EXTENSIONS, UploadedFile


def _merged_files(remote_files: list[UploadedFile], preferences: UiPreferences) -> list[UploadedFile]:
    by_id = {item.id: item for item in preferences.uploaded_files}
    by_id.update({item.id: item for item in remote_files})
    return list(by_id.values())


def render(
    *,
    data_access: DashboardDataAccess,
    preferences: UiPreferences,
    store: UiStateStore,
    tooltips: dict[str, str],
) -> UiPreferences:
    language = preferences.language
    st.header(t("data_upload_header", language))

    upload = st.file_uploader(
        t("data_upload_help", language),
        type=[extension.lstrip(".") for extension in ALLOWED_EXTENSIONS],
    )
    if upload is not None and st.button(t("data_upload_button", language)):
        try:
            uploaded, source = data_access.upload_file(upload.name, upload.getvalue())
        except ValueError as exc:
            st.error(t("data_upload_failed", language, error=exc))
        else:
            if uploaded.status == "error":
                st.error(t("data_upload_failed", language, error=uploaded.error))
            else:
                st.success(t("data_upload_success", language, name=uploaded.name, rows=uploaded.rows))
            st.caption(t("source_label", language, source=source))
            preferences = store.update(
                preferences.with_file(uploaded),
                active_file_id=uploaded.id if uploaded.status == "success" else preferences.active_file_id,
            )

    remote_files, _ = data_access.list_files()
    files = _merged_files(remote_files, preferences)
    render_table(
        uploaded_files_frame(files),
        title=t("data_files_header", language),
        empty_message=t("data_no_files", language),
    )
    if not files:
        return preferences

    labels = {f"{item.name} ({item.id})": item for item in files}
    selected = labels[st.selectbox(t("sidebar_active_file", language), options=list(labels.keys()))]

    enrich_col, delete_col = st.columns(2)
    if enrich_col.button(
        t("data_enrich_button", language),
        disabled=selected.status != "success" or selected.enrichment_status == "completed",
        help=tooltips["enrichment_progress"],
    ):
        progress_bar = st.progress(0, text=t("data_enrich_running", language, name=selected.name))

        def on_progress(progress: EnrichmentProgress) -> None:
            progress_bar.progress(min(progress.progress, 100), text=progress.message or progress.status)

        updated, _ = data_access.enrich_file(selected, on_progress=on_progress)
        if updated.enrichment_status == "completed":
            progress_bar.progress(100)
            st.success(t("data_enrich_done", language, name=selected.name))
        else:
            st.error(t("data_enrich_failed", language, name=selected.name))
        preferences = store.update(preferences.with_file(updated))

    if delete_col.button(t("data_delete_button", language)):
        data_access.delete_file(selected.id)
        preferences = preferences.without_file(selected.id)
        store.save(preferences)
        st.rerun()

    st.subheader(t("data_preview_header", language))
    preview = data_access.preview_rows(selected.id)
    if preview:
        st.dataframe(pd.DataFrame(preview), use_container_width=True, hide_index=True)
    else:
        st.info(t("data_no_files", language))
    return preferences
