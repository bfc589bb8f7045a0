# This file wraps table rendering behavior used across dashboard pages.
# It exists so empty states and sizing behavior are consistent for every tab.

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.ingestion.uploads import UploadedFile, format_file_size


def render_table(
    dataframe: pd.DataFrame,
    *,
    title: str,
    empty_message: str,
    help_text: str | None = None,
    height: int = 320,
) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info(empty_message)
        return
    st.dataframe(dataframe, use_container_width=True, hide_index=True, height=height)


def uploaded_files_frame(files: list[UploadedFile]) -> pd.DataFrame:
    """Display rows for the uploaded-file list, newest first."""

    ordered = sorted(files, key=lambda item: item.uploaded_at, reverse=True)
    return pd.DataFrame(
        [
            {
                "File": item.name,
                "Size": format_file_size(item.size),
                "Rows": item.rows,
                "Columns": item.columns,
                "Status": item.status,
                "Enrichment": item.enrichment_status,
                "Uploaded": item.uploaded_at.strftime("%Y-%m-%d %H:%M"),
            }
            for item in ordered
        ],
        columns=["File", "Size", "Rows", "Columns", "Status", "Enrichment", "Uploaded"],
    )
