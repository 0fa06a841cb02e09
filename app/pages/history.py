"""Audit log page: history table, CSV export and reset."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from app.layout import card
from config import get_settings
from core import AppState, build_csv, export_filename


def render_page(state: AppState, on_reset: Callable[[], None]) -> None:
    """Render the audit log page."""

    data = state.dashboard()
    st.title("Audit Log")
    st.caption("Every report logged on this device, newest first.")

    with card("History", suffix=f"{data['entry_count']} entries"):
        if data["history_df"].empty:
            st.info("No reports logged yet.")
        else:
            st.dataframe(data["history_df"], use_container_width=True, hide_index=True)

    export_col, reset_col = st.columns(2)
    with export_col:
        st.download_button(
            "Excel Export",
            data=build_csv(state.logs),
            file_name=export_filename(product_name=get_settings().product_name),
            mime="text/csv",
            icon=":material/download:",
            use_container_width=True,
        )
    with reset_col:
        if st.button("Clear local logs", icon=":material/delete:", use_container_width=True):
            on_reset()


__all__ = ["render_page"]
