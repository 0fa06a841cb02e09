"""EstatePulse inventory dashboard."""

from __future__ import annotations

import streamlit as st

from app.dialogs import new_report_dialog, reset_dialog
from app.layout import NAV_LINKS, determine_active_page, inject_css, render_sidebar
from app.pages import (
    render_dashboard_page,
    render_history_page,
    render_insights_page,
    render_login_page,
)
from config import get_settings
from core import AppState, InsightRunner, LocalStore
from core.logger import setup_logger


def _app_state() -> AppState:
    """Return the session's state container, loading it from disk on first use."""

    if "app_state" not in st.session_state:
        store = LocalStore(get_settings().data_dir)
        st.session_state["app_state"] = AppState.load(store)
    return st.session_state["app_state"]


def _insight_runner() -> InsightRunner:
    if "insight_runner" not in st.session_state:
        st.session_state["insight_runner"] = InsightRunner()
    return st.session_state["insight_runner"]


def main() -> None:
    """Application entrypoint for the EstatePulse dashboard."""

    st.set_page_config(
        page_title="EstatePulse",
        page_icon="🏢",
        layout="wide",
    )
    setup_logger()
    inject_css()

    state = _app_state()
    if not state.user:
        render_login_page(state)
        return

    active_page = determine_active_page(link.slug for link in NAV_LINKS)
    render_sidebar(state, active_page, on_new_report=lambda: new_report_dialog(state))

    if active_page == "history":
        render_history_page(state, on_reset=lambda: reset_dialog(state))
    elif active_page == "insights":
        render_insights_page(state, _insight_runner())
    else:
        render_dashboard_page(state.dashboard())


if __name__ == "__main__":
    main()
