"""AI strategy page layout."""

from __future__ import annotations

import streamlit as st

from app.layout import card
from core import AppState, InsightRunner


@st.fragment(run_every=1.0)
def _await_insight(runner: InsightRunner) -> None:
    if runner.poll() is not None:
        st.rerun()
    st.caption("Analysing your portfolio…")


def render_page(state: AppState, runner: InsightRunner) -> None:
    """Render the AI strategy page."""

    st.title("AI Strategy")
    st.caption("A short summary of where the team's inventory volume sits.")

    if st.button(
        "Generate insights",
        icon=":material/auto_awesome:",
        type="primary",
        disabled=runner.pending,
    ):
        runner.start(state.logs, state.version)
        st.rerun()

    with card("Portfolio summary", suffix="AI summary"):
        if runner.pending:
            _await_insight(runner)
        elif runner.result:
            if runner.is_stale(state.version):
                st.warning("Out of date: reports have changed since this summary was generated.")
            st.markdown(runner.result)
        else:
            st.info("Generate insights to see a summary of the logged inventory.")


__all__ = ["render_page"]
