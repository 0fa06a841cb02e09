"""Analytics dashboard page layout."""

from __future__ import annotations

import streamlit as st

from app.layout import card
from core import DashboardData
from visualization import build_daily_chart, build_totals_chart


def _render_kpis(data: DashboardData) -> None:
    split = data["source_split"]
    cols = st.columns(4)
    cols[0].metric("Total units", f"{data['total_units']:,}")
    cols[1].metric("Owner direct", f"{split['owner']:,}", f"{split['owner_share']:.0%} of volume", delta_color="off")
    cols[2].metric("Broker network", f"{split['broker']:,}", f"{split['broker_share']:.0%} of volume", delta_color="off")
    cols[3].metric("Log entries", f"{data['entry_count']:,}")


def render_page(data: DashboardData) -> None:
    """Render the analytics page."""

    st.title("Analytics")
    st.caption("Category totals and daily activity by source.")
    _render_kpis(data)

    owner_col, broker_col = st.columns(2, gap="medium")
    with owner_col:
        with card("Owner inventory", suffix="All time"):
            st.plotly_chart(build_totals_chart(data["owner_totals"]), use_container_width=True, key="owner-totals")
    with broker_col:
        with card("Broker inventory", suffix="All time"):
            st.plotly_chart(build_totals_chart(data["broker_totals"]), use_container_width=True, key="broker-totals")

    with card("Owner daily reports", suffix="Per category"):
        st.plotly_chart(build_daily_chart(data["owner_daily_df"]), use_container_width=True, key="owner-daily")
    with card("Broker daily reports", suffix="Per category"):
        st.plotly_chart(build_daily_chart(data["broker_daily_df"]), use_container_width=True, key="broker-daily")


__all__ = ["render_page"]
