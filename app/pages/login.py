"""Sign-in screen asking for a display name."""

from __future__ import annotations

import streamlit as st

from core import AppState


def render_page(state: AppState) -> None:
    _, centre, _ = st.columns([1, 2, 1])
    with centre:
        st.markdown("<div class='ep-brand'>EstatePulse</div>", unsafe_allow_html=True)
        st.caption("Inventory logging for the team")
        with st.form("login"):
            name = st.text_input("Your name", placeholder="Full Name")
            submitted = st.form_submit_button("Access Dashboard", type="primary", use_container_width=True)
        st.caption("Data is stored locally on this device.")

    if submitted:
        if state.login(name):
            st.rerun()
        else:
            st.warning("Enter your name to continue.")


__all__ = ["render_page"]
