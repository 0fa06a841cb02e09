"""Shared layout primitives for the EstatePulse Streamlit app."""

from __future__ import annotations

import html
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterable

import streamlit as st

from core import AppState


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    icon: str


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("dashboard", "Analytics", ":material/dashboard:"),
    NavigationLink("history", "Audit Log", ":material/history:"),
    NavigationLink("insights", "AI Strategy", ":material/auto_awesome:"),
)


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 16px;
            --card-bg: #FFFFFF;
            --border: #E2E8F0;
            --shadow: 0 1px 2px rgba(15, 23, 42, 0.05), 0 1px 3px rgba(15, 23, 42, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F8FAFC;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2rem;
            padding-bottom: 4rem;
          }

          .ep-brand {
            font-size: 1.4rem;
            font-weight: 800;
            color: #4F46E5;
            margin-bottom: 0.25rem;
          }

          .ep-user {
            display: flex;
            align-items: center;
            gap: 0.6rem;
            font-weight: 600;
            color: #1E293B;
          }

          .ep-user__avatar {
            display: inline-flex;
            align-items: center;
            justify-content: center;
            width: 2rem;
            height: 2rem;
            border-radius: 999px;
            background: #EEF2FF;
            color: #4F46E5;
            font-weight: 800;
          }

          .ep-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .ep-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 20px;
            margin-bottom: var(--gap);
          }

          .ep-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 700;
            color: #0F172A;
            flex-wrap: wrap;
          }

          .ep-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #C7D2FE;
            background: #EEF2FF;
            color: #4338CA;
            white-space: nowrap;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable EstatePulse card."""

    chip_html = f'<span class="ep-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="ep-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="ep-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from session state or the query params."""

    valid = set(valid_pages)
    raw_page = st.session_state.get("active_page") or st.query_params.get("page", "dashboard")
    if isinstance(raw_page, list):
        raw_page = raw_page[0] if raw_page else "dashboard"

    page = raw_page if raw_page in valid else "dashboard"
    st.session_state["active_page"] = page
    if st.query_params.get("page") != page:
        st.query_params["page"] = page
    return page


def _select_page(slug: str) -> None:
    st.session_state["active_page"] = slug


def render_sidebar(
    state: AppState,
    active_page: str,
    on_new_report: Callable[[], None],
) -> None:
    """Render branding, the signed-in user, navigation and session actions."""

    user = html.escape(state.user or "")
    initial = user[:1].upper() or "?"

    with st.sidebar:
        st.markdown("<div class='ep-brand'>EstatePulse</div>", unsafe_allow_html=True)
        st.caption("Inventory logging for the team")

        for link in NAV_LINKS:
            st.button(
                link.label,
                key=f"nav-{link.slug}",
                icon=link.icon,
                type="primary" if link.slug == active_page else "secondary",
                use_container_width=True,
                on_click=_select_page,
                args=(link.slug,),
            )

        st.markdown("---")
        if st.button("Log New Report", icon=":material/add:", type="primary", use_container_width=True):
            on_new_report()

        st.markdown("---")
        st.markdown(
            f"<div class='ep-user'><span class='ep-user__avatar'>{initial}</span>{user}</div>",
            unsafe_allow_html=True,
        )
        if st.button("Sign out", icon=":material/logout:", use_container_width=True):
            state.logout()
            st.rerun()


__all__ = [
    "NavigationLink",
    "NAV_LINKS",
    "card",
    "determine_active_page",
    "inject_css",
    "render_sidebar",
]
