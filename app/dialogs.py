"""Modal dialogs for logging a report and resetting the collection."""

from __future__ import annotations

from datetime import date

import streamlit as st

from core import CATEGORIES, SOURCES, AppState, Category, adjust_count, counts_from_inputs

_RESULT_KEY = "entry_result"


def _input_key(category: Category) -> str:
    return f"entry-count-{category.name}"


def _pending_counts() -> dict[Category, int]:
    return counts_from_inputs({category: st.session_state.get(_input_key(category)) for category in CATEGORIES})


def _clear_counts() -> None:
    for category in CATEGORIES:
        st.session_state[_input_key(category)] = 0


def _step(category: Category, delta: int) -> None:
    st.session_state[_input_key(category)] = adjust_count(_pending_counts(), category, delta)[category]


def _submit(state: AppState) -> None:
    entry_date = st.session_state.get("entry_date") or date.today()
    source = st.session_state.get("entry_source") or SOURCES[0]
    added = state.submit(_pending_counts(), date=entry_date.isoformat(), source=source)
    if added:
        _clear_counts()
    st.session_state[_RESULT_KEY] = added


@st.dialog("Log New Report", width="large")
def new_report_dialog(state: AppState) -> None:
    result = st.session_state.pop(_RESULT_KEY, None)
    if result:
        st.rerun()

    date_col, source_col = st.columns(2)
    date_col.date_input("Date", value=date.today(), key="entry_date")
    source_col.segmented_control(
        "Source",
        SOURCES,
        default=SOURCES[0],
        format_func=lambda item: item.value,
        key="entry_source",
    )

    # Widgets read back through counts_from_inputs, so typed values are clamped too.
    counts = _pending_counts()
    for category in CATEGORIES:
        key = _input_key(category)
        st.session_state[key] = counts[category]
        label_col, minus_col, value_col, plus_col = st.columns([4, 1, 2, 1], vertical_alignment="center")
        label_col.markdown(f"**{category.value}**")
        minus_col.button("−", key=f"dec-{category.name}", on_click=_step, args=(category, -1))
        value_col.number_input(
            category.value,
            min_value=0,
            step=1,
            key=key,
            label_visibility="collapsed",
        )
        plus_col.button("+", key=f"inc-{category.name}", on_click=_step, args=(category, 1))

    st.button("Submit report", type="primary", use_container_width=True, on_click=_submit, args=(state,))
    if result == 0:
        st.caption("Add at least one unit before submitting.")


@st.dialog("Clear local logs")
def reset_dialog(state: AppState) -> None:
    st.write("Are you sure you want to clear all local logs? This cannot be undone.")
    confirm_col, cancel_col = st.columns(2)
    if confirm_col.button("Clear logs", type="primary", use_container_width=True):
        state.reset(confirmed=True)
        st.rerun()
    if cancel_col.button("Cancel", use_container_width=True):
        st.rerun()


__all__ = ["new_report_dialog", "reset_dialog"]
