"""Plotly chart builders for the EstatePulse dashboard."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from core.constants import CATEGORY_COLORS
from core.models import CATEGORIES, Category, CategoryTotal

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_daily_chart",
    "build_totals_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _category_color(label: str) -> str:
    try:
        return CATEGORY_COLORS[Category(label)]
    except ValueError:
        return TOKENS.fallback_bar


def build_totals_chart(totals: Sequence[CategoryTotal]) -> go.Figure:
    """Horizontal bars of per-category totals, first category on top."""

    if not totals or all(row["count"] == 0 for row in totals):
        return _empty_plotly_figure("No inventory logged for this source yet.")

    labels = [row["category"] for row in totals]
    counts = [row["count"] for row in totals]

    fig = go.Figure(
        go.Bar(
            x=counts,
            y=labels,
            orientation="h",
            marker=dict(color=[_category_color(label) for label in labels]),
            hovertemplate="%{y}<br>%{x:,} units<extra></extra>",
        )
    )
    fig.update_layout(
        margin=dict(l=0, r=20, t=10, b=0),
        bargap=0.35,
        showlegend=False,
        xaxis=dict(visible=False),
        yaxis=dict(
            autorange="reversed",
            tickfont=dict(color=TOKENS.label_color, size=TOKENS.label_size, family=TOKENS.label_font),
        ),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_daily_chart(daily_df: pd.DataFrame) -> go.Figure:
    """Stacked daily bars, one trace per category, for days with activity only."""

    if daily_df.empty:
        return _empty_plotly_figure("No daily reports for this source yet.")

    fig = go.Figure()
    for category in CATEGORIES:
        label = category.value
        if label not in daily_df.columns or not daily_df[label].any():
            continue
        fig.add_trace(
            go.Bar(
                x=daily_df["date"],
                y=daily_df[label],
                name=label,
                marker=dict(color=CATEGORY_COLORS[category]),
                hovertemplate=f"{label}: %{{y:,}}<extra></extra>",
            )
        )

    fig.update_layout(
        barmode="stack",
        hovermode="x unified",
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(type="category", showgrid=False, tickfont=dict(color=TOKENS.label_color)),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.grid_color, zeroline=False),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
