"""Smoke tests for the Plotly chart builders."""

from __future__ import annotations

from core.aggregation import daily_frame, totals_by_source
from core.models import Source
from visualization import build_daily_chart, build_totals_chart


def test_totals_chart_has_one_bar_per_category(sample_logs):
    fig = build_totals_chart(totals_by_source(sample_logs, Source.OWNER))

    assert len(fig.data) == 1
    assert list(fig.data[0].y)[0] == "Office Sale"
    assert len(fig.data[0].x) == 10


def test_totals_chart_without_data_shows_message():
    fig = build_totals_chart(totals_by_source((), Source.BROKER))

    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text.startswith("No inventory")


def test_daily_chart_plots_only_active_categories(sample_logs):
    fig = build_daily_chart(daily_frame(sample_logs, Source.OWNER))

    assert [trace.name for trace in fig.data] == ["Office Sale", "Apartment Rent"]
    assert fig.layout.barmode == "stack"


def test_daily_chart_without_data_shows_message():
    fig = build_daily_chart(daily_frame((), Source.OWNER))

    assert len(fig.data) == 0
