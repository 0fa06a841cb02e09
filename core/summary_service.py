"""Core logic for assembling EstatePulse dashboard views."""

from __future__ import annotations

import pandas as pd

from core.aggregation import (
    daily_aggregation,
    daily_frame,
    logs_to_frame,
    source_split,
    total_count,
    totals_by_category,
    totals_by_source,
)
from core.models import DashboardData, LogCollection, Source

__all__ = ["build_history_frame", "prepare_dashboard_data"]


def build_history_frame(logs: LogCollection) -> pd.DataFrame:
    frame = logs_to_frame(logs)
    return frame.rename(
        columns={
            "date": "Date",
            "category": "Category",
            "source": "Source",
            "count": "Count",
            "recorded_by": "Recorded by",
        }
    )[["Date", "Category", "Source", "Count", "Recorded by"]]


def prepare_dashboard_data(logs: LogCollection) -> DashboardData:
    return {
        "totals_by_category": totals_by_category(logs),
        "owner_totals": totals_by_source(logs, Source.OWNER),
        "broker_totals": totals_by_source(logs, Source.BROKER),
        "owner_daily": daily_aggregation(logs, Source.OWNER),
        "broker_daily": daily_aggregation(logs, Source.BROKER),
        "owner_daily_df": daily_frame(logs, Source.OWNER),
        "broker_daily_df": daily_frame(logs, Source.BROKER),
        "history_df": build_history_frame(logs),
        "total_units": total_count(logs),
        "entry_count": len(logs),
        "source_split": source_split(logs),
    }
