"""Core domain package for the EstatePulse application."""

from .ai import FALLBACK_INSIGHT, InsightError, InsightRunner, generate_portfolio_insights
from .aggregation import daily_aggregation, totals_by_category, totals_by_source
from .constants import CATEGORY_COLORS, baseline_logs
from .entries import (
    adjust_count,
    build_entries,
    coerce_count,
    counts_from_inputs,
    empty_counts,
    generate_entry_id,
)
from .export import build_csv, export_filename
from .models import (
    CATEGORIES,
    SOURCES,
    Category,
    CategoryTotal,
    DailyAggregationRow,
    DashboardData,
    InventoryLogEntry,
    LogCollection,
    Source,
)
from .state import AppState
from .storage import LocalStore
from .summary_service import prepare_dashboard_data

__all__ = [
    "AppState",
    "CATEGORIES",
    "CATEGORY_COLORS",
    "Category",
    "CategoryTotal",
    "DailyAggregationRow",
    "DashboardData",
    "FALLBACK_INSIGHT",
    "InsightError",
    "InsightRunner",
    "InventoryLogEntry",
    "LocalStore",
    "LogCollection",
    "SOURCES",
    "Source",
    "adjust_count",
    "baseline_logs",
    "build_csv",
    "build_entries",
    "coerce_count",
    "counts_from_inputs",
    "daily_aggregation",
    "empty_counts",
    "export_filename",
    "generate_entry_id",
    "generate_portfolio_insights",
    "prepare_dashboard_data",
    "totals_by_category",
    "totals_by_source",
]
