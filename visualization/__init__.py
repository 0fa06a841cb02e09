"""Visualization utilities for EstatePulse dashboards."""

from .charts import build_daily_chart, build_totals_chart
from .theme import theme_tokens

__all__ = [
    "build_daily_chart",
    "build_totals_chart",
    "theme_tokens",
]
