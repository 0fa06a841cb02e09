"""Shared Plotly theme tokens for EstatePulse visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#64748B"
    label_font: str = "Inter"
    label_size: int = 11
    grid_color: str = "#F1F5F9"
    neutral_grey: str = "#94A3B8"
    fallback_bar: str = "#CBD5E1"


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
