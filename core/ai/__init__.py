"""AI-focused helpers for EstatePulse."""

from .insights import (
    FALLBACK_INSIGHT,
    InsightError,
    InsightRequest,
    InsightRunner,
    build_insight_request,
    generate_portfolio_insights,
    request_portfolio_insights,
)

__all__ = [
    "FALLBACK_INSIGHT",
    "InsightError",
    "InsightRequest",
    "InsightRunner",
    "build_insight_request",
    "generate_portfolio_insights",
    "request_portfolio_insights",
]
