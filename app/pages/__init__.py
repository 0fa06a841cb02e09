"""Page modules for the EstatePulse Streamlit application."""

from .dashboard import render_page as render_dashboard_page
from .history import render_page as render_history_page
from .insights import render_page as render_insights_page
from .login import render_page as render_login_page

__all__ = [
    "render_dashboard_page",
    "render_history_page",
    "render_insights_page",
    "render_login_page",
]
