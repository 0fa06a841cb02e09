"""Application configuration utilities."""

from .settings import DEFAULT_OPENAI_MODEL, DEFAULT_PRODUCT_NAME, Settings, get_settings

__all__ = [
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_PRODUCT_NAME",
    "Settings",
    "get_settings",
]
