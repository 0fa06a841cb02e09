"""Prompt templates and loaders for EstatePulse."""

from .base import PromptTemplate, load_prompt

__all__ = ["PromptTemplate", "load_prompt"]
