"""Prompt loading utilities for EstatePulse AI features."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

__all__ = ["PromptTemplate", "load_prompt"]


@dataclass(frozen=True)
class PromptTemplate:
    """A named prompt whose ``{placeholders}`` are filled by :meth:`render`."""

    name: str
    content: str

    def render(self, **values: Any) -> str:
        try:
            return self.content.format(**values)
        except KeyError as exc:
            raise KeyError(f"Prompt '{self.name}' needs a value for {exc}") from exc


PROMPTS_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=8)
def load_prompt(name: str) -> PromptTemplate:
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt template not found: {path}")

    return PromptTemplate(name=name, content=path.read_text(encoding="utf-8").strip())
