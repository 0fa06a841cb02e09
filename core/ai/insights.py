"""AI-generated portfolio summaries for EstatePulse."""

from __future__ import annotations

import json
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from openai import APIError, OpenAI

from config import Settings, get_settings
from core.models import CATEGORIES, InventoryLogEntry, LogCollection
from prompts import load_prompt

PROMPT_PORTFOLIO = "portfolio"
MAX_OUTPUT_TOKENS = 300
FALLBACK_INSIGHT = "Unable to generate insights at this time. Please check your data or connection."

__all__ = [
    "FALLBACK_INSIGHT",
    "InsightError",
    "InsightRequest",
    "InsightRunner",
    "build_insight_request",
    "generate_portfolio_insights",
    "request_portfolio_insights",
]

logger = logging.getLogger(__name__)


class InsightError(RuntimeError):
    """Raised when the portfolio insight cannot be generated."""


@dataclass(frozen=True, slots=True)
class InsightRequest:
    totals: Mapping[str, int]
    entry_count: int
    model: str


def _summarise_totals(logs: Iterable[InventoryLogEntry]) -> dict[str, int]:
    sums: dict[str, int] = {}
    for entry in logs:
        label = entry.category.value
        sums[label] = sums.get(label, 0) + entry.count
    # Only categories that have been logged, in canonical order.
    return {category.value: sums[category.value] for category in CATEGORIES if category.value in sums}


def build_insight_request(logs: LogCollection, settings: Settings | None = None) -> InsightRequest:
    settings = settings or get_settings()
    return InsightRequest(
        totals=_summarise_totals(logs),
        entry_count=len(logs),
        model=settings.openai_model,
    )


def _resolve_openai_client(settings: Settings) -> OpenAI:
    if not settings.openai_api_key:
        raise InsightError(
            "Missing OpenAI API key. Add it to .streamlit/secrets.toml under [openai]."
        )
    return OpenAI(**settings.openai_client_kwargs)


def request_portfolio_insights(
    logs: LogCollection,
    *,
    client_factory: Callable[[], OpenAI] | None = None,
    settings: Settings | None = None,
) -> str:
    """Ask the provider for a short summary; raises :class:`InsightError` on failure."""

    settings = settings or get_settings()
    request = build_insight_request(logs, settings)
    client = client_factory() if client_factory else _resolve_openai_client(settings)

    prompt = load_prompt(PROMPT_PORTFOLIO).render(
        data_summary=json.dumps(dict(request.totals), ensure_ascii=False),
        entry_count=request.entry_count,
    )

    try:
        response = client.chat.completions.create(
            model=request.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=MAX_OUTPUT_TOKENS,
            temperature=0.7,
            top_p=0.9,
        )
    except APIError as exc:
        raise InsightError(f"OpenAI API error: {exc}") from exc

    try:
        text = response.choices[0].message.content or ""
    except (AttributeError, IndexError) as exc:  # pragma: no cover - unexpected SDK output
        raise InsightError("Unexpected response format from OpenAI API") from exc

    text = text.strip()
    if not text:
        raise InsightError("OpenAI response was empty")
    return text


def generate_portfolio_insights(
    logs: LogCollection,
    *,
    client_factory: Callable[[], OpenAI] | None = None,
    settings: Settings | None = None,
) -> str:
    """Return the generated summary, or :data:`FALLBACK_INSIGHT` on any failure."""

    try:
        return request_portfolio_insights(logs, client_factory=client_factory, settings=settings)
    except InsightError as exc:
        logger.warning("Portfolio insight unavailable: %s", exc)
    except Exception:
        logger.exception("Portfolio insight generation failed")
    return FALLBACK_INSIGHT


INSIGHT_WORKERS = 4

# Shared by every session; each runner still allows only one request in flight.
_EXECUTOR = ThreadPoolExecutor(max_workers=INSIGHT_WORKERS, thread_name_prefix="insights")


class InsightRunner:
    """Runs one insight request at a time off the UI thread.

    The collection version a request was started for travels with its result
    so callers can tell when the logs have changed since.
    """

    def __init__(
        self,
        generate: Callable[[LogCollection], str] = generate_portfolio_insights,
        executor: Executor | None = None,
    ) -> None:
        self._generate = generate
        self._executor = executor or _EXECUTOR
        self._future: Future[str] | None = None
        self._pending_version: int | None = None
        self.result: str | None = None
        self.result_version: int | None = None

    @property
    def pending(self) -> bool:
        return self._future is not None and not self._future.done()

    def start(self, logs: LogCollection, version: int = 0) -> bool:
        if self.pending:
            return False
        self._pending_version = version
        self._future = self._executor.submit(self._generate, logs)
        return True

    def poll(self) -> str | None:
        """Collect a finished result, or ``None`` while nothing new is ready."""

        if self._future is None or not self._future.done():
            return None
        future, self._future = self._future, None
        try:
            self.result = future.result()
        except Exception:
            logger.exception("Insight worker failed")
            self.result = FALLBACK_INSIGHT
        self.result_version = self._pending_version
        return self.result

    def wait(self, timeout: float | None = None) -> str | None:
        if self._future is not None:
            self._future.exception(timeout=timeout)
        return self.poll()

    def is_stale(self, version: int) -> bool:
        return self.result is not None and self.result_version != version
