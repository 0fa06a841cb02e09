"""Tests for AI portfolio insight generation."""

from __future__ import annotations

import threading
from types import SimpleNamespace
from typing import cast

import httpx
import pytest
from openai import APIConnectionError, OpenAI

from core.ai import (
    FALLBACK_INSIGHT,
    InsightError,
    InsightRunner,
    build_insight_request,
    generate_portfolio_insights,
    request_portfolio_insights,
)


class DummyClient:
    def __init__(self, content: str | None = "Office Sale leads.", error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict[str, object]] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs: object):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))])


def _factory(client: DummyClient):
    return lambda: cast(OpenAI, client)


def test_build_insight_request_summarises_logged_categories(sample_logs, settings):
    request = build_insight_request(sample_logs, settings)

    assert request.totals == {"Office Sale": 9, "Showroom Lease": 0, "Apartment Rent": 7, "Duplex Rent": 1}
    assert request.entry_count == 6
    assert request.model == "gpt-4o-mini"


def test_injected_client_receives_prompt(sample_logs, settings):
    client = DummyClient(content="  Office Sale leads.  \n")

    result = generate_portfolio_insights(sample_logs, client_factory=_factory(client), settings=settings)

    assert result == "Office Sale leads."
    assert len(client.calls) == 1
    prompt = client.calls[0]["messages"][0]["content"]
    assert '"Office Sale": 9' in prompt
    assert "Total Log Entries: 6" in prompt


def test_provider_error_returns_fallback(sample_logs, settings):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    client = DummyClient(error=APIConnectionError(request=request))

    with pytest.raises(InsightError):
        request_portfolio_insights(sample_logs, client_factory=_factory(client), settings=settings)

    assert generate_portfolio_insights(sample_logs, client_factory=_factory(client), settings=settings) == FALLBACK_INSIGHT


def test_unexpected_error_returns_fallback(sample_logs, settings):
    client = DummyClient(error=RuntimeError("boom"))

    assert generate_portfolio_insights(sample_logs, client_factory=_factory(client), settings=settings) == FALLBACK_INSIGHT


def test_empty_response_returns_fallback(sample_logs, settings):
    client = DummyClient(content="   ")

    assert generate_portfolio_insights(sample_logs, client_factory=_factory(client), settings=settings) == FALLBACK_INSIGHT


def test_missing_api_key_returns_fallback(sample_logs):
    result = generate_portfolio_insights(sample_logs)

    assert result == FALLBACK_INSIGHT
    assert result


def test_runner_does_not_retrigger_while_pending(sample_logs):
    release = threading.Event()
    calls: list[int] = []

    def generate(logs):
        calls.append(len(logs))
        release.wait(timeout=5)
        return "done"

    runner = InsightRunner(generate)
    try:
        assert runner.start(sample_logs) is True
        assert runner.pending
        assert runner.start(sample_logs) is False
        assert runner.poll() is None

        release.set()
        assert runner.wait(timeout=5) == "done"
        assert not runner.pending
        assert runner.result == "done"
        assert calls == [6]
    finally:
        release.set()


def test_runner_recovers_from_failing_generator(sample_logs):
    def generate(logs):
        raise RuntimeError("boom")

    runner = InsightRunner(generate)
    runner.start(sample_logs)

    assert runner.wait(timeout=5) == FALLBACK_INSIGHT


def test_runners_share_one_executor():
    first = InsightRunner(lambda logs: "a")
    second = InsightRunner(lambda logs: "b")

    assert first._executor is second._executor


def test_result_goes_stale_when_logs_change(sample_logs):
    runner = InsightRunner(lambda logs: "summary")

    assert runner.is_stale(0) is False
    runner.start(sample_logs, version=3)
    assert runner.wait(timeout=5) == "summary"

    assert runner.result_version == 3
    assert runner.is_stale(3) is False
    assert runner.is_stale(4) is True
