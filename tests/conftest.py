"""Shared fixtures for the EstatePulse test suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import Settings, get_settings
from core.models import Category, InventoryLogEntry, Source
from core.storage import LocalStore


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch, tmp_path):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("ESTATEPULSE_DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(openai_api_key="sk-test", data_dir=tmp_path / "data")


@pytest.fixture()
def store(tmp_path) -> LocalStore:
    return LocalStore(tmp_path / "store")


def _make_entry(
    entry_id: str,
    date: str,
    category: Category,
    source: Source,
    count: int,
    recorded_by: str = "Jane",
) -> InventoryLogEntry:
    return InventoryLogEntry(
        id=entry_id,
        date=date,
        category=category,
        source=source,
        count=count,
        recorded_by=recorded_by,
    )


@pytest.fixture()
def make_entry():
    return _make_entry


@pytest.fixture()
def sample_logs() -> tuple[InventoryLogEntry, ...]:
    # Newest first, as the collection is stored.
    return (
        _make_entry("e6", "2024-06-03", Category.OFFICE_SALE, Source.BROKER, 4, "Omar"),
        _make_entry("e5", "2024-06-01", Category.OFFICE_SALE, Source.OWNER, 2),
        _make_entry("e4", "2024-06-01", Category.OFFICE_SALE, Source.OWNER, 3),
        _make_entry("e3", "2024-06-02", Category.APARTMENT_RENT, Source.OWNER, 7),
        _make_entry("e2", "2024-05-30", Category.DUPLEX_RENT, Source.BROKER, 1, "Omar"),
        _make_entry("e1", "2024-06-01", Category.SHOWROOM_LEASE, Source.OWNER, 0),
    )
