"""Explicit application state for a single EstatePulse session."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from core.constants import baseline_logs
from core.entries import build_entries
from core.models import Category, DashboardData, LogCollection, Source
from core.storage import LocalStore
from core.summary_service import prepare_dashboard_data

__all__ = ["AppState"]

logger = logging.getLogger(__name__)


class AppState:
    """Owns the log collection and active user, persisting after every change.

    ``version`` increases on each mutation of the collection and is the only
    key used to invalidate the cached dashboard views.
    """

    def __init__(self, store: LocalStore, logs: LogCollection, user: str | None = None) -> None:
        self.store = store
        self._logs = logs
        self._user = user
        self.version = 0
        self._dashboard: DashboardData | None = None
        self._dashboard_version = -1

    @classmethod
    def load(cls, store: LocalStore) -> "AppState":
        state = cls(store, store.load_logs(), store.load_user())
        logger.info("Loaded %d log entries", len(state.logs))
        return state

    @property
    def logs(self) -> LogCollection:
        return self._logs

    @property
    def user(self) -> str | None:
        return self._user

    def login(self, name: str) -> bool:
        name = (name or "").strip()
        if not name:
            return False
        self._user = name
        self.store.save_user(name)
        logger.info("User %s signed in", name)
        return True

    def logout(self) -> None:
        if self._user:
            logger.info("User %s signed out", self._user)
        self._user = None
        self.store.save_user(None)

    def _replace_logs(self, logs: LogCollection) -> None:
        self._logs = logs
        self.version += 1
        self.store.save_logs(logs)

    def submit(
        self,
        counts: Mapping[Category, Any],
        *,
        date: str,
        source: Source,
    ) -> int:
        """Prepend one bulk report; returns how many entries were added."""

        entries = build_entries(counts, date=date, source=source, recorded_by=self._user)
        if not entries:
            return 0
        self._replace_logs(entries + self._logs)
        logger.info(
            "Logged %d %s entries for %s by %s",
            len(entries),
            Source(source).value,
            date,
            entries[0].recorded_by,
        )
        return len(entries)

    def reset(self, confirmed: bool = False) -> bool:
        """Replace every entry with the baseline seed; no-op unless confirmed."""

        if not confirmed:
            return False
        self._replace_logs(baseline_logs())
        logger.warning("Log collection reset to baseline by %s", self._user or "unknown user")
        return True

    def dashboard(self) -> DashboardData:
        if self._dashboard is None or self._dashboard_version != self.version:
            self._dashboard = prepare_dashboard_data(self._logs)
            self._dashboard_version = self.version
        return self._dashboard
