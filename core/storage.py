"""Device-local key-value persistence for logs and the active user."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from pydantic import TypeAdapter, ValidationError

from core.constants import baseline_logs
from core.models import InventoryLogEntry, LogCollection

__all__ = ["LOGS_KEY", "USER_KEY", "LocalStore"]

LOGS_KEY: Final[str] = "estatepulse_inventory_logs"
USER_KEY: Final[str] = "estatepulse_active_user"

_LOGS_ADAPTER: Final = TypeAdapter(list[InventoryLogEntry])

logger = logging.getLogger(__name__)


class LocalStore:
    """Each key maps to one UTF-8 text file inside ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / key

    def get_bytes(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def get(self, key: str) -> str | None:
        raw = self.get_bytes(key)
        return None if raw is None else raw.decode("utf-8")

    def set(self, key: str, value: str | bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_name(f"{path.name}.tmp")
        if isinstance(value, bytes):
            tmp_path.write_bytes(value)
        else:
            tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def load_logs(self) -> LogCollection:
        """Return the persisted collection, or the baseline when absent or unreadable."""

        try:
            raw = self.get_bytes(LOGS_KEY)
            if raw is None:
                return baseline_logs()
            return tuple(_LOGS_ADAPTER.validate_json(raw))
        except (ValidationError, UnicodeDecodeError, RecursionError) as exc:
            logger.warning(
                "Persisted logs are unreadable (%s); restoring baseline data.", type(exc).__name__
            )
            return baseline_logs()

    def save_logs(self, logs: LogCollection) -> None:
        self.set(LOGS_KEY, _LOGS_ADAPTER.dump_json(list(logs), by_alias=True))
        logger.debug("Persisted %d log entries to %s", len(logs), self.directory)

    def load_user(self) -> str | None:
        try:
            name = self.get(USER_KEY)
        except UnicodeDecodeError:
            logger.warning("Stored display name is not valid UTF-8; signing out.")
            return None
        if name is None:
            return None
        return name.strip() or None

    def save_user(self, name: str | None) -> None:
        if name:
            self.set(USER_KEY, name)
        else:
            self.remove(USER_KEY)
