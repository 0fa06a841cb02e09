"""Bulk entry building for new inventory reports."""

from __future__ import annotations

import secrets
import string
import time
from typing import Any, Callable, Mapping

from core.constants import UNKNOWN_RECORDER
from core.models import CATEGORIES, Category, InventoryLogEntry, LogCollection, Source

__all__ = [
    "adjust_count",
    "build_entries",
    "coerce_count",
    "counts_from_inputs",
    "empty_counts",
    "generate_entry_id",
]

_BASE36 = string.digits + string.ascii_lowercase
_RANDOM_SUFFIX_LENGTH = 11


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_entry_id() -> str:
    """Return a timestamp-prefixed identifier with a random base-36 suffix."""

    timestamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(_RANDOM_SUFFIX_LENGTH))
    return f"{timestamp}{suffix}"


def empty_counts() -> dict[Category, int]:
    return {category: 0 for category in CATEGORIES}


def coerce_count(value: Any) -> int:
    """Clamp raw form input to a non-negative integer; junk becomes zero."""

    if value is None or isinstance(value, bool):
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(number, 0)


def counts_from_inputs(values: Mapping[Category, Any]) -> dict[Category, int]:
    """Build a full per-category mapping from raw widget values, clamping each one."""

    return {category: coerce_count(values.get(category)) for category in CATEGORIES}


def adjust_count(counts: Mapping[Category, int], category: Category, delta: int) -> dict[Category, int]:
    """Return a copy of ``counts`` with ``category`` moved by ``delta``, floored at zero."""

    updated = counts_from_inputs(counts)
    category = Category(category)
    updated[category] = max(0, updated[category] + delta)
    return updated


def build_entries(
    counts: Mapping[Category, Any],
    *,
    date: str,
    source: Source,
    recorded_by: str | None,
    id_factory: Callable[[], str] = generate_entry_id,
) -> LogCollection:
    """Turn one bulk report into entries, one per category with a positive count.

    Categories missing from ``counts`` or reported as zero produce nothing, so
    an all-zero report yields an empty tuple.
    """

    attribution = (recorded_by or "").strip() or UNKNOWN_RECORDER
    source = Source(source)
    normalised = {Category(key): coerce_count(value) for key, value in counts.items()}

    entries: list[InventoryLogEntry] = []
    for category in CATEGORIES:
        count = normalised.get(category, 0)
        if count <= 0:
            continue
        entries.append(
            InventoryLogEntry(
                id=id_factory(),
                date=date,
                category=category,
                source=source,
                count=count,
                recorded_by=attribution,
            )
        )
    return tuple(entries)
