"""CSV export of the inventory log history."""

from __future__ import annotations

from datetime import date
from typing import Iterable

import pandas as pd

from config import DEFAULT_PRODUCT_NAME
from core.models import InventoryLogEntry

__all__ = ["CSV_HEADERS", "build_csv", "export_filename"]

CSV_HEADERS: tuple[str, ...] = ("Date", "Category", "Source", "Count", "RecordedBy")


def build_csv(logs: Iterable[InventoryLogEntry]) -> str:
    """Render the collection as CSV in its current (newest-first) order.

    Values are quoted only when they contain the delimiter, a quote or a line
    break, so ordinary rows come out as bare comma-joined fields.
    """

    rows = [
        (entry.date, entry.category.value, entry.source.value, entry.count, entry.recorded_by)
        for entry in logs
    ]
    frame = pd.DataFrame(rows, columns=list(CSV_HEADERS))
    text = frame.to_csv(index=False, lineterminator="\n")
    return text.removesuffix("\n")


def export_filename(today: date | None = None, product_name: str = DEFAULT_PRODUCT_NAME) -> str:
    stamp = (today or date.today()).isoformat()
    return f"{product_name}_Report_{stamp}.csv"
