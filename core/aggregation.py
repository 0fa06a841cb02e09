"""Aggregations over the inventory log collection.

Every helper is a pure function of the logs it receives: the order of the
input never changes a result and nothing is cached here. Caching happens one
level up, keyed by the application state's version counter.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from core.models import (
    CATEGORIES,
    Category,
    CategoryTotal,
    DailyAggregationRow,
    InventoryLogEntry,
    Source,
    SourceSplit,
)

__all__ = [
    "logs_to_frame",
    "totals_by_category",
    "totals_by_source",
    "daily_aggregation",
    "daily_frame",
    "total_count",
    "source_split",
]

_COLUMNS = ["id", "date", "category", "source", "count", "recorded_by"]


def logs_to_frame(logs: Iterable[InventoryLogEntry]) -> pd.DataFrame:
    """Flatten entries into a dataframe with plain string labels."""

    records = [
        {
            "id": entry.id,
            "date": entry.date,
            "category": entry.category.value,
            "source": entry.source.value,
            "count": entry.count,
            "recorded_by": entry.recorded_by,
        }
        for entry in logs
    ]
    frame = pd.DataFrame(records, columns=_COLUMNS)
    frame["count"] = frame["count"].astype("int64")
    return frame


def _category_sums(frame: pd.DataFrame) -> pd.Series:
    labels = [category.value for category in CATEGORIES]
    return frame.groupby("category")["count"].sum().reindex(labels, fill_value=0)


def totals_by_category(logs: Iterable[InventoryLogEntry]) -> dict[Category, int]:
    sums = _category_sums(logs_to_frame(logs))
    return {category: int(sums[category.value]) for category in CATEGORIES}


def totals_by_source(logs: Iterable[InventoryLogEntry], source: Source) -> list[CategoryTotal]:
    frame = logs_to_frame(logs)
    sums = _category_sums(frame[frame["source"] == Source(source).value])
    return [{"category": category.value, "count": int(sums[category.value])} for category in CATEGORIES]


def daily_frame(logs: Iterable[InventoryLogEntry], source: Source) -> pd.DataFrame:
    """Return one row per active date with a column per category, oldest first."""

    frame = logs_to_frame(logs)
    frame = frame[frame["source"] == Source(source).value]
    labels = [category.value for category in CATEGORIES]
    if frame.empty:
        return pd.DataFrame(columns=["date", *labels])

    pivot = frame.pivot_table(
        index="date",
        columns="category",
        values="count",
        aggfunc="sum",
        fill_value=0,
    )
    pivot = pivot.reindex(columns=labels, fill_value=0).sort_index()
    pivot.columns.name = None
    return pivot.astype("int64").reset_index()


def daily_aggregation(
    logs: Iterable[InventoryLogEntry], source: Source
) -> list[DailyAggregationRow]:
    rows: list[DailyAggregationRow] = []
    for record in daily_frame(logs, source).to_dict(orient="records"):
        row: DailyAggregationRow = {"date": str(record["date"])}
        for category in CATEGORIES:
            row[category.value] = int(record[category.value])
        rows.append(row)
    return rows


def total_count(logs: Iterable[InventoryLogEntry]) -> int:
    return sum(entry.count for entry in logs)


def source_split(logs: Iterable[InventoryLogEntry]) -> SourceSplit:
    owner = 0
    broker = 0
    for entry in logs:
        if entry.source is Source.OWNER:
            owner += entry.count
        else:
            broker += entry.count

    total = owner + broker
    return {
        "owner": owner,
        "broker": broker,
        "owner_share": owner / total if total else 0.0,
        "broker_share": broker / total if total else 0.0,
    }
