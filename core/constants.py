"""Fixed reference data: category colours and the baseline seed logs."""

from __future__ import annotations

from typing import Final, Mapping

from core.models import Category, InventoryLogEntry, LogCollection, Source

BASELINE_DATE: Final[str] = "2024-05-20"
BASELINE_RECORDED_BY: Final[str] = "System Baseline"
UNKNOWN_RECORDER: Final[str] = "Unknown"

CATEGORY_COLORS: Final[Mapping[Category, str]] = {
    Category.OFFICE_SALE: "#3b82f6",
    Category.OFFICE_LEASE: "#60a5fa",
    Category.SHOWROOM_SALE: "#10b981",
    Category.SHOWROOM_LEASE: "#34d399",
    Category.APARTMENT_SALE: "#f59e0b",
    Category.APARTMENT_RENT: "#fbbf24",
    Category.BUNGLOW_SALE: "#8b5cf6",
    Category.BUNGLOW_RENT: "#a78bfa",
    Category.PENTHOUSE_RENT: "#ec4899",
    Category.DUPLEX_RENT: "#f43f5e",
}

# Seed tables keep the order the team first reported them in; the position
# becomes part of the baseline id.
_OWNER_BASELINE: Final[tuple[tuple[Category, int], ...]] = (
    (Category.SHOWROOM_SALE, 305),
    (Category.SHOWROOM_LEASE, 1274),
    (Category.OFFICE_SALE, 290),
    (Category.OFFICE_LEASE, 487),
    (Category.BUNGLOW_SALE, 247),
    (Category.BUNGLOW_RENT, 31),
    (Category.APARTMENT_SALE, 296),
    (Category.APARTMENT_RENT, 81),
    (Category.PENTHOUSE_RENT, 2),
    (Category.DUPLEX_RENT, 3),
)

_BROKER_BASELINE: Final[tuple[tuple[Category, int], ...]] = (
    (Category.SHOWROOM_SALE, 42),
    (Category.SHOWROOM_LEASE, 54),
    (Category.OFFICE_SALE, 76),
    (Category.OFFICE_LEASE, 147),
    (Category.BUNGLOW_SALE, 168),
    (Category.BUNGLOW_RENT, 27),
    (Category.APARTMENT_SALE, 137),
    (Category.APARTMENT_RENT, 147),
    (Category.PENTHOUSE_RENT, 5),
    (Category.DUPLEX_RENT, 0),
)


def baseline_logs() -> LogCollection:
    """Return a fresh copy of the baseline seed collection."""

    logs: list[InventoryLogEntry] = []
    for source, table in ((Source.OWNER, _OWNER_BASELINE), (Source.BROKER, _BROKER_BASELINE)):
        prefix = f"baseline-{source.value.lower()}"
        for index, (category, count) in enumerate(table):
            if count <= 0:
                continue
            logs.append(
                InventoryLogEntry(
                    id=f"{prefix}-{index}",
                    date=BASELINE_DATE,
                    category=category,
                    source=source,
                    count=count,
                    recorded_by=BASELINE_RECORDED_BY,
                )
            )
    return tuple(logs)


__all__ = [
    "BASELINE_DATE",
    "BASELINE_RECORDED_BY",
    "CATEGORY_COLORS",
    "UNKNOWN_RECORDER",
    "baseline_logs",
]
