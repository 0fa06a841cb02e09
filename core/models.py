"""Shared data model definitions for the EstatePulse dashboard."""

from __future__ import annotations

from enum import Enum
from typing import TypedDict, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    OFFICE_SALE = "Office Sale"
    OFFICE_LEASE = "Office Lease"
    SHOWROOM_SALE = "Showroom Sale"
    SHOWROOM_LEASE = "Showroom Lease"
    APARTMENT_SALE = "Apartment Sale"
    APARTMENT_RENT = "Apartment Rent"
    BUNGLOW_SALE = "Bunglow Sale"
    BUNGLOW_RENT = "Bunglow Rent"
    PENTHOUSE_RENT = "Penthouse Rent"
    DUPLEX_RENT = "Duplex Rent"


class Source(str, Enum):
    OWNER = "Owner"
    BROKER = "Broker"


# Canonical order used for every per-category mapping and chart series.
CATEGORIES: tuple[Category, ...] = tuple(Category)
SOURCES: tuple[Source, ...] = tuple(Source)


class InventoryLogEntry(BaseModel):
    """One reported count of a category from a source on a date.

    Serialised with the `recordedBy` alias so persisted blobs keep their
    original field names.
    """

    id: str
    date: str
    category: Category
    source: Source
    count: int = Field(ge=0, strict=True)
    recorded_by: str = Field(alias="recordedBy")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


LogCollection = tuple[InventoryLogEntry, ...]


class CategoryTotal(TypedDict):
    category: str
    count: int


# {"date": "2024-05-20", "Office Sale": 290, ...}
DailyAggregationRow = dict[str, Union[str, int]]


class SourceSplit(TypedDict):
    owner: int
    broker: int
    owner_share: float
    broker_share: float


class DashboardData(TypedDict):
    totals_by_category: dict[Category, int]
    owner_totals: list[CategoryTotal]
    broker_totals: list[CategoryTotal]
    owner_daily: list[DailyAggregationRow]
    broker_daily: list[DailyAggregationRow]
    owner_daily_df: pd.DataFrame
    broker_daily_df: pd.DataFrame
    history_df: pd.DataFrame
    total_units: int
    entry_count: int
    source_split: SourceSplit


__all__ = [
    "Category",
    "Source",
    "CATEGORIES",
    "SOURCES",
    "InventoryLogEntry",
    "LogCollection",
    "CategoryTotal",
    "DailyAggregationRow",
    "SourceSplit",
    "DashboardData",
]
