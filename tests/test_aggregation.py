"""Unit tests for the aggregation helpers."""

from __future__ import annotations

import pytest

from core.aggregation import (
    daily_aggregation,
    daily_frame,
    source_split,
    total_count,
    totals_by_category,
    totals_by_source,
)
from core.constants import baseline_logs
from core.models import CATEGORIES, Category, Source


def test_totals_by_category_covers_every_category(sample_logs):
    totals = totals_by_category(sample_logs)

    assert list(totals) == list(CATEGORIES)
    assert totals[Category.OFFICE_SALE] == 9
    assert totals[Category.APARTMENT_RENT] == 7
    assert totals[Category.DUPLEX_RENT] == 1
    assert totals[Category.SHOWROOM_LEASE] == 0
    assert totals[Category.PENTHOUSE_RENT] == 0


def test_source_totals_add_up_to_overall_totals(sample_logs):
    for logs in (sample_logs, baseline_logs(), ()):
        overall = totals_by_category(logs)
        owner = {row["category"]: row["count"] for row in totals_by_source(logs, Source.OWNER)}
        broker = {row["category"]: row["count"] for row in totals_by_source(logs, Source.BROKER)}
        for category in CATEGORIES:
            assert overall[category] == owner[category.value] + broker[category.value]


def test_totals_by_source_keeps_canonical_order(sample_logs):
    owner = totals_by_source(sample_logs, Source.OWNER)

    assert [row["category"] for row in owner] == [category.value for category in CATEGORIES]
    assert owner[0] == {"category": "Office Sale", "count": 5}
    assert all(isinstance(row["count"], int) for row in owner)


def test_daily_aggregation_groups_and_sorts_by_date(sample_logs):
    owner_rows = daily_aggregation(sample_logs, Source.OWNER)

    assert [row["date"] for row in owner_rows] == ["2024-06-01", "2024-06-02"]
    first, second = owner_rows
    assert first["Office Sale"] == 5
    assert first["Showroom Lease"] == 0
    assert second["Apartment Rent"] == 7
    assert second["Office Sale"] == 0

    broker_dates = [row["date"] for row in daily_aggregation(sample_logs, Source.BROKER)]
    assert broker_dates == ["2024-05-30", "2024-06-03"]


def test_daily_aggregation_has_unique_ascending_dates(sample_logs):
    logs = sample_logs + baseline_logs()
    for source in (Source.OWNER, Source.BROKER):
        dates = [row["date"] for row in daily_aggregation(logs, source)]
        assert dates == sorted(dates)
        assert len(dates) == len(set(dates))


def test_aggregation_ignores_input_order(sample_logs):
    reversed_logs = tuple(reversed(sample_logs))

    assert totals_by_category(reversed_logs) == totals_by_category(sample_logs)
    assert daily_aggregation(reversed_logs, Source.OWNER) == daily_aggregation(sample_logs, Source.OWNER)


def test_empty_collection_yields_zero_totals_and_no_rows():
    totals = totals_by_category(())

    assert len(totals) == len(CATEGORIES)
    assert set(totals.values()) == {0}
    assert daily_aggregation((), Source.OWNER) == []
    assert daily_frame((), Source.BROKER).empty
    assert total_count(()) == 0


def test_source_split_shares(sample_logs):
    split = source_split(sample_logs)

    assert split["owner"] == 12
    assert split["broker"] == 5
    assert split["owner_share"] + split["broker_share"] == pytest.approx(1.0)
    assert source_split(())["owner_share"] == 0.0


def test_baseline_totals():
    logs = baseline_logs()
    totals = totals_by_category(logs)

    assert len(logs) == 19
    assert totals[Category.OFFICE_SALE] == 366
    assert totals[Category.SHOWROOM_LEASE] == 1328
    assert totals[Category.DUPLEX_RENT] == 3
    assert [row["date"] for row in daily_aggregation(logs, Source.OWNER)] == ["2024-05-20"]
