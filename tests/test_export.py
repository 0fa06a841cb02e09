"""Tests for the CSV export."""

from __future__ import annotations

from datetime import date

from core.export import build_csv, export_filename
from core.models import Category, Source


def test_single_entry_csv_matches_expected_text(make_entry):
    logs = (make_entry("a", "2024-06-01", Category.OFFICE_SALE, Source.OWNER, 5, "Jane"),)

    assert build_csv(logs) == "Date,Category,Source,Count,RecordedBy\n2024-06-01,Office Sale,Owner,5,Jane"


def test_csv_keeps_collection_order(sample_logs):
    lines = build_csv(sample_logs).split("\n")

    assert lines[0] == "Date,Category,Source,Count,RecordedBy"
    assert len(lines) == len(sample_logs) + 1
    assert lines[1] == "2024-06-03,Office Sale,Broker,4,Omar"
    assert lines[-1] == "2024-06-01,Showroom Lease,Owner,0,Jane"


def test_empty_collection_exports_header_only():
    assert build_csv(()) == "Date,Category,Source,Count,RecordedBy"


def test_names_with_delimiters_are_quoted(make_entry):
    logs = (make_entry("a", "2024-06-01", Category.DUPLEX_RENT, Source.BROKER, 1, 'Doe, "JD"'),)

    assert build_csv(logs).split("\n")[1] == '2024-06-01,Duplex Rent,Broker,1,"Doe, ""JD"""'


def test_export_filename_is_date_stamped():
    assert export_filename(date(2024, 6, 1)) == "EstatePulse_Report_2024-06-01.csv"
    assert export_filename(date(2024, 6, 1), product_name="Acme") == "Acme_Report_2024-06-01.csv"
