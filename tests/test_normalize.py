from __future__ import annotations

import pytest

from feedback_intel.config import SAVE_HEADERS
from feedback_intel.data.mapping import MatchMode, resolve_columns
from feedback_intel.data.normalize import (
    format_price,
    normalize_date,
    normalize_price,
    normalize_row,
    record_to_row,
    records_from_rows,
)
from feedback_intel.data.parser import parse_delimited
from feedback_intel.data.schemas import FeedbackRecord


@pytest.mark.parametrize("raw, expected", [
    ("2025-11-07", "2025-11-07"),
    ("2025-11-07 03:12:00", "2025-11-07"),
    ("2025-11-07T03:12:00Z", "2025-11-07"),
    ("", ""),
    ("not a date", ""),
    ("2025-13-45", ""),
    ("07/11/2025", ""),
])
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("100", 100.0),
    ("$2,590.00", 2590.0),
    ("AUD 12.5", 12.5),
    ("", 0.0),
    ("abc", 0.0),
    ("1.2.3", 0.0),
    ("-50", 0.0),
])
def test_normalize_price(raw, expected):
    assert normalize_price(raw) == expected


def test_format_price():
    assert format_price(100.0) == "100"
    assert format_price(0.0) == "0"
    assert format_price(12.5) == "12.5"
    assert format_price(0.00001) == "0.00001"
    assert format_price(1234.56) == "1234.56"


def test_canonical_import(canonical_csv):
    records = records_from_rows(parse_delimited(canonical_csv))
    assert len(records) == 1
    rec = records[0]
    assert rec.date == "2025-01-01"
    assert rec.supplier_name == "Acme"
    assert (rec.label, rec.sub_label, rec.micro_label) == ("Pricing", "Price History", "History")
    assert rec.price == 100.0
    assert rec.message == "Hello"
    assert rec.link == ""


def test_leading_index_column_is_skipped():
    text = (
        "Date,Supplier Name,Label,Sub Label,Micro Label,Price,Message\n"
        "1,2025-01-01,Acme,Pricing,Price History,History,100,Hello\n"
        "2,2025-01-02,Beta,Logistics,Delivery Runs,Late,5,Bye\n"
    )
    records = records_from_rows(parse_delimited(text))
    assert [r.date for r in records] == ["2025-01-01", "2025-01-02"]
    assert [r.supplier_name for r in records] == ["Acme", "Beta"]
    assert records[0].message == "Hello"
    assert records[1].price == 5.0


def test_offset_detection_can_be_disabled():
    rows = [["Date", "Supplier Name"], ["1", "2025-01-01"]]
    records = records_from_rows(rows, MatchMode.CONTAINS, detect_offset=False)
    assert records[0].date == ""
    assert records[0].supplier_name == "2025-01-01"


def test_missing_fields_get_defaults():
    columns = resolve_columns(["Date", "Message"])
    rec = normalize_row(["2025-02-03", "Slow delivery"], columns)
    assert rec.supplier_name == "Unknown"
    assert rec.label == rec.sub_label == rec.micro_label == "Uncategorized"
    assert rec.price == 0.0
    assert rec.message == "Slow delivery"


def test_short_and_blank_rows():
    columns = resolve_columns(["Date", "Supplier Name", "Label"])
    assert normalize_row(["", "  ", ""], columns) is None
    rec = normalize_row(["2025-02-03"], columns)
    assert rec.supplier_name == "Unknown"
    assert rec.label == "Uncategorized"


def test_header_only_yields_nothing():
    assert records_from_rows([["Date", "Supplier Name"]]) == []
    assert records_from_rows([]) == []


def test_every_record_is_well_formed():
    rows = [
        ["Date", "Supplier Name", "Label", "Sub Label", "Micro Label", "Price"],
        ["garbage", "", "", "", "", "-3"],
        ["2025-01-01 10:00", "Acme", "Pricing", "", "", "n/a"],
        ["", "Beta"],
    ]
    for rec in records_from_rows(rows):
        assert rec.price >= 0
        assert rec.date == "" or len(rec.date) == 10
        assert rec.supplier_name and rec.label and rec.sub_label and rec.micro_label


def test_record_to_row_follows_save_headers(canonical_csv):
    rec = records_from_rows(parse_delimited(canonical_csv))[0]
    row = record_to_row(rec)
    assert len(row) == len(SAVE_HEADERS)
    assert row == ["2025-01-01", "Acme", "Pricing", "Price History", "History", "100", "Hello", ""]
    again = records_from_rows([list(SAVE_HEADERS), row])
    assert again == [rec]


def test_default_record_matches_normalised_defaults():
    columns = resolve_columns(["Message"])
    assert normalize_row(["hi"], columns) == FeedbackRecord(message="hi")
