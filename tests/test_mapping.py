from __future__ import annotations

from feedback_intel.data.mapping import (
    NOT_FOUND,
    MatchMode,
    describe_mapping,
    detect_index_offset,
    resolve_columns,
)

CANONICAL = ["Date", "Supplier Name", "Label", "Sub Label", "Micro Label", "Price", "Message"]


def test_canonical_headers():
    cols = resolve_columns(CANONICAL)
    assert cols == {
        "date": 0,
        "supplier_name": 1,
        "label": 2,
        "sub_label": 3,
        "micro_label": 4,
        "price": 5,
        "message": 6,
        "link": NOT_FOUND,
    }


def test_export_aliases():
    headers = [
        "Date (UTC)",
        "Report Company (matched)",
        "Theme",
        "Sub-Theme",
        "Micro-Theme",
        "Subscription Amount (converted) AUD sum (matched)",
        "Verbatim",
        "Message Link",
    ]
    cols = resolve_columns(headers)
    assert [cols[f] for f in ("date", "supplier_name", "label", "sub_label",
                              "micro_label", "price", "message", "link")] == list(range(8))


def test_alias_match_ignores_case_and_padding():
    cols = resolve_columns(["  DATE ", "supplier", "THEME"])
    assert cols["date"] == 0
    assert cols["supplier_name"] == 1
    assert cols["label"] == 2


def test_alias_mode_does_not_match_substrings():
    cols = resolve_columns(["Feedback Date Local", "Company"], MatchMode.ALIAS)
    assert cols["date"] == NOT_FOUND
    assert cols["supplier_name"] == NOT_FOUND


def test_contains_mode_matches_fragments():
    headers = ["Timestamp Date", "Company", "Label", "Sub Label", "Micro Label",
               "Amount", "Feedback", "Hyperlink"]
    cols = resolve_columns(headers, MatchMode.CONTAINS)
    assert cols == {
        "date": 0,
        "supplier_name": 1,
        "label": 2,
        "sub_label": 3,
        "micro_label": 4,
        "price": 5,
        "message": 6,
        "link": 7,
    }


def test_contains_mode_keeps_exact_matches_first():
    # "label" is a fragment of "Sub Label"; the exact alias must win.
    cols = resolve_columns(["Sub Label", "Label"], MatchMode.CONTAINS)
    assert cols["label"] == 1
    assert cols["sub_label"] == 0


def test_describe_mapping():
    headers = ["Date", "Supplier"]
    desc = describe_mapping(headers, resolve_columns(headers))
    assert desc["date"] == "Date"
    assert desc["supplier_name"] == "Supplier"
    assert desc["message"] is None


def test_offset_detected_for_bare_integer_before_date():
    assert detect_index_offset(["1", "2025-01-01", "Acme"], 0) == 1
    assert detect_index_offset(["12", "07/11/2025", "Acme"], 0) == 1


def test_offset_not_detected_for_regular_rows():
    assert detect_index_offset(["2025-01-01", "Acme"], 0) == 0
    assert detect_index_offset(["1", "Acme"], 0) == 0
    assert detect_index_offset(["x", "1"], 1) == 0
    assert detect_index_offset(["1", "2025-01-01"], NOT_FOUND) == 0
