from __future__ import annotations

from feedback_intel.analytics import pagination
from feedback_intel.data.schemas import FeedbackRecord
from feedback_intel.data.store import records_to_frame


def _frame(n: int):
    return records_to_frame([FeedbackRecord(message=f"m{i}") for i in range(n)])


def test_total_pages():
    assert pagination.total_pages(0) == 0
    assert pagination.total_pages(1) == 1
    assert pagination.total_pages(20) == 1
    assert pagination.total_pages(21) == 2


def test_clamp_page():
    assert pagination.clamp_page(5, 0) == 1
    assert pagination.clamp_page(0, 3) == 1
    assert pagination.clamp_page(9, 3) == 3


def test_next_and_previous_stop_at_the_edges():
    assert pagination.next_page(3, 3) == 3
    assert pagination.next_page(2, 3) == 3
    assert pagination.previous_page(1) == 1
    assert pagination.previous_page(2) == 1


def test_empty_set():
    page = pagination.paginate(_frame(0))
    assert (page.number, page.total_pages, page.total_items) == (1, 0, 0)
    assert page.items == []
    assert not page.has_next and not page.has_previous


def test_last_page_is_partial():
    page = pagination.paginate(_frame(45), 3)
    assert page.total_pages == 3
    assert [r["message"] for r in page.items] == ["m40", "m41", "m42", "m43", "m44"]
    assert page.has_previous and not page.has_next


def test_out_of_range_page_is_clamped():
    page = pagination.paginate(_frame(45), 10)
    assert page.number == 3
    d = page.to_dict()
    assert d["page"] == 3 and d["page_size"] == 20 and len(d["items"]) == 5
