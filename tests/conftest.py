from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from feedback_intel.api.dependencies import get_gateway
from feedback_intel.data.schemas import FeedbackRecord
from feedback_intel.data.session import DashboardSession
from feedback_intel.data.store import records_to_frame
from feedback_intel.gateway.sheets import SheetsFetchError, SheetsSaveError
from feedback_intel.main import create_app


CANONICAL_CSV_TEXT = (
    "Date,Supplier Name,Label,Sub Label,Micro Label,Price,Message\n"
    "2025-01-01,Acme,Pricing,Price History,History,100,Hello\n"
)


@pytest.fixture()
def records() -> list[FeedbackRecord]:
    return [
        FeedbackRecord("2025-01-01", "Acme", "Pricing", "Price History", "History", 100.0, "r1"),
        FeedbackRecord("2025-01-15", "Acme", "Pricing", "Discounts", "Volume", 50.0, "r2"),
        FeedbackRecord("2025-02-01", "Beta", "Pricing", "Price History", "History", 0.0, "r3"),
        FeedbackRecord("2025-03-10", "Beta", "Logistics", "Delivery Runs", "Late", 200.0, "r4"),
        FeedbackRecord("", "Gamma", "Logistics", "Delivery Runs", "Late", 10.0, "r5"),
    ]


@pytest.fixture()
def df(records):
    return records_to_frame(records)


@pytest.fixture()
def session(records) -> DashboardSession:
    s = DashboardSession()
    s._commit(records)
    return s


class FakeGateway:
    """Stands in for SheetsGateway; records what was saved."""

    def __init__(self, rows: list[FeedbackRecord] | None = None, fail_fetch: bool = False, fail_save: bool = False):
        self.rows = rows or []
        self.fail_fetch = fail_fetch
        self.fail_save = fail_save
        self.saved: list[FeedbackRecord] | None = None
        self.tokens: list[str] = []

    def fetch(self, access_token: str) -> list[FeedbackRecord]:
        self.tokens.append(access_token)
        if self.fail_fetch:
            raise SheetsFetchError("Sheets API error: Forbidden", status_code=403)
        return list(self.rows)

    def save(self, access_token: str, records: list[FeedbackRecord]) -> int:
        self.tokens.append(access_token)
        if self.fail_save:
            raise SheetsSaveError("Sheets API error: Service Unavailable", status_code=503)
        self.saved = list(records)
        return len(records)


@pytest.fixture()
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def client(fake_gateway):
    app = create_app()
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def canonical_csv() -> str:
    return CANONICAL_CSV_TEXT


@pytest.fixture()
def make_gateway():
    return FakeGateway
