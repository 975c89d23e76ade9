from __future__ import annotations

import gzip
import io

from openpyxl import load_workbook

from feedback_intel.api.dependencies import is_allowed_email

AUTH = {"Authorization": "Bearer tok"}


def _upload(client, content: bytes, filename="feedback.csv", headers=None):
    return client.post(
        "/api/upload",
        files={"file": (filename, content, "text/csv")},
        headers=headers or {},
    )


def test_health_on_startup(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["rows"] == 6
    assert body["demo_mode"] is True
    assert body["date_range"] == "2025-11-06 to 2025-11-07"


def test_dashboard_snapshot(client):
    body = client.get("/api/dashboard").json()
    assert body["title"] == "Top Themes"
    assert body["kpis"] == {"count": 6, "revenue": 2590.0, "suppliers": 6}
    assert body["page"]["total_items"] == 6
    assert body["timeline"] == [
        {"date": "2025-11-06", "count": 3},
        {"date": "2025-11-07", "count": 3},
    ]


def test_dashboard_granularity(client):
    body = client.get("/api/dashboard", params={"granularity": "quarter"}).json()
    assert body["timeline"] == [{"date": "Q4 25", "count": 6}]
    assert client.get("/api/dashboard", params={"granularity": "hourly"}).status_code == 400


def test_upload_replaces_collection(client, canonical_csv):
    r = _upload(client, canonical_csv.encode())
    assert r.status_code == 200
    assert r.json()["status"] == "imported"
    assert r.json()["imported"] == 1
    assert client.get("/api/suppliers").json() == {"suppliers": ["Acme"], "count": 1}
    assert client.get("/api/health").json()["demo_mode"] is False


def test_upload_gzipped(client, canonical_csv):
    r = _upload(client, gzip.compress(canonical_csv.encode()), filename="feedback.csv.gz")
    assert r.json()["imported"] == 1
    assert r.json()["source"] == "feedback.csv"


def test_upload_rejects_other_extensions(client):
    assert _upload(client, b"x", filename="feedback.xlsx").status_code == 400


def test_malformed_upload_is_ignored(client):
    r = _upload(client, b"Date,Supplier Name\n")
    assert r.json()["status"] == "ignored"
    assert client.get("/api/health").json()["rows"] == 6


def test_upload_with_token_mirrors_to_sheet(client, fake_gateway, canonical_csv):
    r = _upload(client, canonical_csv.encode(), headers=AUTH)
    assert r.json()["saved"] == 1
    assert fake_gateway.tokens == ["tok"]
    assert fake_gateway.saved[0].supplier_name == "Acme"


def test_failed_mirror_keeps_import(client, fake_gateway, canonical_csv):
    fake_gateway.fail_save = True
    r = _upload(client, canonical_csv.encode(), headers=AUTH)
    body = r.json()
    assert body["status"] == "imported"
    assert body["saved"] is None
    assert body["warnings"]
    assert client.get("/api/health").json()["rows"] == 1


def test_drill_down_events(client):
    body = client.post("/api/events", json={"type": "select_bar", "name": "Picking & Warehouse"}).json()
    assert body["state"]["level"] == "label"
    assert body["kpis"]["count"] == 2
    assert body["chart"] == [{"name": "Picking Slips", "count": 2}]
    assert [c["name"] for c in body["breadcrumbs"]] == ["All Categories", "Picking & Warehouse"]

    body = client.post("/api/events", json={"type": "back"}).json()
    assert body["state"]["level"] == "root"
    assert body["kpis"]["count"] == 6


def test_supplier_tab_and_date_range(client):
    body = client.post("/api/events", json={"type": "switch_tab", "tab": "suppliers"}).json()
    assert body["title"] == "Top Suppliers"
    assert len(body["chart"]) == 6

    body = client.post("/api/events", json={"type": "select_bar", "name": "Parisi"}).json()
    assert body["state"]["selected_supplier"] == "Parisi"
    assert body["state"]["active_tab"] == "category"
    assert body["kpis"]["revenue"] == 2590.0

    body = client.post(
        "/api/events", json={"type": "set_date_range", "start": "2025-11-07", "end": "2025-11-07"}
    ).json()
    assert body["kpis"]["count"] == 0
    assert body["page"]["total_pages"] == 0


def test_bad_event_is_400(client):
    assert client.post("/api/events", json={"type": "teleport"}).status_code == 400
    assert client.post("/api/events", json={"type": "select_bar"}).status_code == 400


def test_feedback_pages(client):
    rows = "\n".join(f"2025-01-{i % 28 + 1:02d},S{i},L,S,M,1,msg {i}" for i in range(45))
    _upload(client, ("Date,Supplier Name,Label,Sub Label,Micro Label,Price,Message\n" + rows).encode())

    first = client.get("/api/feedback").json()
    assert (first["page"], first["total_pages"], first["total_items"]) == (1, 3, 45)
    assert len(first["items"]) == 20

    assert client.post("/api/feedback/next").json()["page"] == 2
    last = client.get("/api/feedback", params={"page": 99}).json()
    assert last["page"] == 3
    assert len(last["items"]) == 5
    assert client.post("/api/feedback/next").json()["page"] == 3
    assert client.post("/api/feedback/previous").json()["page"] == 2
    assert client.get("/api/feedback", params={"page": 0}).status_code == 422


def test_sheets_endpoints_need_token(client):
    assert client.post("/api/sheets/load").status_code == 401
    assert client.post("/api/sheets/save", headers={"Authorization": "Basic abc"}).status_code == 401


def test_sheets_load_and_save(client, fake_gateway, records):
    fake_gateway.rows = records
    body = client.post("/api/sheets/load", headers=AUTH).json()
    assert body["status"] == "imported"
    assert body["imported"] == 5

    body = client.post("/api/sheets/save", headers=AUTH).json()
    assert body["saved"] == 5
    assert fake_gateway.saved == records


def test_sheets_load_failure_keeps_demo(client, fake_gateway):
    fake_gateway.fail_fetch = True
    body = client.post("/api/sheets/load", headers=AUTH).json()
    assert body["status"] == "ignored"
    assert body["warnings"]
    assert client.get("/api/health").json()["demo_mode"] is True


def test_reset(client, canonical_csv):
    _upload(client, canonical_csv.encode())
    body = client.post("/api/reset").json()
    assert body == {"status": "reset", "rows": 6, "demo_mode": True}


def test_excel_export(client):
    r = client.get("/api/export/excel", params={"granularity": "month"})
    assert r.status_code == 200
    assert r.headers["content-disposition"].startswith("attachment; filename=Feedback_Report_")
    wb = load_workbook(io.BytesIO(r.content))
    assert wb.sheetnames == ["Summary", "Chart Data", "Timeline (month)", "Feedback"]
    assert wb["Timeline (month)"]["A2"].value == "2025-11"


def test_is_allowed_email():
    assert is_allowed_email("ops@fresho.com")
    assert is_allowed_email("  Ops@Fresho.COM ")
    assert not is_allowed_email("ops@example.com")
    assert not is_allowed_email("")
    assert not is_allowed_email(None)
