"""
Dashboard endpoints — full view, detail-list pages, drill-down events, Excel export.
"""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from feedback_intel.analytics.common import sanitize_for_json
from feedback_intel.analytics.drilldown import event_from_payload
from feedback_intel.api.dependencies import get_session, parse_granularity
from feedback_intel.api.response_models import EventRequest
from feedback_intel.data.schemas import Granularity
from feedback_intel.data.session import DashboardSession
from feedback_intel.reports import dashboard_report

router = APIRouter(prefix="/api", tags=["dashboard"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _safe_json(data: dict) -> JSONResponse:
    return JSONResponse(content=sanitize_for_json(data))


@router.get("/dashboard")
def dashboard(
    session: DashboardSession = Depends(get_session),
    granularity: Granularity = Depends(parse_granularity),
):
    """KPIs, bar chart, timeline and current detail-list page in one snapshot."""
    return _safe_json(session.view(granularity).to_dict())


@router.get("/feedback")
def feedback_page(
    page: int | None = Query(None, ge=1, description="1-based page number"),
    session: DashboardSession = Depends(get_session),
):
    """The detail list, 20 items per page. Out-of-range pages are clamped."""
    if page is not None:
        session.go_to_page(page)
    return _safe_json(session.view().page.to_dict())


@router.post("/feedback/next")
def feedback_next(session: DashboardSession = Depends(get_session)):
    session.next_page()
    return _safe_json(session.view().page.to_dict())


@router.post("/feedback/previous")
def feedback_previous(session: DashboardSession = Depends(get_session)):
    session.previous_page()
    return _safe_json(session.view().page.to_dict())


@router.post("/events")
def apply_event(
    body: EventRequest,
    session: DashboardSession = Depends(get_session),
    granularity: Granularity = Depends(parse_granularity),
):
    """Apply one drill-down/filter event and return the refreshed view."""
    try:
        event = event_from_payload(body.model_dump())
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    session.dispatch(event)
    return _safe_json(session.view(granularity).to_dict())


@router.get("/export/excel")
def export_excel(
    session: DashboardSession = Depends(get_session),
    granularity: Granularity = Depends(parse_granularity),
):
    """Download the current view as a styled workbook."""
    content = dashboard_report.build_workbook(session, granularity).to_bytes()
    filename = f"Feedback_Report_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
