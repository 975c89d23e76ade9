"""
Spreadsheet endpoints: load the collection from, or mirror it to, the remote sheet.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from feedback_intel.api.dependencies import get_gateway, get_session, require_access_token
from feedback_intel.api.response_models import ImportResponse
from feedback_intel.data.session import DashboardSession
from feedback_intel.gateway.sheets import SheetsGateway

router = APIRouter(prefix="/api/sheets", tags=["sheets"])


@router.post("/load", response_model=ImportResponse)
def load_from_sheet(
    session: DashboardSession = Depends(get_session),
    gateway: SheetsGateway = Depends(get_gateway),
    access_token: str = Depends(require_access_token),
):
    """Replace the collection with the sheet contents; failures keep current data."""
    return ImportResponse(**session.load_remote(gateway, access_token).to_dict())


@router.post("/save", response_model=ImportResponse)
def save_to_sheet(
    session: DashboardSession = Depends(get_session),
    gateway: SheetsGateway = Depends(get_gateway),
    access_token: str = Depends(require_access_token),
):
    """Overwrite the sheet with the current collection (best effort)."""
    return ImportResponse(**session.save_remote(gateway, access_token).to_dict())
