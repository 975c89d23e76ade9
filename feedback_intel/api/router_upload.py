"""
Upload endpoint: import a CSV/TSV export and mirror it to the spreadsheet.
"""
from __future__ import annotations

import gzip

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from feedback_intel.api.dependencies import get_access_token, get_gateway, get_session
from feedback_intel.api.response_models import ImportResponse
from feedback_intel.data.session import DashboardSession
from feedback_intel.gateway.sheets import SheetsGateway

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=ImportResponse)
async def upload_csv(
    file: UploadFile = File(...),
    session: DashboardSession = Depends(get_session),
    gateway: SheetsGateway = Depends(get_gateway),
    access_token: str | None = Depends(get_access_token),
):
    """Replace the collection with an uploaded export.

    A file that yields no rows is ignored and the current data stays. With a
    bearer token the new collection is also written to the sheet; a failed
    save comes back as a warning and the imported data stays active.
    """
    if not file.filename:
        raise HTTPException(400, "Missing filename")

    # Strip .gz suffix if present (browser gzip-compressed upload)
    filename = file.filename
    is_gzipped = filename.lower().endswith(".csv.gz")
    if is_gzipped:
        filename = filename[:-3]

    if not filename.lower().endswith(".csv"):
        raise HTTPException(400, f"Only .csv files are accepted (got '{file.filename}')")

    content = await file.read()
    if is_gzipped:
        try:
            content = gzip.decompress(content)
        except OSError:
            raise HTTPException(400, f"Could not decompress '{file.filename}'")

    outcome = session.import_text(content.decode("utf-8-sig", errors="replace"), source=filename)
    if outcome.imported and access_token:
        session.save_remote(gateway, access_token, outcome)
    return ImportResponse(**outcome.to_dict())
