"""
Meta endpoints: health, supplier list, reset to demo data.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from feedback_intel.api.dependencies import get_session
from feedback_intel.api.response_models import HealthResponse, SuppliersResponse
from feedback_intel.data.session import DashboardSession

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(session: DashboardSession = Depends(get_session)):
    store = session.store
    return HealthResponse(
        status="ok",
        rows=store.row_count(),
        suppliers=len(store.suppliers()),
        demo_mode=session.demo_mode,
        date_range=store.date_range(),
    )


@router.get("/suppliers", response_model=SuppliersResponse)
def list_suppliers(session: DashboardSession = Depends(get_session)):
    """Every supplier in the loaded collection, regardless of the active filter."""
    suppliers = session.store.suppliers()
    return SuppliersResponse(suppliers=suppliers, count=len(suppliers))


@router.post("/reset")
def reset(session: DashboardSession = Depends(get_session)):
    """Drop imported data and go back to the embedded demo set."""
    session.reset_demo()
    print(f"  Reset to demo data — {session.store.row_count()} rows")
    return {"status": "reset", "rows": session.store.row_count(), "demo_mode": session.demo_mode}
