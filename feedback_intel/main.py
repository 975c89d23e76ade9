"""
Feedback Intelligence — FastAPI app factory with startup session setup.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feedback_intel.data.session import DashboardSession
from feedback_intel.api.dependencies import set_session
from feedback_intel.api.router_meta import router as meta_router
from feedback_intel.api.router_dashboard import router as dashboard_router
from feedback_intel.api.router_upload import router as upload_router
from feedback_intel.api.router_sheets import router as sheets_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start every process on the embedded demo data."""
    from feedback_intel.config import SHEET_ID

    session = DashboardSession()
    set_session(session)

    print(f"  FEEDBACK_SHEET_ID = {'(set)' if SHEET_ID else '(not set)'}")
    print(f"\nFeedback Intelligence ready — demo mode, {session.store.row_count()} sample rows, "
          f"{len(session.store.suppliers())} suppliers\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Feedback Intelligence API",
        description="Customer feedback drill-down by theme and supplier, with revenue impact",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(dashboard_router)
    app.include_router(upload_router)
    app.include_router(sheets_router)

    return app


app = create_app()
