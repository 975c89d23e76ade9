"""
FastAPI dependencies — session singleton, sheets gateway, token and query parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, Query

from feedback_intel.config import ALLOWED_EMAIL_DOMAIN
from feedback_intel.data.schemas import Granularity
from feedback_intel.data.session import DashboardSession
from feedback_intel.gateway.sheets import SheetsGateway

# ---------------------------------------------------------------------------
# Global session singleton (set during startup)
# ---------------------------------------------------------------------------
_session: DashboardSession | None = None


def set_session(session: DashboardSession) -> None:
    global _session
    _session = session


def get_session() -> DashboardSession:
    if _session is None:
        raise HTTPException(503, "Dashboard not initialized yet")
    return _session


def get_gateway() -> SheetsGateway:
    return SheetsGateway()


# ---------------------------------------------------------------------------
# Identity boundary — the login flow has already verified the user; we only
# need the access token it handed out.
# ---------------------------------------------------------------------------

def is_allowed_email(email: str | None) -> bool:
    return bool(email) and email.strip().lower().endswith(ALLOWED_EMAIL_DOMAIN)


def get_access_token(authorization: Optional[str] = Header(None)) -> str | None:
    """Bearer token from the Authorization header, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_access_token(authorization: Optional[str] = Header(None)) -> str:
    token = get_access_token(authorization)
    if token is None:
        raise HTTPException(401, "Missing bearer access token")
    return token


# ---------------------------------------------------------------------------
# Query parsing
# ---------------------------------------------------------------------------

def parse_granularity(
    granularity: Optional[str] = Query(None, description="day|week|month|quarter"),
) -> Granularity:
    if granularity is None:
        return Granularity.DAY
    try:
        return Granularity(granularity.lower())
    except ValueError:
        raise HTTPException(400, f"Invalid granularity: {granularity}")
