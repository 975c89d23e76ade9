"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    rows: int
    suppliers: int
    demo_mode: bool
    date_range: str


class SuppliersResponse(BaseModel):
    suppliers: list[str]
    count: int


class ImportResponse(BaseModel):
    status: str              # "imported" | "ignored" | "saved"
    imported: int
    source: str
    saved: Optional[int] = None
    warnings: list[str] = []


class EventRequest(BaseModel):
    """One drill-down/filter event, e.g. {"type": "select_bar", "name": "Pricing"}."""
    type: str
    name: Optional[str] = None
    level: Optional[str] = None
    tab: Optional[str] = None
    supplier: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
