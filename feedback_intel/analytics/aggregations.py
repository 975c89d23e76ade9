"""
Dashboard aggregations — bar-chart counts, timeline buckets, KPIs.

All functions take the already-filtered working set.
"""
from __future__ import annotations

import datetime as dt
import math

import pandas as pd

from feedback_intel.config import TOP_CATEGORIES, TOP_SUPPLIERS
from feedback_intel.analytics.common import counts_to_rows
from feedback_intel.data.schemas import FilterState, Granularity, HierarchyLevel, ViewTab


# ---------------------------------------------------------------------------
# Bar chart
# ---------------------------------------------------------------------------

_LEVEL_GROUP_KEY = {
    HierarchyLevel.ROOT: "label",
    HierarchyLevel.LABEL: "sub_label",
    HierarchyLevel.SUB_LABEL: "micro_label",
}


def chart_group_key(state: FilterState) -> str | None:
    """Column the bar chart groups by, or None at the micro-label leaf."""
    if state.active_tab == ViewTab.SUPPLIERS:
        return "supplier_name"
    return _LEVEL_GROUP_KEY.get(state.level)


def count_by(df: pd.DataFrame, key: str, limit: int) -> list[dict]:
    """Count rows per ``key``, most frequent first, top ``limit``.

    Ties keep first-occurrence order: groupby(sort=False) yields keys in the
    order they first appear and the stable sort leaves equal counts alone.
    """
    if df.empty:
        return []
    counts = df.groupby(key, sort=False).size()
    counts = counts.sort_values(ascending=False, kind="stable").head(limit)
    return counts_to_rows(counts)


def chart_data(df: pd.DataFrame, state: FilterState) -> list[dict]:
    key = chart_group_key(state)
    if key is None:
        return []
    limit = TOP_SUPPLIERS if state.active_tab == ViewTab.SUPPLIERS else TOP_CATEGORIES
    return count_by(df, key, limit)


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

def week_number(day: dt.date) -> int:
    """Sunday-start week of the year: ceil((days since Jan 1 + Jan 1 weekday + 1) / 7)."""
    jan1 = dt.date(day.year, 1, 1)
    jan1_weekday = (jan1.weekday() + 1) % 7     # Sunday = 0
    return math.ceil(((day - jan1).days + jan1_weekday + 1) / 7)


def bucket_for(date_str: str, granularity: Granularity) -> tuple[str, str]:
    """(sort key, display label) for one ISO date.

    Labels: day "2025-01-15", month "2025-01", quarter "Q1 25", week "W03 25".
    Sort keys are year-first so buckets order chronologically across years.
    """
    if granularity == Granularity.DAY:
        return date_str, date_str
    if granularity == Granularity.MONTH:
        return date_str[:7], date_str[:7]

    day = dt.date.fromisoformat(date_str)
    yy = f"{day.year % 100:02d}"
    if granularity == Granularity.QUARTER:
        q = (day.month - 1) // 3 + 1
        return f"{day.year}-Q{q}", f"Q{q} {yy}"

    week = week_number(day)
    return f"{day.year}-W{week:02d}", f"W{week:02d} {yy}"


def timeline(df: pd.DataFrame, granularity: Granularity = Granularity.DAY) -> list[dict]:
    """Feedback count per date bucket, ascending. Undated records are skipped."""
    if df.empty:
        return []
    dates = df.loc[df["date"] != "", "date"]
    if dates.empty:
        return []

    keyed = [bucket_for(d, granularity) for d in dates]
    frame = pd.DataFrame(keyed, columns=["order", "bucket"])
    grouped = frame.groupby(["order", "bucket"]).size().reset_index(name="count")
    grouped = grouped.sort_values("order", kind="stable")
    return [
        {"date": str(r["bucket"]), "count": int(r["count"])}
        for r in grouped.to_dict("records")
    ]


# ---------------------------------------------------------------------------
# KPIs
# ---------------------------------------------------------------------------

def kpis(df: pd.DataFrame) -> dict:
    """Count, linked revenue and distinct suppliers for the working set."""
    if df.empty:
        return {"count": 0, "revenue": 0.0, "suppliers": 0}
    return {
        "count": int(len(df)),
        "revenue": float(df["price"].sum()),
        "suppliers": int(df["supplier_name"].nunique()),
    }


def unique_suppliers(df: pd.DataFrame) -> list[str]:
    """Distinct supplier names, sorted — feed it the unfiltered collection."""
    if df.empty:
        return []
    return sorted(df["supplier_name"].dropna().unique().tolist())
