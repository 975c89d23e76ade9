"""
FilterEngine — supplier, drill-down and date-range predicates over the collection.
"""
from __future__ import annotations

import pandas as pd

from feedback_intel.config import ALL_SUPPLIERS
from feedback_intel.data.schemas import FilterState, HierarchyLevel, ViewTab


def _hierarchy_mask(df: pd.DataFrame, state: FilterState) -> pd.Series | None:
    level = state.level
    if level == HierarchyLevel.ROOT:
        return None

    mask = df["label"] == state.selected_label
    if level in (HierarchyLevel.SUB_LABEL, HierarchyLevel.MICRO_LABEL):
        mask &= df["sub_label"] == state.selected_sub_label
    if level == HierarchyLevel.MICRO_LABEL:
        mask &= df["micro_label"] == state.selected_micro_label
    return mask


def apply_filters(df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """Return the working set for ``state``, preserving collection order.

    Applied in order: supplier, hierarchy (category tab only), date range.
    Date bounds compare ISO strings, so an undated record ("") fails any
    start bound and passes any end bound.
    """
    if df.empty:
        return df

    if state.selected_supplier != ALL_SUPPLIERS:
        df = df[df["supplier_name"] == state.selected_supplier]

    if state.active_tab == ViewTab.CATEGORY:
        mask = _hierarchy_mask(df, state)
        if mask is not None:
            df = df[mask]

    if state.date_start:
        df = df[df["date"] >= state.date_start]
    if state.date_end:
        df = df[df["date"] <= state.date_end]

    return df.reset_index(drop=True)
