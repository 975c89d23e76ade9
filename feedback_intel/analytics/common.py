"""
Small helpers shared by the analytics and reporting modules.
"""
from __future__ import annotations

import math

import numpy as np
import pandas as pd


def counts_to_rows(counts: pd.Series, key: str = "name") -> list[dict]:
    """Series of counts → [{key: label, "count": n}, ...] in series order."""
    return [{key: str(k), "count": int(v)} for k, v in counts.items()]


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total; 0.0 when total is zero."""
    if total == 0 or pd.isna(total):
        return 0.0
    return part / total * 100


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
