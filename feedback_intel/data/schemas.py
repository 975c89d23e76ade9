"""
Record and filter-state schemas for the feedback dashboard.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from feedback_intel.config import ALL_SUPPLIERS, UNCATEGORIZED, UNKNOWN_SUPPLIER


@dataclass(frozen=True)
class FeedbackRecord:
    """One normalised feedback item. Never mutated once built."""
    date: str = ""                  # YYYY-MM-DD or "" when unparsable
    supplier_name: str = UNKNOWN_SUPPLIER
    label: str = UNCATEGORIZED
    sub_label: str = UNCATEGORIZED
    micro_label: str = UNCATEGORIZED
    price: float = 0.0              # annualised revenue linked to the item
    message: str = ""
    link: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


class ViewTab(str, Enum):
    CATEGORY = "category"
    SUPPLIERS = "suppliers"


class HierarchyLevel(str, Enum):
    ROOT = "root"
    LABEL = "label"
    SUB_LABEL = "sub_label"
    MICRO_LABEL = "micro_label"

    @property
    def depth(self) -> int:
        return _LEVEL_ORDER.index(self)

    def deeper(self) -> "HierarchyLevel":
        return _LEVEL_ORDER[min(self.depth + 1, len(_LEVEL_ORDER) - 1)]

    def shallower(self) -> "HierarchyLevel":
        return _LEVEL_ORDER[max(self.depth - 1, 0)]


_LEVEL_ORDER = [
    HierarchyLevel.ROOT,
    HierarchyLevel.LABEL,
    HierarchyLevel.SUB_LABEL,
    HierarchyLevel.MICRO_LABEL,
]


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"


@dataclass(frozen=True)
class FilterState:
    """Everything that decides which records are in the working set.

    Selections are only populated as deep as ``level``: a sub-label is never
    set without its label, a micro-label never without its sub-label.
    """
    selected_supplier: str = ALL_SUPPLIERS
    active_tab: ViewTab = ViewTab.CATEGORY
    level: HierarchyLevel = HierarchyLevel.ROOT
    selected_label: Optional[str] = None
    selected_sub_label: Optional[str] = None
    selected_micro_label: Optional[str] = None
    date_start: Optional[str] = None     # inclusive, YYYY-MM-DD
    date_end: Optional[str] = None       # inclusive, YYYY-MM-DD

    def to_dict(self) -> dict:
        d = asdict(self)
        d["active_tab"] = self.active_tab.value
        d["level"] = self.level.value
        return d
