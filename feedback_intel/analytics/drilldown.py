"""
Drill-down state machine — (FilterState, event) → FilterState.

Events are small frozen dataclasses. ``transition`` is total: an event that
does not apply in the current state hands the state back unchanged.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, replace
from typing import Optional, Union

from feedback_intel.config import ALL_SUPPLIERS
from feedback_intel.data.schemas import FilterState, HierarchyLevel, ViewTab


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SelectBar:
    name: str


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class JumpTo:
    level: HierarchyLevel


@dataclass(frozen=True)
class SwitchTab:
    tab: ViewTab


@dataclass(frozen=True)
class SelectSupplier:
    supplier: str


@dataclass(frozen=True)
class SetDateRange:
    start: Optional[str] = None
    end: Optional[str] = None


@dataclass(frozen=True)
class ResetView:
    pass


Event = Union[SelectBar, Back, JumpTo, SwitchTab, SelectSupplier, SetDateRange, ResetView]

INITIAL_STATE = FilterState()

# selection attribute owned by each non-root level
_LEVEL_SELECTION = {
    HierarchyLevel.LABEL: "selected_label",
    HierarchyLevel.SUB_LABEL: "selected_sub_label",
    HierarchyLevel.MICRO_LABEL: "selected_micro_label",
}


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _clear_below(state: FilterState, level: HierarchyLevel) -> FilterState:
    """Move to ``level`` and drop every selection deeper than it."""
    cleared = {
        attr: None
        for lvl, attr in _LEVEL_SELECTION.items()
        if lvl.depth > level.depth
    }
    return replace(state, level=level, **cleared)


def _select_bar(state: FilterState, name: str) -> FilterState:
    if state.active_tab == ViewTab.SUPPLIERS:
        return replace(
            _clear_below(state, HierarchyLevel.ROOT),
            selected_supplier=name,
            active_tab=ViewTab.CATEGORY,
        )
    if state.level == HierarchyLevel.MICRO_LABEL:
        return state
    deeper = state.level.deeper()
    return replace(state, level=deeper, **{_LEVEL_SELECTION[deeper]: name})


def transition(state: FilterState, event: Event) -> FilterState:
    if isinstance(event, SelectBar):
        return _select_bar(state, event.name)

    if isinstance(event, Back):
        if state.level == HierarchyLevel.ROOT:
            return state
        return _clear_below(state, state.level.shallower())

    if isinstance(event, JumpTo):
        if event.level.depth >= state.level.depth:
            return state
        return _clear_below(state, event.level)

    if isinstance(event, SwitchTab):
        return replace(state, active_tab=event.tab)

    if isinstance(event, SelectSupplier):
        return replace(state, selected_supplier=event.supplier or ALL_SUPPLIERS)

    if isinstance(event, SetDateRange):
        return replace(state, date_start=event.start or None, date_end=event.end or None)

    if isinstance(event, ResetView):
        return INITIAL_STATE

    return state


# ---------------------------------------------------------------------------
# Payload → event (API / CLI input)
# ---------------------------------------------------------------------------

def _iso_or_none(value: Optional[str], field: str) -> Optional[str]:
    if not value:
        return None
    try:
        return dt.date.fromisoformat(value).isoformat()
    except ValueError:
        raise ValueError(f"Invalid {field}: {value!r} (expected YYYY-MM-DD)")


def event_from_payload(payload: dict) -> Event:
    """Build an event from {"type": ..., ...}. Raises ValueError when malformed."""
    kind = (payload.get("type") or "").strip().lower()

    if kind == "select_bar":
        name = payload.get("name")
        if not name:
            raise ValueError("select_bar requires 'name'")
        return SelectBar(name)
    if kind == "back":
        return Back()
    if kind == "jump_to":
        try:
            return JumpTo(HierarchyLevel(payload.get("level")))
        except ValueError:
            raise ValueError(f"Invalid level: {payload.get('level')!r}")
    if kind == "switch_tab":
        try:
            return SwitchTab(ViewTab(payload.get("tab")))
        except ValueError:
            raise ValueError(f"Invalid tab: {payload.get('tab')!r}")
    if kind == "select_supplier":
        return SelectSupplier(payload.get("supplier") or ALL_SUPPLIERS)
    if kind == "set_date_range":
        start = _iso_or_none(payload.get("start"), "start")
        end = _iso_or_none(payload.get("end"), "end")
        return SetDateRange(start, end)
    if kind == "reset_view":
        return ResetView()

    raise ValueError(f"Unknown event type: {payload.get('type')!r}")


# ---------------------------------------------------------------------------
# View descriptors
# ---------------------------------------------------------------------------

def shows_detail_list(state: FilterState) -> bool:
    """True at the micro-label leaf, where the chart gives way to the list."""
    return state.active_tab == ViewTab.CATEGORY and state.level == HierarchyLevel.MICRO_LABEL


def chart_title(state: FilterState) -> str:
    if state.active_tab == ViewTab.SUPPLIERS:
        return "Top Suppliers"
    if state.level == HierarchyLevel.ROOT:
        return "Top Themes"
    return getattr(state, _LEVEL_SELECTION[state.level]) or ""


def chart_subtitle(state: FilterState) -> str:
    return "By Volume" if state.active_tab == ViewTab.SUPPLIERS else "By Feedback Count"


def breadcrumbs(state: FilterState) -> list[dict]:
    """Trail from "All Categories" down to the current selection."""
    trail = [{"level": HierarchyLevel.ROOT.value, "name": "All Categories"}]
    for lvl, attr in _LEVEL_SELECTION.items():
        if lvl.depth > state.level.depth:
            break
        trail.append({"level": lvl.value, "name": getattr(state, attr)})
    return trail
