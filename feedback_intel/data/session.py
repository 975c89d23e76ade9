"""
DashboardSession — the collection, the filter state and the page, plus the
pipeline that turns them into one consistent view.

Every committed change (import, remote load, event, page move) is followed by
the same recompute order: filter → aggregates → page.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pandas as pd

from feedback_intel.analytics import aggregations, drilldown, pagination
from feedback_intel.analytics.filters import apply_filters
from feedback_intel.data.mapping import MatchMode
from feedback_intel.data.normalize import records_from_rows
from feedback_intel.data.parser import parse_delimited
from feedback_intel.data.sample import SAMPLE_RECORDS
from feedback_intel.data.schemas import FilterState, Granularity
from feedback_intel.data.store import FeedbackStore
from feedback_intel.gateway.sheets import SheetsError, SheetsGateway


@dataclass
class ImportOutcome:
    status: str                 # "imported" | "ignored"
    imported: int = 0
    source: str = ""
    saved: Optional[int] = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "imported": self.imported,
            "source": self.source,
            "saved": self.saved,
            "warnings": list(self.warnings),
        }


@dataclass
class DashboardView:
    state: FilterState
    demo_mode: bool
    granularity: Granularity
    kpis: dict
    chart: list[dict]
    timeline: list[dict]
    page: pagination.Page
    suppliers: list[str]

    def to_dict(self) -> dict:
        return {
            "state": self.state.to_dict(),
            "demo_mode": self.demo_mode,
            "granularity": self.granularity.value,
            "title": drilldown.chart_title(self.state),
            "subtitle": drilldown.chart_subtitle(self.state),
            "breadcrumbs": drilldown.breadcrumbs(self.state),
            "shows_detail_list": drilldown.shows_detail_list(self.state),
            "kpis": self.kpis,
            "chart": self.chart,
            "timeline": self.timeline,
            "page": self.page.to_dict(),
            "suppliers": self.suppliers,
        }


class DashboardSession:
    """Single-user dashboard state. Starts in demo mode on the sample set."""

    def __init__(self) -> None:
        self.store = FeedbackStore(SAMPLE_RECORDS)
        self.state: FilterState = drilldown.INITIAL_STATE
        self.page: int = 1
        self.demo_mode = True

    # ------------------------------------------------------------------
    # Collection replacement
    # ------------------------------------------------------------------

    def _commit(self, records: list, demo: bool = False) -> None:
        self.store.replace(records)
        self.demo_mode = demo
        self.state = drilldown.INITIAL_STATE
        self.page = 1

    def import_text(self, text: str, source: str = "upload") -> ImportOutcome:
        """Parse a CSV/TSV export and, if it yields records, make it the collection."""
        rows = parse_delimited(text)
        records = records_from_rows(rows, MatchMode.ALIAS, detect_offset=True)
        if not records:
            print(f"  Ignored {source}: no feedback rows found")
            return ImportOutcome(status="ignored", source=source)

        self._commit(records)
        print(f"  Imported {len(records):,} feedback rows from {source}")
        return ImportOutcome(status="imported", imported=len(records), source=source)

    def import_file(self, path: str | Path) -> ImportOutcome:
        path = Path(path)
        text = path.read_text(encoding="utf-8-sig", errors="replace")
        return self.import_text(text, source=path.name)

    def load_remote(self, gateway: SheetsGateway, access_token: str) -> ImportOutcome:
        """Replace the collection from the spreadsheet; keep current data on failure."""
        try:
            records = gateway.fetch(access_token)
        except SheetsError as exc:
            print(f"  Warning: failed to load sheet data: {exc}")
            return ImportOutcome(status="ignored", source="sheets", warnings=[str(exc)])

        if not records:
            print("  Sheet is empty — keeping current data")
            return ImportOutcome(status="ignored", source="sheets")

        self._commit(records)
        print(f"  Loaded {len(records):,} feedback rows from sheets")
        return ImportOutcome(status="imported", imported=len(records), source="sheets")

    def save_remote(self, gateway: SheetsGateway, access_token: str, outcome: ImportOutcome | None = None) -> ImportOutcome:
        """Mirror the collection to the spreadsheet. Failure never rolls back local data."""
        outcome = outcome or ImportOutcome(status="saved", source="sheets")
        try:
            outcome.saved = gateway.save(access_token, list(self.store.records))
        except SheetsError as exc:
            print(f"  Warning: failed to save to sheet: {exc}")
            outcome.warnings.append(f"Save to sheet failed: {exc}")
        return outcome

    def reset_demo(self) -> None:
        self._commit(SAMPLE_RECORDS, demo=True)

    # ------------------------------------------------------------------
    # Filter state & pagination
    # ------------------------------------------------------------------

    def dispatch(self, event: drilldown.Event) -> FilterState:
        new_state = drilldown.transition(self.state, event)
        if new_state != self.state:
            self.state = new_state
            self.page = 1
        return self.state

    def go_to_page(self, page: int) -> int:
        pages = pagination.total_pages(len(self.filtered()))
        self.page = pagination.clamp_page(page, pages)
        return self.page

    def next_page(self) -> int:
        pages = pagination.total_pages(len(self.filtered()))
        self.page = pagination.next_page(self.page, pages)
        return self.page

    def previous_page(self) -> int:
        self.page = pagination.previous_page(self.page)
        return self.page

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def filtered(self) -> pd.DataFrame:
        return apply_filters(self.store.df, self.state)

    def view(self, granularity: Granularity = Granularity.DAY) -> DashboardView:
        """Recompute everything from the committed collection + state."""
        working = self.filtered()
        return DashboardView(
            state=self.state,
            demo_mode=self.demo_mode,
            granularity=granularity,
            kpis=aggregations.kpis(working),
            chart=aggregations.chart_data(working, self.state),
            timeline=aggregations.timeline(working, granularity),
            page=pagination.paginate(working, self.page),
            suppliers=self.store.suppliers(),
        )
