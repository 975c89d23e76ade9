"""
FeedbackStore — In-memory feedback collection backed by pandas.

Replaced wholesale on every successful import or remote load; never edited
record by record.
"""
from __future__ import annotations

import pandas as pd

from feedback_intel.config import RECORD_COLUMNS
from feedback_intel.analytics.aggregations import unique_suppliers
from feedback_intel.data.schemas import FeedbackRecord


def records_to_frame(records: list[FeedbackRecord]) -> pd.DataFrame:
    """Records → DataFrame with canonical columns, in input order."""
    df = pd.DataFrame([r.to_dict() for r in records], columns=RECORD_COLUMNS)
    df["price"] = df["price"].astype("float64")
    for col in RECORD_COLUMNS:
        if col != "price":
            df[col] = df[col].astype(object)
    return df


class FeedbackStore:
    """Ordered, immutable-between-replacements collection of feedback records."""

    def __init__(self, records: list[FeedbackRecord] | None = None) -> None:
        self._records: tuple[FeedbackRecord, ...] = ()
        self.df: pd.DataFrame = records_to_frame([])
        if records:
            self.replace(records)

    # ------------------------------------------------------------------
    # Replacement
    # ------------------------------------------------------------------

    def replace(self, records: list[FeedbackRecord]) -> "FeedbackStore":
        """Swap in a new collection. The previous one is discarded."""
        self._records = tuple(records)
        self.df = records_to_frame(list(self._records))
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[FeedbackRecord, ...]:
        return self._records

    def row_count(self) -> int:
        return len(self._records)

    def suppliers(self) -> list[str]:
        """Distinct supplier names across the whole collection, sorted."""
        return unique_suppliers(self.df)

    def date_range(self) -> str:
        """Human-readable date range string."""
        dates = self.df.loc[self.df["date"] != "", "date"] if not self.df.empty else []
        if len(dates) == 0:
            return "N/A"
        return f"{dates.min()} to {dates.max()}"
