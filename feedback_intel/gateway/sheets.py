"""Thin client for the Google Sheets values API used as the remote feedback store."""

from __future__ import annotations

from typing import Any, Optional

import requests

from feedback_intel.config import SAVE_HEADERS, SHEET_ID, SHEET_RANGE, SHEETS_API_BASE, SHEETS_TIMEOUT
from feedback_intel.data.mapping import MatchMode
from feedback_intel.data.normalize import record_to_row, records_from_rows
from feedback_intel.data.schemas import FeedbackRecord


class SheetsError(RuntimeError):
    """Raised when the spreadsheet cannot be read or written."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SheetsConfigError(SheetsError):
    """No spreadsheet id configured."""


class SheetsFetchError(SheetsError):
    """Reading the sheet failed (transport error or non-2xx response)."""


class SheetsSaveError(SheetsError):
    """Writing the sheet failed (transport error or non-2xx response)."""


class SheetsGateway:
    """fetch(token) → records, save(token, records) over one sheet range."""

    def __init__(
        self,
        *,
        sheet_id: Optional[str] = None,
        sheet_range: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.sheet_id = sheet_id if sheet_id is not None else SHEET_ID
        self.sheet_range = sheet_range or SHEET_RANGE
        self.base_url = (base_url or SHEETS_API_BASE).rstrip("/")
        self.timeout = timeout or SHEETS_TIMEOUT
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------
    def _values_url(self, cell_range: str) -> str:
        if not self.sheet_id:
            raise SheetsConfigError("Missing spreadsheet id (set FEEDBACK_SHEET_ID)")
        return f"{self.base_url}/{self.sheet_id}/values/{cell_range}"

    @staticmethod
    def _headers(access_token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

    def _request(
        self,
        method: str,
        url: str,
        access_token: str,
        error_cls: type[SheetsError],
        **kwargs: Any,
    ) -> requests.Response:
        try:
            response = self._session.request(
                method, url, headers=self._headers(access_token), timeout=self.timeout, **kwargs
            )
            response.raise_for_status()
            return response
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            reason = exc.response.reason if exc.response is not None else str(exc)
            raise error_cls(f"Sheets API error: {reason}", status_code=status) from exc
        except requests.RequestException as exc:
            raise error_cls(f"Sheets API request failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fetch_rows(self, access_token: str) -> list[list[str]]:
        """Raw value grid, header first. [] when the sheet is empty."""
        url = self._values_url(f"{self.sheet_range}!A:Z")
        response = self._request("GET", url, access_token, SheetsFetchError)
        try:
            payload = response.json()
        except ValueError as exc:
            raise SheetsFetchError("Sheets API returned a non-JSON body") from exc
        return payload.get("values") or []

    def fetch(self, access_token: str) -> list[FeedbackRecord]:
        """Load every record. Headers are matched loosely; no index-column sniffing."""
        rows = self.fetch_rows(access_token)
        if len(rows) < 2:
            return []
        return records_from_rows(rows, MatchMode.CONTAINS, detect_offset=False)

    def clear(self, access_token: str) -> None:
        """Blank the data range so a shorter save leaves no stale rows behind."""
        url = self._values_url(f"{self.sheet_range}!A:Z") + ":clear"
        self._request("POST", url, access_token, SheetsSaveError, json={})

    def save(self, access_token: str, records: list[FeedbackRecord]) -> int:
        """Overwrite the sheet from A1 with the header row + one row per record."""
        self.clear(access_token)
        url = self._values_url(f"{self.sheet_range}!A1")
        values = [list(SAVE_HEADERS)] + [record_to_row(r) for r in records]
        self._request(
            "PUT",
            url,
            access_token,
            SheetsSaveError,
            params={"valueInputOption": "USER_ENTERED"},
            json={"values": values},
        )
        return len(records)
