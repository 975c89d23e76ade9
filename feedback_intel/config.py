"""
Feedback Intelligence — Configuration: paths, constants, column aliases.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with FEEDBACK_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("FEEDBACK_DATA_DIR", str(Path.home() / "Feedback Intelligence")))
EXPORTS_FOLDER = _data_dir / "exports"

# ---------------------------------------------------------------------------
# Remote spreadsheet (Google Sheets values API)
# ---------------------------------------------------------------------------
SHEET_ID = os.environ.get("FEEDBACK_SHEET_ID", "")
SHEET_RANGE = os.environ.get("FEEDBACK_SHEET_RANGE", "Sheet1")
SHEETS_API_BASE = os.environ.get("SHEETS_API_BASE", "https://sheets.googleapis.com/v4/spreadsheets")
SHEETS_TIMEOUT = int(os.environ.get("FEEDBACK_SHEETS_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Defaults & sentinels
# ---------------------------------------------------------------------------
ALL_SUPPLIERS = "All"
UNCATEGORIZED = "Uncategorized"
UNKNOWN_SUPPLIER = "Unknown"

# Only accounts on this domain get past the login collaborator
ALLOWED_EMAIL_DOMAIN = "@fresho.com"

# ---------------------------------------------------------------------------
# Dashboard sizing
# ---------------------------------------------------------------------------
PAGE_SIZE = 20
TOP_CATEGORIES = 10
TOP_SUPPLIERS = 15

# ---------------------------------------------------------------------------
# Canonical fields: (record attribute, primary header, exact aliases, fragments)
#
# Exact aliases are compared case-insensitively against whole header cells.
# Fragments are looked for inside lower-cased header cells (spreadsheet loads).
# Order matters — it is also the column order written back to the sheet.
# ---------------------------------------------------------------------------
CANONICAL_FIELDS = [
    ("date", "Date",
     ["Date", "Date (UTC)", "Feedback Date"],
     ["date"]),
    ("supplier_name", "Supplier Name",
     ["Supplier Name", "Supplier Name (filled)", "Report Company (matched)", "Supplier"],
     ["supplier", "company"]),
    ("label", "Label",
     ["Label", "Theme", "Category"],
     ["label", "theme"]),
    ("sub_label", "Sub Label",
     ["Sub Label", "Sub-Theme"],
     ["sub", "sub-theme"]),
    ("micro_label", "Micro Label",
     ["Micro Label", "Micro-Theme"],
     ["micro", "micro-theme"]),
    ("price", "Price",
     ["Price", "Subscription Amount (converted) AUD sum (matched)", "Value"],
     ["price", "amount", "value"]),
    ("message", "Message",
     ["Message", "Feedback", "Verbatim"],
     ["message", "feedback"]),
    ("link", "Link",
     ["Message Link", "Link", "URL"],
     ["link", "url", "hyperlink"]),
]

SAVE_HEADERS = [primary for _, primary, _, _ in CANONICAL_FIELDS]

# DataFrame column order for the in-memory collection
RECORD_COLUMNS = [attr for attr, _, _, _ in CANONICAL_FIELDS]
