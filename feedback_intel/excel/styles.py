"""
Colors, fonts, fills, borders and alignments for exported workbooks.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants (dashboard indigo palette)
# ---------------------------------------------------------------------------
INDIGO = "4F46E5"
DARK_INDIGO = "312E81"
LIGHT_INDIGO = "EEF2FF"
SLATE_50 = "F8FAFC"
SLATE_500 = "64748B"
SLATE_900 = "0F172A"
WHITE = "FFFFFF"
TOTAL_ROW_BG = "E0E7FF"
AMBER_50 = "FFFBEB"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=22, bold=True, color=DARK_INDIGO)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=SLATE_500)
SECTION_FONT = Font(name="Calibri", size=14, bold=True, color=DARK_INDIGO)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=SLATE_900)
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=SLATE_900)
KPI_VALUE_FONT = Font(name="Calibri", size=26, bold=True, color=INDIGO)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=SLATE_500)
LABEL_FONT = Font(name="Calibri", size=10, bold=True, color=SLATE_900)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=INDIGO, end_color=INDIGO, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=SLATE_50, end_color=SLATE_50, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=TOTAL_ROW_BG, end_color=TOTAL_ROW_BG, fill_type="solid")
LABEL_FILL = PatternFill(start_color=LIGHT_INDIGO, end_color=LIGHT_INDIGO, fill_type="solid")
DEMO_FILL = PatternFill(start_color=AMBER_50, end_color=AMBER_50, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color="E2E8F0"),
    right=Side(style="thin", color="E2E8F0"),
    top=Side(style="thin", color="E2E8F0"),
    bottom=Side(style="thin", color="E2E8F0"),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=DARK_INDIGO),
    right=Side(style="thin", color=DARK_INDIGO),
    top=Side(style="thin", color=DARK_INDIGO),
    bottom=Side(style="medium", color=DARK_INDIGO),
)
TOTAL_BORDER = Border(
    top=Side(style="medium", color=SLATE_500),
    bottom=Side(style="medium", color=SLATE_500),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)

# Number formats by column type
NUMBER_FORMATS = {
    "currency": '"$"#,##0.00',
    "number": "#,##0",
    "percent": '0.0"%"',
}
