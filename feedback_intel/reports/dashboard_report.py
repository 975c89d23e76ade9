"""
Dashboard Report — KPIs, current chart, timeline and the filtered feedback list.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from feedback_intel.analytics import drilldown
from feedback_intel.analytics.common import pct_of_total, sanitize_for_json
from feedback_intel.data.schemas import Granularity
from feedback_intel.data.session import DashboardSession
from feedback_intel.excel.writer import Column, ExcelWriter


CHART_COLS = [
    Column("name", "text", "Name"),
    Column("count", "number", "Feedback Items"),
    Column("share", "percent", "% of View"),
]

TIMELINE_COLS = [
    Column("date", "text", "Period"),
    Column("count", "number", "Feedback Items"),
]

FEEDBACK_COLS = [
    Column("date", "text", "Date"),
    Column("supplier_name", "text", "Supplier Name"),
    Column("label", "text", "Label"),
    Column("sub_label", "text", "Sub Label"),
    Column("micro_label", "text", "Micro Label"),
    Column("price", "currency", "Price"),
    Column("message", "wrap", "Message"),
    Column("link", "link", "Link"),
]


def describe_filters(session: DashboardSession) -> list[tuple[str, str]]:
    state = session.state
    trail = " › ".join(c["name"] for c in drilldown.breadcrumbs(state))
    dates = f"{state.date_start or 'start'} to {state.date_end or 'end'}"
    return [
        ("Supplier", state.selected_supplier),
        ("View", drilldown.chart_title(state)),
        ("Drill-down", trail),
        ("Date range", dates if (state.date_start or state.date_end) else "All dates"),
        ("Data source", "Demo sample" if session.demo_mode else "Imported data"),
    ]


def generate_json(session: DashboardSession, granularity: Granularity = Granularity.DAY) -> dict:
    view = session.view(granularity)
    total = view.kpis["count"]
    chart = [dict(row, share=round(pct_of_total(row["count"], total), 1)) for row in view.chart]
    return sanitize_for_json({
        "generated_at": f"{datetime.now():%Y-%m-%d %H:%M}",
        "date_range": session.store.date_range(),
        "filters": dict(describe_filters(session)),
        "kpis": view.kpis,
        "title": drilldown.chart_title(view.state),
        "chart": chart,
        "timeline": view.timeline,
        "feedback": session.filtered().to_dict("records"),
    })


def build_workbook(session: DashboardSession, granularity: Granularity = Granularity.DAY) -> ExcelWriter:
    data = generate_json(session, granularity)
    k = data["kpis"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    row = ew.write_title(
        ws, "FEEDBACK INTELLIGENCE",
        f"Customer Feedback Report  |  {data['date_range']}  |  Generated {data['generated_at']}",
    )
    if session.demo_mode:
        row = ew.write_banner(ws, row, "Demo Mode: sample data only. Import a CSV to report on real feedback.")

    row = ew.write_section(ws, row, "OVERVIEW")
    row = ew.write_kpi_row(ws, row, [
        (k["count"], "FEEDBACK ITEMS", "number"),
        (k["revenue"], "LINKED REVENUE RISK", "currency"),
        (k["suppliers"], "ACTIVE SUPPLIERS", "number"),
    ])
    row = ew.write_section(ws, row, "ACTIVE FILTERS")
    ew.write_key_values(ws, row, describe_filters(session))

    ws_chart = ew.add_sheet("Chart Data")
    ew.write_table(ws_chart, 1, CHART_COLS, data["chart"], show_total=True)

    ws_time = ew.add_sheet(f"Timeline ({granularity.value})")
    ew.write_table(ws_time, 1, TIMELINE_COLS, data["timeline"], show_total=True)

    ws_items = ew.add_sheet("Feedback")
    ew.write_table(ws_items, 1, FEEDBACK_COLS, data["feedback"], autofit=False)
    for letter, width in zip("ABCDEFGH", (12, 28, 28, 26, 26, 12, 80, 40)):
        ws_items.column_dimensions[letter].width = width

    return ew


def generate_excel(
    session: DashboardSession,
    output_path: str | Path,
    granularity: Granularity = Granularity.DAY,
) -> Path:
    return build_workbook(session, granularity).save(output_path)
