#!/usr/bin/env python3
"""
Feedback Intelligence CLI — summaries, Excel exports and the API server.

USAGE:
  python -m feedback_intel.cli summary feedback.csv                       # KPIs, top themes, timeline
  python -m feedback_intel.cli summary feedback.csv --granularity month
  python -m feedback_intel.cli summary feedback.csv --supplier "Parisi" --label "Pricing"

  python -m feedback_intel.cli export feedback.csv                        # Excel report
  python -m feedback_intel.cli export feedback.csv --output ./report.xlsx

  python -m feedback_intel.cli serve                                      # Start API server
  python -m feedback_intel.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from feedback_intel.analytics import aggregations, drilldown
from feedback_intel.config import EXPORTS_FOLDER, TOP_SUPPLIERS
from feedback_intel.data.schemas import Granularity
from feedback_intel.data.session import DashboardSession


def _load_session(args) -> DashboardSession | None:
    """Import the CSV and apply any --supplier/--label/--sub-label/date filters."""
    session = DashboardSession()
    outcome = session.import_file(args.file)
    if not outcome.imported:
        print(f"  No feedback rows found in {args.file}")
        return None

    if getattr(args, "supplier", None):
        session.dispatch(drilldown.SelectSupplier(args.supplier))
    if getattr(args, "label", None):
        session.dispatch(drilldown.SelectBar(args.label))
        if getattr(args, "sub_label", None):
            session.dispatch(drilldown.SelectBar(args.sub_label))
    if getattr(args, "start", None) or getattr(args, "end", None):
        session.dispatch(drilldown.event_from_payload(
            {"type": "set_date_range", "start": args.start, "end": args.end}
        ))
    return session


def cmd_summary(args) -> int:
    """Print KPIs, the current bar chart, top suppliers and the timeline."""
    print("\n" + "=" * 70)
    print("  FEEDBACK INTELLIGENCE — SUMMARY")
    print("=" * 70)

    session = _load_session(args)
    if session is None:
        return 1

    granularity = Granularity(args.granularity)
    view = session.view(granularity)
    k = view.kpis

    print(f"\n  Date range:       {session.store.date_range()}")
    print(f"  Feedback items:   {k['count']:,}")
    print(f"  Linked revenue:   ${k['revenue']:,.0f}")
    print(f"  Active suppliers: {k['suppliers']:,}")

    title = drilldown.chart_title(view.state)
    print(f"\n{title.upper()} ({len(view.chart)}):\n")
    for i, row in enumerate(view.chart, 1):
        print(f"{i:<4}{row['name'][:48]:<50}{row['count']:>6}")

    suppliers = aggregations.count_by(session.filtered(), "supplier_name", TOP_SUPPLIERS)
    print(f"\nTOP SUPPLIERS ({len(suppliers)}):\n")
    for i, row in enumerate(suppliers, 1):
        print(f"{i:<4}{row['name'][:48]:<50}{row['count']:>6}")

    print(f"\nTIMELINE ({granularity.value}):\n")
    for row in view.timeline:
        print(f"    {row['date']:<12}{row['count']:>6}")
    print()
    return 0


def cmd_export(args) -> int:
    """Write the Excel report for the (optionally filtered) import."""
    from feedback_intel.reports.dashboard_report import generate_excel

    session = _load_session(args)
    if session is None:
        return 1

    output = Path(args.output) if args.output else (
        EXPORTS_FOLDER / f"Feedback_Report_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    )
    path = generate_excel(session, output, Granularity(args.granularity))
    print(f"\n  Report saved to: {path}\n")
    return 0


def cmd_serve(args) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("feedback_intel.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", help="CSV/TSV feedback export")
    p.add_argument("--granularity", choices=[g.value for g in Granularity], default="day")
    p.add_argument("--supplier", help="Only this supplier")
    p.add_argument("--label", help="Drill into this label")
    p.add_argument("--sub-label", dest="sub_label", help="Then into this sub-label (needs --label)")
    p.add_argument("--start", help="First day to include (YYYY-MM-DD)")
    p.add_argument("--end", help="Last day to include (YYYY-MM-DD)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="feedback-intel", description="Feedback Intelligence")
    sub = parser.add_subparsers(dest="command", required=True)

    p_summary = sub.add_parser("summary", help="Print KPIs and top themes for a CSV export")
    _add_filter_args(p_summary)
    p_summary.set_defaults(func=cmd_summary)

    p_export = sub.add_parser("export", help="Write an Excel report for a CSV export")
    _add_filter_args(p_export)
    p_export.add_argument("--output", "-o", help="Output .xlsx path")
    p_export.set_defaults(func=cmd_export)

    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default="0.0.0.0")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true")
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ValueError, OSError) as exc:
        print(f"  Error: {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
