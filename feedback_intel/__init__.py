"""Feedback Intelligence — customer-feedback ingestion, drill-down and aggregation."""
