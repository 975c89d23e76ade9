"""Filters, aggregations, drill-down state machine and pagination."""
