"""Workbook exports of the dashboard view."""
