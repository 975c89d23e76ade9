"""Parsing, header mapping, normalisation, the in-memory store and the dashboard session."""
