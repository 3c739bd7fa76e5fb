"""Observability – structured logging for export runs."""
