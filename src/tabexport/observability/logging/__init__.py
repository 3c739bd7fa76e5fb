"""Observability – structured logging helpers."""
from tabexport.observability.logging.factory import JsonLoggerFactory
from tabexport.observability.logging.processors import ExportContextProcessor, get_logger

__all__ = [
    "ExportContextProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
