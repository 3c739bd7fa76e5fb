"""Application export – error types."""
from __future__ import annotations

from typing import Any, Iterable

from tabexport.kernel.errors import ApplicationError

__all__ = ["ExportError", "UnsupportedFormatError"]


class ExportError(ApplicationError):
    """Base class for failures raised by the export engine."""

    default_code = "export_error"


class UnsupportedFormatError(ExportError):
    """The requested format matches none of the known aliases."""

    default_code = "unsupported_format"

    def __init__(self, format: Any, *, supported: Iterable[str] = ()) -> None:  # noqa: A002
        supported = sorted(supported)
        super().__init__(
            f"Unsupported export format: {format!r}",
            detail={"format": str(format), "supported": supported},
        )
        self.format = format
        self.supported = supported
