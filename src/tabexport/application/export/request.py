"""Application export – ExportFormat, ColumnDef, ExportRequest, ExportArtifact."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Sequence

from tabexport.application.export.errors import UnsupportedFormatError

__all__ = [
    "ColumnDef",
    "ExportArtifact",
    "ExportFormat",
    "ExportRequest",
    "Formatter",
    "Row",
]

Row = Mapping[str, Any]
Formatter = Callable[[Any, Row], Any]


class ExportFormat(str, Enum):
    """Output formats the engine can produce."""

    CSV = "csv"
    JSON = "json"
    EXCEL = "excel"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def parse(cls, value: ExportFormat | str) -> ExportFormat:
        """Resolve *value* case-insensitively against the known aliases.

        ``excel``, ``xls`` and ``xlsx`` all map to :attr:`EXCEL`.

        Raises
        ------
        UnsupportedFormatError
            When *value* is not a string or matches no alias.
        """
        if isinstance(value, ExportFormat):
            return value
        if not isinstance(value, str):
            raise UnsupportedFormatError(value, supported=_ALIASES)
        try:
            return _ALIASES[value.strip().lower()]
        except KeyError:
            raise UnsupportedFormatError(value, supported=_ALIASES) from None


_ALIASES: dict[str, ExportFormat] = {
    "csv": ExportFormat.CSV,
    "json": ExportFormat.JSON,
    "excel": ExportFormat.EXCEL,
    "xls": ExportFormat.EXCEL,
    "xlsx": ExportFormat.EXCEL,
}

# every Excel alias yields the same HTML-table artifact
_EXTENSIONS: dict[ExportFormat, str] = {
    ExportFormat.CSV: "csv",
    ExportFormat.JSON: "json",
    ExportFormat.EXCEL: "xls",
}

_MIME_TYPES: dict[ExportFormat, str] = {
    ExportFormat.CSV: "text/csv;charset=utf-8",
    ExportFormat.JSON: "application/json;charset=utf-8",
    ExportFormat.EXCEL: "application/vnd.ms-excel;charset=utf-8",
}


@dataclass(frozen=True)
class ColumnDef:
    """Defines a single column in an export."""

    key: str                            # row key, or dotted path such as "user.name"
    label: str                          # header text
    formatter: Formatter | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ExportRequest:
    """Describes one export call."""

    rows: Sequence[Row] | None
    columns: Sequence[ColumnDef]
    format: ExportFormat | str = ExportFormat.CSV
    filename_prefix: str = "export"


@dataclass(frozen=True)
class ExportArtifact:
    """Encoded file ready to be handed to a :class:`BlobSink`."""

    content: bytes
    filename: str
    mime_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)
