"""Application export – CsvExporter."""
from __future__ import annotations

from typing import Iterable, Sequence

from tabexport.application.export.cells import (
    DEFAULT_LIST_SEPARATOR,
    cell_text,
    project_rows,
)
from tabexport.application.export.request import ColumnDef, Row

__all__ = ["CsvExporter", "escape_csv_value"]

BOM = "\ufeff"
_QUOTE_TRIGGERS = (",", "\n", '"')


def escape_csv_value(text: str) -> str:
    """Quote *text* iff it contains a comma, a newline or a double quote."""
    if any(ch in text for ch in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


class CsvExporter:
    """Renders rows into CSV text (comma-separated, ``\\n`` line endings)."""

    def __init__(
        self,
        *,
        bom: bool = True,
        list_separator: str = DEFAULT_LIST_SEPARATOR,
    ) -> None:
        self._bom = bom
        self._list_separator = list_separator

    def encode(self, rows: Iterable[Row], columns: Sequence[ColumnDef]) -> str:
        """Return the complete CSV document, header line first."""
        lines = [",".join(escape_csv_value(col.label) for col in columns)]
        for cells in project_rows(rows, columns):
            lines.append(
                ",".join(escape_csv_value(cell_text(c, self._list_separator)) for c in cells)
            )
        body = "\n".join(lines)
        return BOM + body if self._bom else body
