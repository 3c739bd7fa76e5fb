"""Application export – ExcelHtmlExporter.

Excel and LibreOffice import an HTML table saved with an ``.xls`` extension
as a worksheet. The Office-namespaced ``<head>`` names the sheet and keeps
gridlines on.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from tabexport.application.export.cells import (
    DEFAULT_LIST_SEPARATOR,
    cell_text,
    project_rows,
)
from tabexport.application.export.request import ColumnDef, Row

__all__ = ["ExcelHtmlExporter", "escape_html"]

_HTML_ENTITIES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})

_DOCUMENT_HEAD = (
    '<html xmlns:o="urn:schemas-microsoft-com:office:office" '
    'xmlns:x="urn:schemas-microsoft-com:office:excel" '
    'xmlns="http://www.w3.org/TR/REC-html40">\n'
    "<head>\n"
    '<meta charset="UTF-8">\n'
    "<!--[if gte mso 9]><xml><x:ExcelWorkbook><x:ExcelWorksheets><x:ExcelWorksheet>"
    "<x:Name>{sheet_name}</x:Name>"
    "<x:WorksheetOptions><x:DisplayGridlines/></x:WorksheetOptions>"
    "</x:ExcelWorksheet></x:ExcelWorksheets></x:ExcelWorkbook></xml><![endif]-->\n"
    "</head>\n"
    "<body>\n"
    '<table border="1">'
)
_DOCUMENT_TAIL = "</table></body></html>"
_HEADER_STYLE = "background-color:#f0f0f0;font-weight:bold;"


def escape_html(text: str) -> str:
    """Replace ``& < > " '`` with entities; nothing else is touched."""
    return text.translate(_HTML_ENTITIES)


class ExcelHtmlExporter:
    """Renders rows as an Excel-openable HTML table."""

    def __init__(
        self,
        *,
        sheet_name: str = "Sheet1",
        list_separator: str = DEFAULT_LIST_SEPARATOR,
    ) -> None:
        self._sheet_name = sheet_name
        self._list_separator = list_separator

    def encode(self, rows: Iterable[Row], columns: Sequence[ColumnDef]) -> str:
        parts = [_DOCUMENT_HEAD.format(sheet_name=escape_html(self._sheet_name))]

        parts.append("<tr>")
        for col in columns:
            parts.append(f'<th style="{_HEADER_STYLE}">{escape_html(col.label)}</th>')
        parts.append("</tr>")

        for cells in project_rows(rows, columns):
            parts.append("<tr>")
            for cell in cells:
                parts.append(f"<td>{escape_html(cell_text(cell, self._list_separator))}</td>")
            parts.append("</tr>")

        parts.append(_DOCUMENT_TAIL)
        return "".join(parts)
