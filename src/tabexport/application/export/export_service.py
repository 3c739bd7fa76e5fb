"""Application export – ExportService dispatches to the right encoder."""
from __future__ import annotations

import time
from typing import Sequence

from tabexport.application.export.csv_export import CsvExporter
from tabexport.application.export.errors import UnsupportedFormatError
from tabexport.application.export.excel_export import ExcelHtmlExporter
from tabexport.application.export.filename import generate_filename
from tabexport.application.export.json_export import JsonExporter
from tabexport.application.export.request import (
    ColumnDef,
    ExportArtifact,
    ExportFormat,
    ExportRequest,
    Row,
)
from tabexport.application.export.settings import ExportSettings
from tabexport.application.export.sink import BlobSink
from tabexport.kernel.time import Clock, SystemClock
from tabexport.observability.logging import get_logger

__all__ = ["ExportService", "export_data"]


class ExportService:
    """Encodes rows in the requested format and hands the file to a sink.

    :meth:`export` and its shortcuts report "nothing to do" by returning
    ``False`` (no rows, unknown format) and never call the sink in that case.
    Exceptions raised by column formatters or by the sink propagate.
    """

    def __init__(
        self,
        sink: BlobSink,
        *,
        clock: Clock | None = None,
        settings: ExportSettings | None = None,
    ) -> None:
        self._sink = sink
        self._clock = clock or SystemClock()
        self._settings = settings or ExportSettings()
        self._csv_exporter = CsvExporter(
            bom=self._settings.csv_bom,
            list_separator=self._settings.list_separator,
        )
        self._excel_exporter = ExcelHtmlExporter(
            sheet_name=self._settings.sheet_name,
            list_separator=self._settings.list_separator,
        )
        self._json_exporter = JsonExporter(indent=self._settings.json_indent)
        self._log = get_logger(__name__)

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    def render(self, request: ExportRequest) -> ExportArtifact:
        """Encode *request* without emitting it.

        Raises
        ------
        UnsupportedFormatError
            When ``request.format`` matches no known alias.
        """
        fmt = ExportFormat.parse(request.format)
        rows = list(request.rows or ())

        if fmt is ExportFormat.CSV:
            text = self._csv_exporter.encode(rows, request.columns)
        elif fmt is ExportFormat.JSON:
            text = self._json_exporter.encode(rows)
        else:
            text = self._excel_exporter.encode(rows, request.columns)

        return ExportArtifact(
            content=text.encode("utf-8"),
            filename=generate_filename(request.filename_prefix, fmt.extension, self._clock),
            mime_type=fmt.mime_type,
        )

    def export(self, request: ExportRequest) -> bool:
        try:
            fmt = ExportFormat.parse(request.format)
        except UnsupportedFormatError as exc:
            self._log.error("export.unsupported_format", format=request.format, error=exc.to_dict())
            return False

        if not request.rows:
            self._log.warning("export.no_data", format=fmt.value)
            return False

        start = time.monotonic()
        artifact = self.render(request)
        self._sink.emit(artifact.content, artifact.filename, artifact.mime_type)
        self._log.info(
            "export.completed",
            format=fmt.value,
            filename=artifact.filename,
            rows=len(request.rows),
            bytes=artifact.size_bytes,
            duration_ms=round((time.monotonic() - start) * 1000, 3),
        )
        return True

    def export_data(
        self,
        rows: Sequence[Row] | None,
        columns: Sequence[ColumnDef],
        format: ExportFormat | str | None = None,  # noqa: A002
        filename_prefix: str | None = None,
    ) -> bool:
        return self.export(
            ExportRequest(
                rows=rows,
                columns=columns,
                format=self._settings.default_format if format is None else format,
                filename_prefix=(
                    self._settings.default_prefix if filename_prefix is None else filename_prefix
                ),
            )
        )

    def export_csv(
        self,
        rows: Sequence[Row] | None,
        columns: Sequence[ColumnDef],
        filename_prefix: str | None = None,
    ) -> bool:
        return self.export_data(rows, columns, ExportFormat.CSV, filename_prefix)

    def export_json(self, rows: Sequence[Row] | None, filename_prefix: str | None = None) -> bool:
        return self.export_data(rows, (), ExportFormat.JSON, filename_prefix)

    def export_excel(
        self,
        rows: Sequence[Row] | None,
        columns: Sequence[ColumnDef],
        filename_prefix: str | None = None,
    ) -> bool:
        return self.export_data(rows, columns, ExportFormat.EXCEL, filename_prefix)


def export_data(
    rows: Sequence[Row] | None,
    columns: Sequence[ColumnDef],
    format: ExportFormat | str = "csv",  # noqa: A002
    filename_prefix: str = "export",
    *,
    sink: BlobSink,
    clock: Clock | None = None,
) -> bool:
    """One-shot export with default settings; see :meth:`ExportService.export_data`."""
    return ExportService(sink, clock=clock).export_data(rows, columns, format, filename_prefix)
