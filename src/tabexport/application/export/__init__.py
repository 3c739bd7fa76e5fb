"""Application export – tabular export to CSV, JSON and Excel-HTML."""
from tabexport.application.export.cells import cell_text, lookup, resolve_cell
from tabexport.application.export.csv_export import CsvExporter, escape_csv_value
from tabexport.application.export.errors import ExportError, UnsupportedFormatError
from tabexport.application.export.excel_export import ExcelHtmlExporter, escape_html
from tabexport.application.export.export_service import ExportService, export_data
from tabexport.application.export.filename import generate_filename
from tabexport.application.export.json_export import JsonExporter
from tabexport.application.export.presets import ASSET_EXPORT_COLUMNS
from tabexport.application.export.request import (
    ColumnDef,
    ExportArtifact,
    ExportFormat,
    ExportRequest,
)
from tabexport.application.export.settings import ExportSettings
from tabexport.application.export.sink import BlobSink, DirectoryBlobSink

__all__ = [
    "ASSET_EXPORT_COLUMNS",
    "BlobSink",
    "ColumnDef",
    "CsvExporter",
    "DirectoryBlobSink",
    "ExcelHtmlExporter",
    "ExportArtifact",
    "ExportError",
    "ExportFormat",
    "ExportRequest",
    "ExportService",
    "ExportSettings",
    "JsonExporter",
    "UnsupportedFormatError",
    "cell_text",
    "escape_csv_value",
    "escape_html",
    "export_data",
    "generate_filename",
    "lookup",
    "resolve_cell",
]
