"""Application export – column presets for the scan dashboard tables."""
from __future__ import annotations

from tabexport.application.export.request import ColumnDef

__all__ = ["ASSET_EXPORT_COLUMNS"]

ASSET_EXPORT_COLUMNS: dict[str, tuple[ColumnDef, ...]] = {
    "inventory": (
        ColumnDef("host", "Host"),
        ColumnDef("port", "Port"),
        ColumnDef("ip", "IP"),
        ColumnDef("title", "Title"),
        ColumnDef("status", "Status Code"),
        ColumnDef("technologies", "Technologies"),
        ColumnDef("labels", "Labels"),
        ColumnDef("lastUpdated", "Last Updated"),
    ),
    "groups": (
        ColumnDef("domain", "Domain"),
        ColumnDef("totalServices", "Services"),
        ColumnDef("status", "Status"),
        ColumnDef("duration", "Duration"),
        ColumnDef("lastUpdated", "Last Updated"),
    ),
    "screenshots": (
        ColumnDef("host", "Host"),
        ColumnDef("port", "Port"),
        ColumnDef("ip", "IP"),
        ColumnDef("title", "Title"),
        ColumnDef("status", "Status Code"),
        ColumnDef("technologies", "Technologies"),
        ColumnDef("lastUpdated", "Last Updated"),
    ),
    "vulnerabilities": (
        ColumnDef("name", "Vulnerability"),
        ColumnDef("severity", "Severity"),
        ColumnDef("host", "Host"),
        ColumnDef("port", "Port"),
        ColumnDef("template", "Template"),
        ColumnDef("description", "Description"),
        ColumnDef("createTime", "Discovered At"),
    ),
    "dir_scans": (
        ColumnDef("url", "URL"),
        ColumnDef("path", "Path"),
        ColumnDef("status", "Status Code"),
        ColumnDef("size", "Size"),
        ColumnDef("title", "Title"),
        ColumnDef("createTime", "Discovered At"),
    ),
}
