"""Application export – ExportSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Mapping

from tabexport.application.export.errors import UnsupportedFormatError
from tabexport.application.export.request import ExportFormat
from tabexport.config.settings import EnvSettingsLoader, Settings
from tabexport.config.validation import InvalidSettingValueError

__all__ = ["ExportSettings"]


@dataclasses.dataclass
class ExportSettings(Settings):
    """Tunables for the export engine, read from ``EXPORT_*`` variables.

    The defaults reproduce the dashboard's historical output byte for byte.
    """

    _prefix: ClassVar[str] = "EXPORT"

    default_prefix: str = "export"
    default_format: str = "csv"
    csv_bom: bool = True
    list_separator: str = "; "
    json_indent: int = 2
    sheet_name: str = "Sheet1"

    def _validate(self) -> None:
        try:
            ExportFormat.parse(self.default_format)
        except UnsupportedFormatError as exc:
            raise InvalidSettingValueError(
                "default_format", self.default_format, "unknown export format"
            ) from exc
        if self.json_indent < 0:
            raise InvalidSettingValueError("json_indent", self.json_indent, "must be >= 0")
        if not self.sheet_name:
            raise InvalidSettingValueError("sheet_name", self.sheet_name, "must not be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ExportSettings:
        return EnvSettingsLoader(environ).load(cls)
