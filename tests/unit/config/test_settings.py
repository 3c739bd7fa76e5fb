"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from tabexport.application.export import ExportSettings
from tabexport.config.settings import EnvSettingsLoader, Settings
from tabexport.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    ratio: float = 0.5
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    download_dir: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.75")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.75

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com,")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings == AppSettings()

    def test_explicit_mapping(self) -> None:
        settings = EnvSettingsLoader({"APP_HOST": "mapped"}).load(AppSettings)
        assert settings.host == "mapped"

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert info.value.setting_name == "REQ_DOWNLOAD_DIR"
        assert isinstance(info.value, ConfigError)

    def test_uncoercible_value_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)
        assert info.value.setting_name == "APP_PORT"
        assert info.value.value == "eighty"


# ---------------------------------------------------------------------------
# ExportSettings
# ---------------------------------------------------------------------------


class TestExportSettings:
    def test_defaults(self) -> None:
        settings = ExportSettings()
        assert settings.default_prefix == "export"
        assert settings.default_format == "csv"
        assert settings.csv_bom is True
        assert settings.list_separator == "; "
        assert settings.json_indent == 2
        assert settings.sheet_name == "Sheet1"

    def test_from_env(self) -> None:
        settings = ExportSettings.from_env(
            {
                "EXPORT_DEFAULT_PREFIX": "scan",
                "EXPORT_DEFAULT_FORMAT": "XLSX",
                "EXPORT_CSV_BOM": "false",
                "EXPORT_JSON_INDENT": "4",
                "EXPORT_SHEET_NAME": "Assets",
            }
        )
        assert settings.default_prefix == "scan"
        assert settings.default_format == "XLSX"
        assert settings.csv_bom is False
        assert settings.json_indent == 4
        assert settings.sheet_name == "Assets"

    def test_from_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPORT_LIST_SEPARATOR", " | ")
        assert ExportSettings.from_env().list_separator == " | "

    def test_unknown_default_format_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="default_format"):
            ExportSettings(default_format="pdf")

    def test_unknown_default_format_from_env(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExportSettings.from_env({"EXPORT_DEFAULT_FORMAT": "pdf"})

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="json_indent"):
            ExportSettings(json_indent=-1)

    def test_empty_sheet_name_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            ExportSettings(sheet_name="")
        assert info.value.code == "invalid_setting_value"
        assert info.value.detail["setting"] == "sheet_name"
