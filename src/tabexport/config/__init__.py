"""Config – 12-factor settings and their validation errors."""

from tabexport.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from tabexport.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
