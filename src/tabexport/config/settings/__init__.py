"""Config settings – 12-factor env-based configuration."""
from tabexport.config.settings.base import Settings
from tabexport.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
