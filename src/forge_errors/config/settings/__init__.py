"""Config settings – 12-factor env-based configuration."""
from forge_errors.config.settings.base import (
    LOG_LEVELS,
    WIRE_FORMATS,
    ErrorHandlerSettings,
    Settings,
)
from forge_errors.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from forge_errors.config.settings.validator import SettingIssue, SettingsValidator

__all__ = [
    "EnvSettingsLoader",
    "ErrorHandlerSettings",
    "LOG_LEVELS",
    "SettingIssue",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
    "WIRE_FORMATS",
]
