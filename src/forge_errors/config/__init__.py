"""Config – 12-factor settings for the error handlers."""

from forge_errors.config.settings import (
    EnvSettingsLoader,
    ErrorHandlerSettings,
    Settings,
    SettingIssue,
    SettingsLoader,
    SettingsValidator,
)
from forge_errors.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ErrorHandlerSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingIssue",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
]
