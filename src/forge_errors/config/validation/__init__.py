"""Config validation errors."""
from forge_errors.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
