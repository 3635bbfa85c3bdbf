"""Config validation errors."""
from __future__ import annotations

from typing import Any

from forge_errors.errors.server import InternalServerError


class ConfigError(InternalServerError):
    """Raised when configuration is invalid or loading failed."""

    default_error_code = "CONFIG_ERROR"

    def __init__(self, message: str, *, error_code: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, error_code=error_code or self.default_error_code, **kwargs)


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_error_code = "MISSING_REQUIRED_SETTING"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            data={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_error_code = "INVALID_SETTING_VALUE"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            data={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
