"""Config settings – Settings base class and error-handler settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from forge_errors.config.settings.validator import SettingsValidator
from forge_errors.config.validation import InvalidSettingValueError

WIRE_FORMATS = ("snake", "camel")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Construction runs :class:`SettingsValidator` over the declared fields and
    raises :class:`InvalidSettingValueError` for the first mismatch.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation; call ``super()._validate()`` first."""
        issues = SettingsValidator().validate(self)
        if issues:
            name, value, reason = issues[0]
            raise InvalidSettingValueError(name, value, reason)


@dataclasses.dataclass
class ErrorHandlerSettings(Settings):
    """Behaviour of the framework error handlers and of the JSON log setup.

    Read from ``FORGE_ERRORS_*`` environment variables by
    :class:`~forge_errors.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "FORGE_ERRORS"

    log_client_errors: bool = False
    log_server_errors: bool = True
    log_level: str = dataclasses.field(default="INFO", metadata={"choices": LOG_LEVELS})
    wire_format: str = dataclasses.field(default="snake", metadata={"choices": WIRE_FORMATS})
    redact_fields: list[str] = dataclasses.field(default_factory=list)


__all__ = ["ErrorHandlerSettings", "LOG_LEVELS", "Settings", "WIRE_FORMATS"]
