"""Observability – JsonLoggerFactory and get_logger."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from forge_errors.config import ErrorHandlerSettings
from forge_errors.observability.logging.filters import SensitiveFieldsFilter


class JsonLoggerFactory:
    """Route structlog and stdlib records through one JSON handler on the root logger.

    The root level comes from ``settings.log_level``. Every event is
    redacted with the default sensitive fields plus ``settings.redact_fields``,
    nested mappings such as an error's ``data`` included. Records from
    plain stdlib loggers (uvicorn, starlette) get the same treatment.
    """

    @staticmethod
    def shared_processors(redactor: SensitiveFieldsFilter) -> list[Any]:
        return [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            redactor,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

    @classmethod
    def configure(cls, settings: ErrorHandlerSettings | None = None) -> None:
        settings = settings or ErrorHandlerSettings()
        redactor = SensitiveFieldsFilter.with_extra(settings.redact_fields)

        structlog.configure(
            processors=[
                *cls.shared_processors(redactor),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=cls.shared_processors(redactor),
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(logging.getLevelNamesMapping()[settings.log_level])


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JsonLoggerFactory", "get_logger"]
