"""Observability – structured logging helpers."""
from forge_errors.observability.logging.factory import JsonLoggerFactory, get_logger
from forge_errors.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
