"""Shared payload and constructor-input types."""
from __future__ import annotations

from typing import Any, Mapping, NotRequired, TypedDict, Union


class ErrorPayload(TypedDict):
    """Normalized error payload, ready for serialization by the host."""

    message: str
    status_code: int
    error_code: str
    data: NotRequired[Mapping[str, Any]]


class ErrorOverrides(TypedDict, total=False):
    """Structured constructor input for leaf errors."""

    message: str
    data: Mapping[str, Any] | None
    status_code: int
    error_code: str


ErrorInput = Union[str, ErrorOverrides, Mapping[str, Any], None]


__all__ = ["ErrorInput", "ErrorOverrides", "ErrorPayload"]
