"""Wire-format helpers for hosts that serialize payloads."""
from __future__ import annotations

from typing import Any, Literal

from forge_errors.types import ErrorPayload

WireFormat = Literal["snake", "camel"]

_CAMEL_KEYS = {"status_code": "statusCode", "error_code": "errorCode"}


def to_wire_payload(payload: ErrorPayload, wire_format: WireFormat = "snake") -> dict[str, Any]:
    """Return *payload* as a plain dict with keys in *wire_format*.

    ``"camel"`` renames ``status_code`` / ``error_code`` to
    ``statusCode`` / ``errorCode``; ``data`` and ``message`` are unchanged.
    """
    if wire_format == "snake":
        return dict(payload)
    if wire_format == "camel":
        return {_CAMEL_KEYS.get(k, k): v for k, v in payload.items()}
    raise ValueError(f"Unknown wire format: {wire_format!r}")


__all__ = ["WireFormat", "to_wire_payload"]
