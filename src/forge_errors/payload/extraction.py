"""Payload extraction from arbitrary caught values.

Two families, all total (they never raise):

* ``extract_*_payload`` return ``None`` unless the value belongs to the
  matching branch of the hierarchy, so callers can tell "one of ours"
  from "unknown".
* ``extract_*_payload_or_default`` always return a payload.  Values outside
  the branch are read field by field (``status_code``, ``message``,
  ``error_code``, ``data``) and every missing or ill-typed field falls back
  to the branch default.
"""
from __future__ import annotations

from typing import Any, Mapping

from forge_errors.payload.predicates import is_base_error, is_client_error, is_server_error
from forge_errors.types import ErrorPayload

CLIENT_DEFAULTS: ErrorPayload = {
    "message": "Bad Request",
    "status_code": 400,
    "error_code": "BAD_REQUEST",
}

SERVER_DEFAULTS: ErrorPayload = {
    "message": "Something Went Wrong",
    "status_code": 500,
    "error_code": "INTERNAL_SERVER_ERROR",
}

_MISSING = object()

# camelCase spellings accepted when reading foreign values
_ALIASES = {"status_code": "statusCode", "error_code": "errorCode"}


def _read(source: Any, name: str) -> Any:
    """Read *name* off *source* as a key or attribute; never raises."""
    names = (name, _ALIASES[name]) if name in _ALIASES else (name,)
    for candidate in names:
        try:
            if isinstance(source, Mapping):
                value = source.get(candidate, _MISSING)
            else:
                value = getattr(source, candidate, _MISSING)
        except Exception:  # noqa: BLE001 – malformed property / __getattr__
            value = _MISSING
        if value is not _MISSING and value is not None:
            return value
    return _MISSING


def _payload_from_fields(source: Any, defaults: ErrorPayload) -> ErrorPayload:
    status_code = _read(source, "status_code")
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        status_code = defaults["status_code"]

    message = _read(source, "message")
    if not isinstance(message, str):
        message = defaults["message"]

    error_code = _read(source, "error_code")
    if not isinstance(error_code, str):
        error_code = defaults["error_code"]

    payload: ErrorPayload = {
        "message": message,
        "error_code": error_code,
        "status_code": status_code,
    }
    data = _read(source, "data")
    if isinstance(data, Mapping) and data:
        payload["data"] = dict(data)
    return payload


def extract_base_payload(error: Any) -> ErrorPayload | None:
    """Payload of any forge error, ``None`` otherwise."""
    if is_base_error(error):
        return error.build_error_payload()
    return None


def extract_client_payload(error: Any) -> ErrorPayload | None:
    """Payload of a 4xx error, ``None`` otherwise."""
    if is_client_error(error):
        return error.build_error_payload()
    return None


def extract_server_payload(error: Any) -> ErrorPayload | None:
    """Payload of a 5xx error, ``None`` otherwise."""
    if is_server_error(error):
        return error.build_error_payload()
    return None


def extract_client_payload_or_default(error: Any) -> ErrorPayload:
    """Always return a payload, defaulting to ``400 BAD_REQUEST``.

    A server error is not a client error, so it takes the field-reading
    branch; since it exposes ``status_code`` / ``message`` / ``error_code``,
    its own values end up in the result.
    """
    if is_client_error(error):
        return error.build_error_payload()
    return _payload_from_fields(error, CLIENT_DEFAULTS)


def extract_server_payload_or_default(error: Any) -> ErrorPayload:
    """Always return a payload, defaulting to ``500 INTERNAL_SERVER_ERROR``."""
    if is_server_error(error):
        return error.build_error_payload()
    return _payload_from_fields(error, SERVER_DEFAULTS)


def extract_generic_payload_or_default(error: Any) -> ErrorPayload:
    """Payload of any forge error; unknown values get the server defaults."""
    if is_base_error(error):
        return error.build_error_payload()
    return _payload_from_fields(error, SERVER_DEFAULTS)


__all__ = [
    "CLIENT_DEFAULTS",
    "SERVER_DEFAULTS",
    "extract_base_payload",
    "extract_client_payload",
    "extract_client_payload_or_default",
    "extract_generic_payload_or_default",
    "extract_server_payload",
    "extract_server_payload_or_default",
]
