"""Payload extraction, type predicates and wire-format helpers."""
from forge_errors.payload.extraction import (
    CLIENT_DEFAULTS,
    SERVER_DEFAULTS,
    extract_base_payload,
    extract_client_payload,
    extract_client_payload_or_default,
    extract_generic_payload_or_default,
    extract_server_payload,
    extract_server_payload_or_default,
)
from forge_errors.payload.predicates import is_base_error, is_client_error, is_server_error
from forge_errors.payload.wire import WireFormat, to_wire_payload

__all__ = [
    "CLIENT_DEFAULTS",
    "SERVER_DEFAULTS",
    "WireFormat",
    "extract_base_payload",
    "extract_client_payload",
    "extract_client_payload_or_default",
    "extract_generic_payload_or_default",
    "extract_server_payload",
    "extract_server_payload_or_default",
    "is_base_error",
    "is_client_error",
    "is_server_error",
    "to_wire_payload",
]
