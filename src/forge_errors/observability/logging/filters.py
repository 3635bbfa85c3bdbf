"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "access_token", "refresh_token",
    "api_key", "apikey", "authorization", "cookie", "credit_card", "card_number", "cvv",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Keys are matched case-insensitively. Non-string keys never match and
    are passed through unchanged.

    An instance is also a structlog processor: calling it with
    ``(logger, method_name, event_dict)`` returns the deep-redacted event.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: Iterable[str] | None = None) -> None:
        fields = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(f.lower() for f in fields)

    @classmethod
    def with_extra(cls, extra_fields: Iterable[str]) -> SensitiveFieldsFilter:
        """Default fields plus *extra_fields*."""
        return cls(DEFAULT_SENSITIVE_FIELDS | {f.lower() for f in extra_fields})

    def is_sensitive(self, key: Any) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: Mapping[Any, Any]) -> dict[Any, Any]:
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: Mapping[Any, Any]) -> dict[Any, Any]:
        """Recursively redact nested mappings."""
        result: dict[Any, Any] = {}
        for k, v in data.items():
            if self.is_sensitive(k):
                result[k] = self.REDACTED
            elif isinstance(v, Mapping):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
