"""Root error classes for the forge-errors hierarchy."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Mapping

from forge_errors.catalog import ErrorKind
from forge_errors.types import ErrorInput, ErrorPayload


class BaseForgeError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        status_code: HTTP status code.
        error_code: Machine-readable SCREAMING_SNAKE_CASE identifier.
        data: Extra context (serialisable mapping).
        cause: Original exception that triggered this error.
    """

    kind: ClassVar[ErrorKind | None] = None

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: str,
        data: Mapping[str, Any] | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.data: dict[str, Any] | None = dict(data) if data is not None else None
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a single-line JSON representation.

        Falls back to :func:`repr` when ``data`` cannot be encoded
        (non-string keys such as tuples, circular references).
        """
        import json
        try:
            return json.dumps(self.build_error_payload(), ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            return repr(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"error_code={self.error_code!r}, message={self.message!r})"
        )

    def build_error_payload(self) -> ErrorPayload:
        """Return ``{message, error_code, status_code, data?}``.

        ``data`` is only included when it was supplied and is non-empty.
        """
        payload: ErrorPayload = {
            "message": self.message,
            "error_code": self.error_code,
            "status_code": self.status_code,
        }
        if self.data:
            payload["data"] = dict(self.data)
        return payload

    def to_dict(self) -> ErrorPayload:
        """Alias of :meth:`build_error_payload`."""
        return self.build_error_payload()


class ForgeError(BaseForgeError):
    """General-purpose error with no catalog binding.

    All of ``message``, ``status_code`` and ``error_code`` must be given.
    """


@dataclasses.dataclass(frozen=True)
class ResolvedError:
    """Constructor input after field-level defaulting."""

    message: str
    status_code: int
    error_code: str
    data: Mapping[str, Any] | None


_CAMEL_ALIASES = {"statusCode": "status_code", "errorCode": "error_code"}


def _normalize_input(value: ErrorInput | object) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, str):
        return {"message": value}
    if isinstance(value, Mapping):
        return {_CAMEL_ALIASES.get(k, k): v for k, v in value.items()}
    return {"message": str(value)}


def resolve_error_input(
    kind: ErrorKind,
    value: ErrorInput | object = None,
    **overrides: Any,
) -> ResolvedError:
    """Resolve a leaf constructor input against the catalog entry of *kind*.

    *value* is a bare message, a mapping ``{message, data?, status_code?,
    error_code?}`` or ``None``.  Keyword *overrides* that are not ``None``
    win over the mapping.  Every field the caller leaves out, or supplies
    with the wrong type, falls back to the catalog entry.
    """
    entry = kind.entry
    fields = _normalize_input(value)
    fields.update({k: v for k, v in overrides.items() if v is not None})

    message = fields.get("message")
    if message is None:
        message = entry.message
    elif not isinstance(message, str):
        message = str(message)

    status_code = fields.get("status_code")
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        status_code = entry.status_code

    error_code = fields.get("error_code")
    if not isinstance(error_code, str):
        error_code = entry.error_code

    data = fields.get("data")
    if not isinstance(data, Mapping):
        data = None

    return ResolvedError(message, status_code, error_code, data)


class CatalogBoundError(BaseForgeError):
    """Error whose defaults come from the catalog entry of :attr:`kind`.

    Accepts a bare message, a structured override mapping, keyword
    overrides, or nothing at all::

        NotFoundError()
        NotFoundError("Order 42 not found")
        NotFoundError({"message": "gone", "data": {"order_id": 42}})
        NotFoundError(data={"order_id": 42}, error_code="ORDER_NOT_FOUND")
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        value: ErrorInput = None,
        /,
        *,
        message: str | None = None,
        data: Mapping[str, Any] | None = None,
        status_code: int | None = None,
        error_code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        resolved = resolve_error_input(
            self.kind,
            value,
            message=message,
            data=data,
            status_code=status_code,
            error_code=error_code,
        )
        super().__init__(
            resolved.message,
            resolved.status_code,
            resolved.error_code,
            resolved.data,
            cause=cause,
        )


class BaseClientError(CatalogBoundError):
    """HTTP 4xx – the request was at fault.

    Constructed directly, defaults to the ``BadRequestError`` entry.
    """

    kind = ErrorKind.BAD_REQUEST


class BaseServerError(CatalogBoundError):
    """HTTP 5xx – the server failed to fulfil a valid request.

    Constructed directly, defaults to the ``InternalServerError`` entry.
    """

    kind = ErrorKind.INTERNAL_SERVER_ERROR


__all__ = [
    "BaseClientError",
    "BaseForgeError",
    "BaseServerError",
    "CatalogBoundError",
    "ForgeError",
    "ResolvedError",
    "resolve_error_input",
]
