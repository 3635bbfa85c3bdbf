"""Server errors (5xx) – the server failed to fulfil a valid request."""
from __future__ import annotations

from forge_errors.catalog import ErrorKind
from forge_errors.errors.base import BaseServerError


class InternalServerError(BaseServerError):
    """500 – unexpected failure."""

    kind = ErrorKind.INTERNAL_SERVER_ERROR


class NotImplementedError(BaseServerError):  # noqa: A001
    """501 – functionality not implemented.

    Shadows the builtin inside this module; import it qualified or aliased
    where the builtin is also needed.
    """

    kind = ErrorKind.NOT_IMPLEMENTED


class BadGatewayError(BaseServerError):
    """502 – an upstream returned an invalid response."""

    kind = ErrorKind.BAD_GATEWAY


class ServiceUnavailableError(BaseServerError):
    """503 – temporarily unable to handle the request."""

    kind = ErrorKind.SERVICE_UNAVAILABLE


class GatewayTimeoutError(BaseServerError):
    """504 – an upstream did not answer in time."""

    kind = ErrorKind.GATEWAY_TIMEOUT


class HTTPVersionNotSupportedError(BaseServerError):
    kind = ErrorKind.HTTP_VERSION_NOT_SUPPORTED


class VariantAlsoNegotiatesError(BaseServerError):
    kind = ErrorKind.VARIANT_ALSO_NEGOTIATES


class InsufficientStorageError(BaseServerError):
    kind = ErrorKind.INSUFFICIENT_STORAGE


class LoopDetectedError(BaseServerError):
    kind = ErrorKind.LOOP_DETECTED


class BandwidthLimitExceededError(BaseServerError):
    kind = ErrorKind.BANDWIDTH_LIMIT_EXCEEDED


class NotExtendedError(BaseServerError):
    kind = ErrorKind.NOT_EXTENDED


class NetworkAuthenticationRequiredError(BaseServerError):
    kind = ErrorKind.NETWORK_AUTHENTICATION_REQUIRED


ALL_SERVER_ERRORS: tuple[type[BaseServerError], ...] = (
    InternalServerError,
    NotImplementedError,
    BadGatewayError,
    ServiceUnavailableError,
    GatewayTimeoutError,
    HTTPVersionNotSupportedError,
    VariantAlsoNegotiatesError,
    InsufficientStorageError,
    LoopDetectedError,
    BandwidthLimitExceededError,
    NotExtendedError,
    NetworkAuthenticationRequiredError,
)


__all__ = [
    "ALL_SERVER_ERRORS",
    "BadGatewayError",
    "BandwidthLimitExceededError",
    "GatewayTimeoutError",
    "HTTPVersionNotSupportedError",
    "InsufficientStorageError",
    "InternalServerError",
    "LoopDetectedError",
    "NetworkAuthenticationRequiredError",
    "NotExtendedError",
    "NotImplementedError",
    "ServiceUnavailableError",
    "VariantAlsoNegotiatesError",
]
