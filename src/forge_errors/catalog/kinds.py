"""Catalog – ErrorKind discriminant over every catalog-bound leaf error."""
from __future__ import annotations

from enum import Enum

from forge_errors.catalog.entries import ERRORS_CATALOG, ErrorCatalogEntry


class ErrorKind(str, Enum):
    """One member per catalog entry; the value is the catalog key."""

    # 4xx
    BAD_REQUEST = "BadRequestError"
    UNAUTHORIZED = "UnauthorizedError"
    PAYMENT_REQUIRED = "PaymentRequiredError"
    FORBIDDEN = "ForbiddenError"
    NOT_FOUND = "NotFoundError"
    METHOD_NOT_ALLOWED = "MethodNotAllowedError"
    NOT_ACCEPTABLE = "NotAcceptableError"
    PROXY_AUTHENTICATION_REQUIRED = "ProxyAuthenticationRequiredError"
    REQUEST_TIMEOUT = "RequestTimeoutError"
    CONFLICT = "ConflictError"
    GONE = "GoneError"
    LENGTH_REQUIRED = "LengthRequiredError"
    PRECONDITION_FAILED = "PreconditionFailedError"
    PAYLOAD_TOO_LARGE = "PayloadTooLargeError"
    URI_TOO_LONG = "URITooLongError"
    UNSUPPORTED_MEDIA_TYPE = "UnsupportedMediaTypeError"
    RANGE_NOT_SATISFIABLE = "RangeNotSatisfiableError"
    EXPECTATION_FAILED = "ExpectationFailedError"
    TEAPOT = "TeapotError"
    SESSION_EXPIRED = "SessionExpiredError"
    RATE_LIMIT = "RateLimitError"
    MISDIRECTED_REQUEST = "MisdirectedRequestError"
    UNPROCESSABLE_ENTITY = "UnprocessableEntityError"
    LOCKED = "LockedError"
    FAILED_DEPENDENCY = "FailedDependencyError"
    TOO_EARLY = "TooEarlyError"
    UPGRADE_REQUIRED = "UpgradeRequiredError"
    PRECONDITION_REQUIRED = "PreconditionRequiredError"
    TOO_MANY_REQUESTS = "TooManyRequestsError"
    REQUEST_HEADERS_TOO_LARGE = "RequestHeadersTooLargeError"
    NO_RESPONSE = "NoResponseError"
    RETRY_WITH = "RetryWithError"
    BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS = "BlockedByWindowsParentalControlsError"
    LEGALLY_RESTRICTED = "LegallyRestrictedError"
    REQUEST_HEADER_TOO_LARGE = "RequestHeaderTooLargeError"
    SSL_CERTIFICATE = "SSLCertificateError"
    SSL_CERTIFICATE_REQUIRED = "SSLCertificateRequiredError"
    HTTP_REQUEST_SENT_TO_HTTPS_PORT = "HTTPRequestSentToHTTPSPortError"
    INVALID_TOKEN = "InvalidTokenError"
    TOKEN_REQUIRED = "TokenRequiredError"
    CLIENT_CLOSED_REQUEST = "ClientClosedRequestError"
    # 5xx
    INTERNAL_SERVER_ERROR = "InternalServerError"
    NOT_IMPLEMENTED = "NotImplementedError"
    BAD_GATEWAY = "BadGatewayError"
    SERVICE_UNAVAILABLE = "ServiceUnavailableError"
    GATEWAY_TIMEOUT = "GatewayTimeoutError"
    HTTP_VERSION_NOT_SUPPORTED = "HTTPVersionNotSupportedError"
    VARIANT_ALSO_NEGOTIATES = "VariantAlsoNegotiatesError"
    INSUFFICIENT_STORAGE = "InsufficientStorageError"
    LOOP_DETECTED = "LoopDetectedError"
    BANDWIDTH_LIMIT_EXCEEDED = "BandwidthLimitExceededError"
    NOT_EXTENDED = "NotExtendedError"
    NETWORK_AUTHENTICATION_REQUIRED = "NetworkAuthenticationRequiredError"

    @property
    def entry(self) -> ErrorCatalogEntry:
        return ERRORS_CATALOG[self.value]

    @property
    def is_client(self) -> bool:
        return self.entry.is_client

    @property
    def is_server(self) -> bool:
        return self.entry.is_server


def get_catalog_entry(key: ErrorKind | str) -> ErrorCatalogEntry:
    """Return the catalog entry for an :class:`ErrorKind` or catalog name.

    Raises
    ------
    KeyError
        When *key* names no catalog entry.
    """
    if isinstance(key, ErrorKind):
        return key.entry
    try:
        return ERRORS_CATALOG[key]
    except KeyError:
        raise KeyError(f"Unknown error catalog entry: {key!r}") from None


__all__ = ["ErrorKind", "get_catalog_entry"]
