"""Client errors (4xx) – the request cannot be fulfilled as sent.

Every class binds to one catalog entry through ``kind``; see
:class:`~forge_errors.errors.base.CatalogBoundError` for the accepted
constructor inputs.
"""
from __future__ import annotations

from forge_errors.catalog import ErrorKind
from forge_errors.errors.base import BaseClientError


class BadRequestError(BaseClientError):
    """400 – invalid syntax or parameters."""

    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(BaseClientError):
    """401 – missing or invalid credentials."""

    kind = ErrorKind.UNAUTHORIZED


class PaymentRequiredError(BaseClientError):
    kind = ErrorKind.PAYMENT_REQUIRED


class ForbiddenError(BaseClientError):
    """403 – authenticated principal lacks the required permission."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(BaseClientError):
    """404 – the requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND


class MethodNotAllowedError(BaseClientError):
    kind = ErrorKind.METHOD_NOT_ALLOWED


class NotAcceptableError(BaseClientError):
    kind = ErrorKind.NOT_ACCEPTABLE


class ProxyAuthenticationRequiredError(BaseClientError):
    kind = ErrorKind.PROXY_AUTHENTICATION_REQUIRED


class RequestTimeoutError(BaseClientError):
    """408 – the client did not finish sending the request in time."""

    kind = ErrorKind.REQUEST_TIMEOUT


class ConflictError(BaseClientError):
    """409 – the operation conflicts with existing state."""

    kind = ErrorKind.CONFLICT


class GoneError(BaseClientError):
    kind = ErrorKind.GONE


class LengthRequiredError(BaseClientError):
    kind = ErrorKind.LENGTH_REQUIRED


class PreconditionFailedError(BaseClientError):
    kind = ErrorKind.PRECONDITION_FAILED


class PayloadTooLargeError(BaseClientError):
    kind = ErrorKind.PAYLOAD_TOO_LARGE


class URITooLongError(BaseClientError):
    kind = ErrorKind.URI_TOO_LONG


class UnsupportedMediaTypeError(BaseClientError):
    kind = ErrorKind.UNSUPPORTED_MEDIA_TYPE


class RangeNotSatisfiableError(BaseClientError):
    kind = ErrorKind.RANGE_NOT_SATISFIABLE


class ExpectationFailedError(BaseClientError):
    kind = ErrorKind.EXPECTATION_FAILED


class TeapotError(BaseClientError):
    """418 – RFC 2324."""

    kind = ErrorKind.TEAPOT


class SessionExpiredError(BaseClientError):
    """419 – informal code used by several frameworks for expired sessions."""

    kind = ErrorKind.SESSION_EXPIRED


class RateLimitError(BaseClientError):
    """420 – informal "enhance your calm" rate limit code.

    Prefer :class:`TooManyRequestsError` (429) for new code.
    """

    kind = ErrorKind.RATE_LIMIT


class MisdirectedRequestError(BaseClientError):
    kind = ErrorKind.MISDIRECTED_REQUEST


class UnprocessableEntityError(BaseClientError):
    """422 – well-formed request with semantically invalid content."""

    kind = ErrorKind.UNPROCESSABLE_ENTITY


class LockedError(BaseClientError):
    kind = ErrorKind.LOCKED


class FailedDependencyError(BaseClientError):
    kind = ErrorKind.FAILED_DEPENDENCY


class TooEarlyError(BaseClientError):
    kind = ErrorKind.TOO_EARLY


class UpgradeRequiredError(BaseClientError):
    kind = ErrorKind.UPGRADE_REQUIRED


class PreconditionRequiredError(BaseClientError):
    kind = ErrorKind.PRECONDITION_REQUIRED


class TooManyRequestsError(BaseClientError):
    """429 – request quota exceeded."""

    kind = ErrorKind.TOO_MANY_REQUESTS


class RequestHeadersTooLargeError(BaseClientError):
    kind = ErrorKind.REQUEST_HEADERS_TOO_LARGE


class NoResponseError(BaseClientError):
    """444 – nginx: connection closed without a response."""

    kind = ErrorKind.NO_RESPONSE


class RetryWithError(BaseClientError):
    kind = ErrorKind.RETRY_WITH


class BlockedByWindowsParentalControlsError(BaseClientError):
    kind = ErrorKind.BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS


class LegallyRestrictedError(BaseClientError):
    """451 – unavailable for legal reasons."""

    kind = ErrorKind.LEGALLY_RESTRICTED


class RequestHeaderTooLargeError(BaseClientError):
    """494 – nginx: request header section too large."""

    kind = ErrorKind.REQUEST_HEADER_TOO_LARGE


class SSLCertificateError(BaseClientError):
    kind = ErrorKind.SSL_CERTIFICATE


class SSLCertificateRequiredError(BaseClientError):
    kind = ErrorKind.SSL_CERTIFICATE_REQUIRED


class HTTPRequestSentToHTTPSPortError(BaseClientError):
    kind = ErrorKind.HTTP_REQUEST_SENT_TO_HTTPS_PORT


class InvalidTokenError(BaseClientError):
    """498 – token invalid or expired."""

    kind = ErrorKind.INVALID_TOKEN


class TokenRequiredError(BaseClientError):
    """499 – a token is required.

    Shares its status code with :class:`ClientClosedRequestError`; tell
    them apart by ``error_code`` or by type.
    """

    kind = ErrorKind.TOKEN_REQUIRED


class ClientClosedRequestError(BaseClientError):
    """499 – nginx: client closed the connection before the response."""

    kind = ErrorKind.CLIENT_CLOSED_REQUEST


RequestHeaderFieldsTooLargeError = RequestHeadersTooLargeError
UnavailableForLegalReasonsError = LegallyRestrictedError

ALL_CLIENT_ERRORS: tuple[type[BaseClientError], ...] = (
    BadRequestError,
    UnauthorizedError,
    PaymentRequiredError,
    ForbiddenError,
    NotFoundError,
    MethodNotAllowedError,
    NotAcceptableError,
    ProxyAuthenticationRequiredError,
    RequestTimeoutError,
    ConflictError,
    GoneError,
    LengthRequiredError,
    PreconditionFailedError,
    PayloadTooLargeError,
    URITooLongError,
    UnsupportedMediaTypeError,
    RangeNotSatisfiableError,
    ExpectationFailedError,
    TeapotError,
    SessionExpiredError,
    RateLimitError,
    MisdirectedRequestError,
    UnprocessableEntityError,
    LockedError,
    FailedDependencyError,
    TooEarlyError,
    UpgradeRequiredError,
    PreconditionRequiredError,
    TooManyRequestsError,
    RequestHeadersTooLargeError,
    NoResponseError,
    RetryWithError,
    BlockedByWindowsParentalControlsError,
    LegallyRestrictedError,
    RequestHeaderTooLargeError,
    SSLCertificateError,
    SSLCertificateRequiredError,
    HTTPRequestSentToHTTPSPortError,
    InvalidTokenError,
    TokenRequiredError,
    ClientClosedRequestError,
)


__all__ = [
    "ALL_CLIENT_ERRORS",
    "BadRequestError",
    "BlockedByWindowsParentalControlsError",
    "ClientClosedRequestError",
    "ConflictError",
    "ExpectationFailedError",
    "FailedDependencyError",
    "ForbiddenError",
    "GoneError",
    "HTTPRequestSentToHTTPSPortError",
    "InvalidTokenError",
    "LegallyRestrictedError",
    "LengthRequiredError",
    "LockedError",
    "MethodNotAllowedError",
    "MisdirectedRequestError",
    "NoResponseError",
    "NotAcceptableError",
    "NotFoundError",
    "PayloadTooLargeError",
    "PaymentRequiredError",
    "PreconditionFailedError",
    "PreconditionRequiredError",
    "ProxyAuthenticationRequiredError",
    "RangeNotSatisfiableError",
    "RateLimitError",
    "RequestHeaderFieldsTooLargeError",
    "RequestHeaderTooLargeError",
    "RequestHeadersTooLargeError",
    "RequestTimeoutError",
    "RetryWithError",
    "SSLCertificateError",
    "SSLCertificateRequiredError",
    "SessionExpiredError",
    "TeapotError",
    "TokenRequiredError",
    "TooEarlyError",
    "TooManyRequestsError",
    "URITooLongError",
    "UnauthorizedError",
    "UnavailableForLegalReasonsError",
    "UnprocessableEntityError",
    "UnsupportedMediaTypeError",
    "UpgradeRequiredError",
]
