"""Catalog – static HTTP error definitions.

Each entry carries the HTTP status code, a stable SCREAMING_SNAKE_CASE
error code and a human-readable default message.  The table is reference
data: codes are not validated for uniqueness (``TokenRequiredError`` and
``ClientClosedRequestError`` both use 499, and 419 / 420 / 450 are
informal codes).
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Mapping


@dataclasses.dataclass(frozen=True)
class ErrorCatalogEntry:
    """Immutable ``{status_code, error_code, message}`` triple."""

    status_code: int
    error_code: str
    message: str

    @property
    def is_client(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server(self) -> bool:
        return 500 <= self.status_code < 600


_E = ErrorCatalogEntry

_CATALOG: dict[str, ErrorCatalogEntry] = {
    # 4xx client errors
    "BadRequestError": _E(
        400, "BAD_REQUEST",
        "The request could not be processed due to invalid syntax or parameters",
    ),
    "UnauthorizedError": _E(
        401, "UNAUTHORIZED", "Authentication is required to access this resource"
    ),
    "PaymentRequiredError": _E(
        402, "PAYMENT_REQUIRED", "Payment is required to access this resource"
    ),
    "ForbiddenError": _E(
        403, "FORBIDDEN", "You do not have permission to access this resource"
    ),
    "NotFoundError": _E(404, "NOT_FOUND", "The requested resource could not be found"),
    "MethodNotAllowedError": _E(
        405, "METHOD_NOT_ALLOWED",
        "The requested HTTP method is not allowed for this resource",
    ),
    "NotAcceptableError": _E(
        406, "NOT_ACCEPTABLE",
        "The requested content type cannot be served by this resource",
    ),
    "ProxyAuthenticationRequiredError": _E(
        407, "PROXY_AUTHENTICATION_REQUIRED",
        "Proxy server authentication is required to access this resource",
    ),
    "RequestTimeoutError": _E(
        408, "REQUEST_TIMEOUT", "The server timed out waiting for the request to complete"
    ),
    "ConflictError": _E(
        409, "CONFLICT", "The request conflicts with the current state of the resource"
    ),
    "GoneError": _E(
        410, "GONE",
        "The requested resource is no longer available and has been permanently removed",
    ),
    "LengthRequiredError": _E(
        411, "LENGTH_REQUIRED", "Content-Length header is required for this request"
    ),
    "PreconditionFailedError": _E(
        412, "PRECONDITION_FAILED", "One or more conditions in the request headers failed"
    ),
    "PayloadTooLargeError": _E(
        413, "PAYLOAD_TOO_LARGE", "Request payload exceeds the maximum allowed size"
    ),
    "URITooLongError": _E(
        414, "URI_TOO_LONG", "Request URI exceeds the maximum allowed length"
    ),
    "UnsupportedMediaTypeError": _E(
        415, "UNSUPPORTED_MEDIA_TYPE",
        "The request content type is not supported by this endpoint",
    ),
    "RangeNotSatisfiableError": _E(
        416, "RANGE_NOT_SATISFIABLE",
        "The requested range of the resource cannot be satisfied",
    ),
    "ExpectationFailedError": _E(
        417, "EXPECTATION_FAILED",
        "Server cannot meet the requirements specified in the Expect header",
    ),
    "TeapotError": _E(
        418, "IM_A_TEAPOT",
        "Server refuses to brew coffee because it is a teapot (RFC 2324)",
    ),
    "SessionExpiredError": _E(
        419, "SESSION_EXPIRED", "Your session has expired. Please refresh and try again"
    ),
    "RateLimitError": _E(
        420, "RATE_LIMIT_EXCEEDED", "Request rate limit has been exceeded. Please slow down"
    ),
    "MisdirectedRequestError": _E(
        421, "MISDIRECTED_REQUEST",
        "The request was sent to a server unable to produce a response",
    ),
    "UnprocessableEntityError": _E(
        422, "UNPROCESSABLE_ENTITY",
        "The request was well-formed but contains invalid parameters",
    ),
    "LockedError": _E(423, "RESOURCE_LOCKED", "The requested resource is currently locked"),
    "FailedDependencyError": _E(
        424, "FAILED_DEPENDENCY",
        "The request failed due to the failure of a previous request",
    ),
    "TooEarlyError": _E(
        425, "TOO_EARLY",
        "The server is not ready to process the request due to possible replay attack",
    ),
    "UpgradeRequiredError": _E(
        426, "UPGRADE_REQUIRED", "Client must upgrade to a different protocol version"
    ),
    "PreconditionRequiredError": _E(
        428, "PRECONDITION_REQUIRED", "This request requires preconditions to be specified"
    ),
    "TooManyRequestsError": _E(
        429, "TOO_MANY_REQUESTS", "Rate limit exceeded. Please try again later"
    ),
    "RequestHeadersTooLargeError": _E(
        431, "REQUEST_HEADERS_TOO_LARGE",
        "Request header fields exceed maximum allowed size",
    ),
    "NoResponseError": _E(
        444, "NO_RESPONSE", "Server returned no information and closed the connection"
    ),
    "RetryWithError": _E(
        449, "RETRY_WITH",
        "The request should be retried after performing the appropriate action",
    ),
    "BlockedByWindowsParentalControlsError": _E(
        450, "BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS",
        "Access denied by Windows parental controls",
    ),
    "LegallyRestrictedError": _E(
        451, "LEGALLY_RESTRICTED",
        "Access to this resource has been denied for legal reasons",
    ),
    "RequestHeaderTooLargeError": _E(
        494, "REQUEST_HEADER_TOO_LARGE", "Request header section is too large"
    ),
    "SSLCertificateError": _E(
        495, "SSL_CERTIFICATE_ERROR", "SSL/TLS certificate validation error"
    ),
    "SSLCertificateRequiredError": _E(
        496, "SSL_CERTIFICATE_REQUIRED", "A valid SSL/TLS certificate is required"
    ),
    "HTTPRequestSentToHTTPSPortError": _E(
        497, "HTTP_REQUEST_SENT_TO_HTTPS_PORT", "An HTTP request was sent to an HTTPS port"
    ),
    "InvalidTokenError": _E(
        498, "INVALID_TOKEN", "The token provided is invalid or has expired"
    ),
    "TokenRequiredError": _E(
        499, "TOKEN_REQUIRED", "A valid token is required to access this resource"
    ),
    "ClientClosedRequestError": _E(
        499, "CLIENT_CLOSED_REQUEST",
        "Client closed the request before the server could respond",
    ),
    # 5xx server errors
    "InternalServerError": _E(
        500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred. Please try again later"
    ),
    "NotImplementedError": _E(
        501, "NOT_IMPLEMENTED", "This functionality is not currently implemented"
    ),
    "BadGatewayError": _E(
        502, "BAD_GATEWAY", "Invalid response received from the upstream server"
    ),
    "ServiceUnavailableError": _E(
        503, "SERVICE_UNAVAILABLE",
        "Service is temporarily unavailable. Please try again later",
    ),
    "GatewayTimeoutError": _E(
        504, "GATEWAY_TIMEOUT",
        "Gateway timeout while waiting for response from upstream server",
    ),
    "HTTPVersionNotSupportedError": _E(
        505, "HTTP_VERSION_NOT_SUPPORTED",
        "The HTTP version used in the request is not supported",
    ),
    "VariantAlsoNegotiatesError": _E(
        506, "VARIANT_ALSO_NEGOTIATES", "Server configuration error in content negotiation"
    ),
    "InsufficientStorageError": _E(
        507, "INSUFFICIENT_STORAGE", "Insufficient storage space to complete the request"
    ),
    "LoopDetectedError": _E(
        508, "LOOP_DETECTED",
        "Request processing stopped due to infinite loop detection",
    ),
    "BandwidthLimitExceededError": _E(
        509, "BANDWIDTH_LIMIT_EXCEEDED", "Server bandwidth limit has been exceeded"
    ),
    "NotExtendedError": _E(
        510, "NOT_EXTENDED",
        "Server requires additional extensions to fulfill the request",
    ),
    "NetworkAuthenticationRequiredError": _E(
        511, "NETWORK_AUTHENTICATION_REQUIRED",
        "Network authentication is required to access this resource",
    ),
}

ERRORS_CATALOG: Mapping[str, ErrorCatalogEntry] = MappingProxyType(_CATALOG)


__all__ = ["ERRORS_CATALOG", "ErrorCatalogEntry"]
