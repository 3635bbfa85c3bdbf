"""HTTP error hierarchy — public re-export surface.

Hierarchy::

    BaseForgeError
    ├── ForgeError               (base.py, no catalog binding)
    └── CatalogBoundError        (base.py)
        ├── BaseClientError      4xx (client.py)
        │   ├── BadRequestError
        │   ├── NotFoundError
        │   ├── TooManyRequestsError
        │   └── ... one class per 4xx catalog entry
        └── BaseServerError      5xx (server.py)
            ├── InternalServerError
            ├── ServiceUnavailableError
            └── ... one class per 5xx catalog entry
"""

from forge_errors.errors.base import (
    BaseClientError,
    BaseForgeError,
    BaseServerError,
    CatalogBoundError,
    ForgeError,
    ResolvedError,
    resolve_error_input,
)
from forge_errors.errors.client import (
    ALL_CLIENT_ERRORS,
    BadRequestError,
    BlockedByWindowsParentalControlsError,
    ClientClosedRequestError,
    ConflictError,
    ExpectationFailedError,
    FailedDependencyError,
    ForbiddenError,
    GoneError,
    HTTPRequestSentToHTTPSPortError,
    InvalidTokenError,
    LegallyRestrictedError,
    LengthRequiredError,
    LockedError,
    MethodNotAllowedError,
    MisdirectedRequestError,
    NoResponseError,
    NotAcceptableError,
    NotFoundError,
    PayloadTooLargeError,
    PaymentRequiredError,
    PreconditionFailedError,
    PreconditionRequiredError,
    ProxyAuthenticationRequiredError,
    RangeNotSatisfiableError,
    RateLimitError,
    RequestHeaderFieldsTooLargeError,
    RequestHeadersTooLargeError,
    RequestHeaderTooLargeError,
    RequestTimeoutError,
    RetryWithError,
    SessionExpiredError,
    SSLCertificateError,
    SSLCertificateRequiredError,
    TeapotError,
    TokenRequiredError,
    TooEarlyError,
    TooManyRequestsError,
    UnauthorizedError,
    UnavailableForLegalReasonsError,
    UnprocessableEntityError,
    UnsupportedMediaTypeError,
    UpgradeRequiredError,
    URITooLongError,
)
from forge_errors.errors.registry import error_class_for
from forge_errors.errors.server import (
    ALL_SERVER_ERRORS,
    BadGatewayError,
    BandwidthLimitExceededError,
    GatewayTimeoutError,
    HTTPVersionNotSupportedError,
    InsufficientStorageError,
    InternalServerError,
    LoopDetectedError,
    NetworkAuthenticationRequiredError,
    NotExtendedError,
    NotImplementedError,
    ServiceUnavailableError,
    VariantAlsoNegotiatesError,
)

__all__ = [
    "ALL_CLIENT_ERRORS",
    "ALL_SERVER_ERRORS",
    "BadGatewayError",
    "BadRequestError",
    "BandwidthLimitExceededError",
    "BaseClientError",
    "BaseForgeError",
    "BaseServerError",
    "BlockedByWindowsParentalControlsError",
    "CatalogBoundError",
    "ClientClosedRequestError",
    "ConflictError",
    "ExpectationFailedError",
    "FailedDependencyError",
    "ForbiddenError",
    "ForgeError",
    "GatewayTimeoutError",
    "GoneError",
    "HTTPRequestSentToHTTPSPortError",
    "HTTPVersionNotSupportedError",
    "InsufficientStorageError",
    "InternalServerError",
    "InvalidTokenError",
    "LegallyRestrictedError",
    "LengthRequiredError",
    "LockedError",
    "LoopDetectedError",
    "MethodNotAllowedError",
    "MisdirectedRequestError",
    "NetworkAuthenticationRequiredError",
    "NoResponseError",
    "NotAcceptableError",
    "NotExtendedError",
    "NotFoundError",
    "NotImplementedError",
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
    "ResolvedError",
    "RetryWithError",
    "SSLCertificateError",
    "SSLCertificateRequiredError",
    "ServiceUnavailableError",
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
    "VariantAlsoNegotiatesError",
    "error_class_for",
    "resolve_error_input",
]
