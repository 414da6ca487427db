"""Expressive HTTP errors for FastAPI and Starlette services."""
from __future__ import annotations

from .channels import StarletteChannel
from .errors import ExpressiveError, MissingChannelError, ResponseChannel, create_error
from .handlers import get_channel, register_error_handlers
from .statuses import (
    STATUS_ERRORS,
    BadGatewayError,
    BadRequestError,
    ConflictError,
    ExpectationFailedError,
    FailedDependencyError,
    ForbiddenError,
    GatewayTimeoutError,
    GoneError,
    HTTPVersionNotSupportedError,
    ImATeapotError,
    InsufficientStorageError,
    InternalServerError,
    LengthRequiredError,
    LockedError,
    LoopDetectedError,
    MethodNotAllowedError,
    MisdirectedRequestError,
    NetworkAuthenticationRequiredError,
    NotAcceptableError,
    NotExtendedError,
    NotFoundError,
    NotImplementedHTTPError,
    PayloadTooLargeError,
    PaymentRequiredError,
    PreconditionFailedError,
    PreconditionRequiredError,
    ProxyAuthenticationRequiredError,
    RangeNotSatisfiableError,
    RequestHeaderFieldsTooLargeError,
    RequestTimeoutError,
    ServiceUnavailableError,
    StatusError,
    TooEarlyError,
    TooManyRequestsError,
    UnauthorizedError,
    UnavailableForLegalReasonsError,
    UnprocessableContentError,
    UnprocessableEntityError,
    UnsupportedMediaTypeError,
    UpgradeRequiredError,
    URITooLongError,
    VariantAlsoNegotiatesError,
    error_for_status,
    guaranteed_expressive,
)

__all__ = [
    "STATUS_ERRORS",
    "BadGatewayError",
    "BadRequestError",
    "ConflictError",
    "ExpectationFailedError",
    "ExpressiveError",
    "FailedDependencyError",
    "ForbiddenError",
    "GatewayTimeoutError",
    "GoneError",
    "HTTPVersionNotSupportedError",
    "ImATeapotError",
    "InsufficientStorageError",
    "InternalServerError",
    "LengthRequiredError",
    "LockedError",
    "LoopDetectedError",
    "MethodNotAllowedError",
    "MisdirectedRequestError",
    "MissingChannelError",
    "NetworkAuthenticationRequiredError",
    "NotAcceptableError",
    "NotExtendedError",
    "NotFoundError",
    "NotImplementedHTTPError",
    "PayloadTooLargeError",
    "PaymentRequiredError",
    "PreconditionFailedError",
    "PreconditionRequiredError",
    "ProxyAuthenticationRequiredError",
    "RangeNotSatisfiableError",
    "RequestHeaderFieldsTooLargeError",
    "RequestTimeoutError",
    "ResponseChannel",
    "ServiceUnavailableError",
    "StarletteChannel",
    "StatusError",
    "TooEarlyError",
    "TooManyRequestsError",
    "URITooLongError",
    "UnauthorizedError",
    "UnavailableForLegalReasonsError",
    "UnprocessableContentError",
    "UnprocessableEntityError",
    "UnsupportedMediaTypeError",
    "UpgradeRequiredError",
    "VariantAlsoNegotiatesError",
    "create_error",
    "error_for_status",
    "get_channel",
    "guaranteed_expressive",
    "register_error_handlers",
]
