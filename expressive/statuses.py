"""Named expressive errors, one class per HTTP error status."""
from __future__ import annotations

from typing import Any, ClassVar

from .errors import ExpressiveError, ResponseChannel, create_error


class StatusError(ExpressiveError):
    """Base for errors whose status is fixed by the class."""

    status_code: ClassVar[int] = 500
    default_message: ClassVar[Any] = ""

    def __init__(self, message: Any = None, channel: ResponseChannel | None = None) -> None:
        super().__init__(self.status_code, self.default_message if message is None else message, channel)


class BadRequestError(StatusError):
    status_code = 400


class UnauthorizedError(StatusError):
    status_code = 401


class PaymentRequiredError(StatusError):
    status_code = 402


class ForbiddenError(StatusError):
    status_code = 403


class NotFoundError(StatusError):
    status_code = 404


class MethodNotAllowedError(StatusError):
    status_code = 405


class NotAcceptableError(StatusError):
    status_code = 406


class ProxyAuthenticationRequiredError(StatusError):
    status_code = 407


class RequestTimeoutError(StatusError):
    status_code = 408


class ConflictError(StatusError):
    status_code = 409


class GoneError(StatusError):
    status_code = 410


class LengthRequiredError(StatusError):
    status_code = 411


class PreconditionFailedError(StatusError):
    status_code = 412


class PayloadTooLargeError(StatusError):
    status_code = 413


class URITooLongError(StatusError):
    status_code = 414


class UnsupportedMediaTypeError(StatusError):
    status_code = 415


class RangeNotSatisfiableError(StatusError):
    status_code = 416


class ExpectationFailedError(StatusError):
    status_code = 417


class ImATeapotError(StatusError):
    status_code = 418
    default_message = "I'm a teapot"


class MisdirectedRequestError(StatusError):
    status_code = 421


class UnprocessableContentError(StatusError):
    status_code = 422


# RFC 7231 name for 422
UnprocessableEntityError = UnprocessableContentError


class LockedError(StatusError):
    status_code = 423


class FailedDependencyError(StatusError):
    status_code = 424


class TooEarlyError(StatusError):
    status_code = 425


class UpgradeRequiredError(StatusError):
    status_code = 426


class PreconditionRequiredError(StatusError):
    status_code = 428


class TooManyRequestsError(StatusError):
    status_code = 429


class RequestHeaderFieldsTooLargeError(StatusError):
    status_code = 431


class UnavailableForLegalReasonsError(StatusError):
    status_code = 451


class InternalServerError(StatusError):
    status_code = 500


class NotImplementedHTTPError(StatusError):
    status_code = 501


class BadGatewayError(StatusError):
    status_code = 502


class ServiceUnavailableError(StatusError):
    status_code = 503


class GatewayTimeoutError(StatusError):
    status_code = 504


class HTTPVersionNotSupportedError(StatusError):
    status_code = 505


class VariantAlsoNegotiatesError(StatusError):
    status_code = 506


class InsufficientStorageError(StatusError):
    status_code = 507


class LoopDetectedError(StatusError):
    status_code = 508


class NotExtendedError(StatusError):
    status_code = 510


class NetworkAuthenticationRequiredError(StatusError):
    status_code = 511


STATUS_ERRORS: dict[int, type[StatusError]] = {cls.status_code: cls for cls in StatusError.__subclasses__()}


def error_for_status(status: int, message: Any = None, channel: ResponseChannel | None = None) -> ExpressiveError:
    """Build the named error for ``status``, or a plain one if the status has no name."""

    error_cls = STATUS_ERRORS.get(status)
    if error_cls is None:
        return create_error(status, "" if message is None else message, channel)
    return error_cls(message, channel)


def guaranteed_expressive(candidate: Any) -> ExpressiveError:
    """Return ``candidate`` if it is expressive, else wrap it in a 500 error."""

    if getattr(candidate, "is_expressive", False) is True:
        return candidate
    wrapped = InternalServerError()
    wrapped.message = candidate
    if isinstance(candidate, BaseException):
        wrapped.__cause__ = candidate
    return wrapped
