"""Expressive error values: describe, report, raise and send HTTP errors."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, NoReturn, Protocol, Sequence

logger = logging.getLogger("expressive.errors")

Printer = Callable[..., Any]


class ResponseChannel(Protocol):
    """Minimal response capability an error needs to emit itself."""

    def set_status(self, code: int) -> "ResponseChannel":
        ...

    def write_body(self, message: Any) -> None:
        ...


class MissingChannelError(RuntimeError):
    """Raised when an error is sent without any response channel wired."""

    def __init__(self, status: int) -> None:
        super().__init__(f"no response channel to send error {status} to")
        self.status = status


def _json_keys(value: Any) -> Any:
    """Stringify dict keys json cannot encode, at any depth."""

    if isinstance(value, dict):
        return {
            key if key is None or isinstance(key, (str, int, float, bool)) else str(key): _json_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_json_keys(item) for item in value]
    return value


def stringify_message(message: Any) -> str:
    if isinstance(message, str):
        return message
    if isinstance(message, BaseException):
        return f"{type(message).__name__}: {message}"
    return json.dumps(_json_keys(message), ensure_ascii=False, separators=(",", ":"), default=str)


def _log_error(text: str, *params: Any) -> None:
    logger.error(" ".join([text, *(str(param) for param in params)]))


class ExpressiveError(Exception):
    """An HTTP error that can be logged, raised, or sent at most once.

    ``status`` is fixed at construction. ``message`` may be replaced when
    sending. The bound ``channel`` is only a default target; every send
    operation accepts an explicit one.
    """

    is_expressive = True

    def __init__(self, status: int = 500, message: Any = "", channel: ResponseChannel | None = None) -> None:
        super().__init__(status, message)
        self._status = status
        self.message = message
        self._channel = channel
        self._sent = False

    @property
    def status(self) -> int:
        return self._status

    def __str__(self) -> str:
        return f"Error {self._status}: {stringify_message(self.message)}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self._status}, message={self.message!r})"

    def report(self, printer: Printer | None = None, params: Sequence[Any] = ()) -> "ExpressiveError":
        """Hand the formatted error and ``params`` to ``printer`` (the error log by default)."""

        (printer or _log_error)(str(self), *params)
        return self

    def is_sent(self) -> bool:
        return self._sent

    def send(self, channel: ResponseChannel | None = None, message: Any = None) -> "ExpressiveError":
        """Write status and message to the response channel unless already sent.

        An override ``message`` replaces the stored one even when the error
        has already been sent.
        """

        if message is not None:
            self.message = message
        if self._sent:
            return self

        target = channel if channel is not None else self._channel
        if target is None:
            raise MissingChannelError(self._status)

        target.set_status(self._status).write_body(self.message)
        self._sent = True
        logger.debug("expressive error sent", extra={"status": self._status})
        return self

    def send_if(self, condition: Any, channel: ResponseChannel | None = None, message: Any = None) -> "ExpressiveError":
        if condition:
            self.send(channel, message)
        return self

    def send_unless(self, condition: Any, channel: ResponseChannel | None = None, message: Any = None) -> "ExpressiveError":
        if not condition:
            self.send(channel, message)
        return self

    def throw(self) -> NoReturn:
        raise self

    def throw_if(self, condition: Any) -> "ExpressiveError":
        if condition:
            raise self
        return self

    def throw_unless(self, condition: Any) -> "ExpressiveError":
        if not condition:
            raise self
        return self


def create_error(status: int = 500, message: Any = "", channel: ResponseChannel | None = None) -> ExpressiveError:
    return ExpressiveError(status, message, channel)
