"""FastAPI wiring: one central handler that sends every error exactly once."""
from __future__ import annotations

import logging
from functools import partial

from fastapi import FastAPI, Request
from fastapi.responses import Response

from .channels import StarletteChannel
from .config import settings
from .errors import ExpressiveError
from .monitoring import metrics_payload, record_error_sent
from .statuses import guaranteed_expressive

logger = logging.getLogger("expressive.http")


def get_channel(request: Request) -> StarletteChannel:
    """FastAPI dependency providing the request's response channel.

    The channel is kept on ``request.state`` so the error handlers can render
    whatever a route already sent into it.
    """

    channel = StarletteChannel()
    request.state.expressive_channel = channel
    return channel


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return route.path if route else request.url.path


def emit_error(request: Request, exc: BaseException) -> Response:
    """Normalize ``exc``, log it, and render it as the request's response."""

    error = guaranteed_expressive(exc)
    route_path = _route_path(request)
    context = {"path": route_path, "method": request.method, "status_code": error.status}

    if error.status >= 500:
        printer = partial(logger.error, extra=context, exc_info=exc if error is not exc else None)
    else:
        printer = partial(logger.warning, extra=context)
    error.report(printer)

    request_channel: StarletteChannel | None = getattr(request.state, "expressive_channel", None)
    if request_channel is not None and not request_channel.written:
        channel = request_channel
    else:
        channel = StarletteChannel()
    error.send(channel)
    if not channel.written:
        logger.warning("expressive error already sent", extra=context)
        if request_channel is not None and request_channel.written:
            return request_channel.to_response()
        return Response(status_code=error.status)

    if settings.metrics_enabled:
        record_error_sent(error.status, route_path)
    return channel.to_response()


async def expressive_error_handler(request: Request, exc: ExpressiveError) -> Response:
    return emit_error(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    return emit_error(request, exc)


def register_error_handlers(app: FastAPI, metrics_path: str | None = None) -> None:
    """Install the error handlers on ``app``, plus a metrics route if asked."""

    app.add_exception_handler(ExpressiveError, expressive_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    if metrics_path is not None:

        async def metrics() -> Response:
            payload, content_type = metrics_payload()
            return Response(content=payload, media_type=content_type)

        app.add_api_route(metrics_path, metrics, methods=["GET"], include_in_schema=False)
