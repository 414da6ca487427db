"""Starlette response channel for expressive errors."""
from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, PlainTextResponse, Response

from .config import settings


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


class StarletteChannel:
    """Collects one status and body, then renders them as a Starlette response."""

    def __init__(self, expose_exception_details: bool | None = None) -> None:
        if expose_exception_details is None:
            expose_exception_details = settings.expose_exception_details
        self.expose_exception_details = expose_exception_details
        self.status_code = 200
        self.body: Any = None
        self._written = False

    @property
    def written(self) -> bool:
        return self._written

    def _ensure_unwritten(self) -> None:
        if self._written:
            raise RuntimeError("response body already written")

    def set_status(self, code: int) -> "StarletteChannel":
        self._ensure_unwritten()
        self.status_code = code
        return self

    def write_body(self, message: Any) -> None:
        self._ensure_unwritten()
        self.body = message
        self._written = True

    def to_response(self) -> Response:
        if not self._written:
            raise RuntimeError("nothing has been written to this channel")

        body = self.body
        if body is None:
            return Response(status_code=self.status_code)
        if isinstance(body, BaseException):
            text = str(body) if self.expose_exception_details else _reason_phrase(self.status_code)
            return PlainTextResponse(text, status_code=self.status_code)
        if isinstance(body, str):
            return PlainTextResponse(body, status_code=self.status_code)
        if isinstance(body, (bytes, bytearray)):
            return Response(bytes(body), status_code=self.status_code, media_type="application/octet-stream")
        return JSONResponse(jsonable_encoder(body), status_code=self.status_code)
