"""
Tests for the FastAPI integration.

Routes raise or send expressive errors; the central handler must turn every
failure into exactly one response.
"""

from __future__ import annotations

import logging

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from expressive import handlers
from expressive.channels import StarletteChannel
from expressive.handlers import get_channel, register_error_handlers
from expressive.statuses import (
    ConflictError,
    ForbiddenError,
    GoneError,
    ImATeapotError,
    NotFoundError,
    UnprocessableContentError,
)


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app, metrics_path="/metrics")

    @app.get("/users/{user_id}")
    async def get_user(user_id: str) -> dict[str, str]:
        NotFoundError("user missing").throw_if(user_id == "0")
        return {"id": user_id}

    @app.get("/forbidden")
    async def forbidden() -> dict[str, str]:
        ForbiddenError("no entry").throw()

    @app.get("/validation")
    async def validation() -> dict[str, str]:
        UnprocessableContentError({"field": "email"}).throw()

    @app.get("/crash")
    async def crash() -> dict[str, str]:
        raise KeyError("secret_column")

    @app.get("/teapot")
    async def teapot(channel: StarletteChannel = Depends(get_channel)):
        ImATeapotError().send(channel)
        return channel.to_response()

    @app.get("/already-sent")
    async def already_sent() -> dict[str, str]:
        error = ConflictError("dup")
        error.send(StarletteChannel())
        error.throw()

    @app.get("/sent-then-thrown")
    async def sent_then_thrown(channel: StarletteChannel = Depends(get_channel)) -> dict[str, str]:
        NotFoundError("user missing").send(channel).throw()

    @app.get("/thrown-with-channel")
    async def thrown_with_channel(channel: StarletteChannel = Depends(get_channel)) -> dict[str, str]:
        GoneError("moved away").throw()

    @app.get("/sent-then-other-thrown")
    async def sent_then_other_thrown(channel: StarletteChannel = Depends(get_channel)) -> dict[str, str]:
        NotFoundError("user missing").send(channel)
        ConflictError("dup").throw()

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_build_app(), raise_server_exceptions=False)


def _sample(status: str, route: str) -> float:
    value = REGISTRY.get_sample_value("expressive_errors_sent_total", {"status": status, "route": route})
    return value or 0.0


class TestCentralHandler:
    """Errors raised from routes."""

    def test_success_passes_through(self, client: TestClient) -> None:
        response = client.get("/users/7")
        assert response.status_code == 200
        assert response.json() == {"id": "7"}

    def test_raised_error_is_sent(self, client: TestClient) -> None:
        response = client.get("/users/0")
        assert response.status_code == 404
        assert response.text == "user missing"

    def test_structured_message_is_json(self, client: TestClient) -> None:
        response = client.get("/validation")
        assert response.status_code == 422
        assert response.json() == {"field": "email"}

    def test_foreign_exception_becomes_500(self, client: TestClient) -> None:
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.text == "Internal Server Error"
        assert "secret_column" not in response.text

    def test_already_sent_error_yields_empty_response(self, client: TestClient) -> None:
        response = client.get("/already-sent")
        assert response.status_code == 409
        assert response.content == b""

    def test_client_error_logged_as_warning(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="expressive.http"):
            client.get("/forbidden")
        record = next(r for r in caplog.records if r.name == "expressive.http")
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Error 403: no entry"
        assert record.path == "/forbidden"

    def test_server_error_logged_with_traceback(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="expressive.http"):
            client.get("/crash")
        record = next(r for r in caplog.records if r.name == "expressive.http")
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.getMessage() == "Error 500: KeyError: 'secret_column'"


class TestChannelDependency:
    """Routes sending errors themselves."""

    def test_route_sends_through_injected_channel(self, client: TestClient) -> None:
        response = client.get("/teapot")
        assert response.status_code == 418
        assert response.text == "I'm a teapot"

    def test_thrown_after_send_keeps_sent_body(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="expressive.http"):
            response = client.get("/sent-then-thrown")
        assert response.status_code == 404
        assert response.text == "user missing"
        assert any(r.getMessage() == "expressive error already sent" for r in caplog.records)

    def test_unwritten_channel_receives_thrown_error(self, client: TestClient) -> None:
        response = client.get("/thrown-with-channel")
        assert response.status_code == 410
        assert response.text == "moved away"

    def test_other_error_thrown_after_send_gets_its_own_response(self, client: TestClient) -> None:
        response = client.get("/sent-then-other-thrown")
        assert response.status_code == 409
        assert response.text == "dup"


class TestMetrics:
    """Prometheus counters."""

    def test_sent_errors_are_counted(self, client: TestClient) -> None:
        before = _sample("403", "/forbidden")
        client.get("/forbidden")
        client.get("/forbidden")
        assert _sample("403", "/forbidden") == before + 2

    def test_metrics_route_exposes_counter(self, client: TestClient) -> None:
        client.get("/forbidden")
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "expressive_errors_sent_total" in response.text

    def test_disabled_metrics_are_not_counted(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(handlers.settings, "metrics_enabled", False)
        before = _sample("403", "/forbidden")
        response = client.get("/forbidden")
        assert response.status_code == 403
        assert _sample("403", "/forbidden") == before
