"""Prometheus metrics for emitted errors."""
from __future__ import annotations

from typing import Final

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

_ERRORS_SENT_TOTAL: Final = Counter(
    "expressive_errors_sent_total",
    "Expressive errors sent as HTTP responses",
    labelnames=("status", "route"),
)


def record_error_sent(status: int, route: str) -> None:
    _ERRORS_SENT_TOTAL.labels(status=str(status), route=route).inc()


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
