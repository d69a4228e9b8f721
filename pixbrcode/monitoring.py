"""Prometheus counters for payload generation."""
from __future__ import annotations

from typing import Final

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

_PAYLOADS_BUILT_TOTAL: Final = Counter(
    "pixbrcode_payloads_built_total",
    "BR Code entities that passed validation",
    labelnames=("key_type",),
)
_VALIDATION_ERRORS_TOTAL: Final = Counter(
    "pixbrcode_validation_errors_total",
    "Rejected BR Code constructions by error code and field",
    labelnames=("code", "field"),
)


def record_payload_built(key_type: str) -> None:
    _PAYLOADS_BUILT_TOTAL.labels(key_type=key_type).inc()


def record_validation_error(code: str, field: str | None) -> None:
    _VALIDATION_ERRORS_TOTAL.labels(code=code, field=field or "unknown").inc()


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
