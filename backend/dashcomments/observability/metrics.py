"""
Prometheus Metrics for the dashboard comments backend.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (comment events, access decisions)
    - Histogram: Distribution (request latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",  # must be the same name as grafana panel metric
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],  # in seconds
)

COMMENT_EVENTS_TOTAL = Counter(
    "comments_events_total",
    "Total number of comment lifecycle events",
    ["event"],
)

SPACE_ACCESS_DECISIONS_TOTAL = Counter(
    "comments_space_access_decisions_total",
    "Space access decisions taken while handling comment requests",
    ["decision"],
)


# =============================================================================
# HELPERS
# =============================================================================
def observe_request_latency(
    method: str, route: str, status_code: int, duration_seconds: float
) -> None:
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration_seconds)


def increment_comment_event(event: str) -> None:
    COMMENT_EVENTS_TOTAL.labels(event=event).inc()


def increment_space_access_decision(decision: str) -> None:
    SPACE_ACCESS_DECISIONS_TOTAL.labels(decision=decision).inc()


def get_metrics_content() -> tuple[bytes, str]:
    """Return (payload, content type) for the /metrics endpoint."""
    return generate_latest(), CONTENT_TYPE_LATEST
