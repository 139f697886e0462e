"""Observability package for the dashboard comments backend."""

from dashcomments.observability.metrics import (
    increment_comment_event,
    increment_space_access_decision,
    observe_request_latency,
    get_metrics_content,
)

__all__ = [
    "increment_comment_event",
    "increment_space_access_decision",
    "observe_request_latency",
    "get_metrics_content",
]
