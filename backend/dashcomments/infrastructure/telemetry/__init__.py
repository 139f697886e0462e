"""Telemetry observers for comment events."""

from dashcomments.infrastructure.telemetry.prometheus_comment_observer import (
    PrometheusCommentObserver,
)

__all__ = ["PrometheusCommentObserver"]
