"""
Prometheus Comment Observer - Implements CommentEventObserver.

Counts comment events per name and space access decisions, and logs each
event with its properties. The correlation id is added by the logging
filter, so events can be matched to their request.
"""

from logging import getLogger

from dashcomments.domain.authorization.decision import AccessDecision
from dashcomments.domain.ports.comment_events import CommentEvent, CommentEventObserver
from dashcomments.observability.metrics import (
    increment_comment_event,
    increment_space_access_decision,
)

logger = getLogger(__name__)


class PrometheusCommentObserver(CommentEventObserver):
    def track(self, event: CommentEvent) -> None:
        increment_comment_event(event.name)
        logger.info(
            f"{event.name} user={event.user_uuid} properties={event.properties}"
        )

    def track_access_decision(self, decision: AccessDecision) -> None:
        increment_space_access_decision(decision.value)
        if decision is AccessDecision.INDETERMINATE:
            logger.warning("Space access could not be determined, denying")
