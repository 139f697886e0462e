"""
Comment telemetry side-channel.

The comment service describes what happened as a CommentEvent and hands it
to an observer. Observers are not authoritative: their failures must not
change the result of an operation.
Implementation: dashcomments/infrastructure/telemetry/prometheus_comment_observer.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from dashcomments.domain.authorization.decision import AccessDecision


@dataclass(frozen=True)
class CommentEvent:
    name: str  # e.g. "comment.created"
    user_uuid: str
    properties: dict[str, Any] = field(default_factory=dict)


class CommentEventObserver(ABC):
    @abstractmethod
    def track(self, event: CommentEvent) -> None: ...

    def track_access_decision(self, decision: AccessDecision) -> None:
        """Optional hook, called with every space access decision."""
        return None
