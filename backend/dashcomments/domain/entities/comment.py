"""
Comment Entity - A note left on a dashboard tile, optionally replying to
another comment.

Lifecycle: Active -> Resolved (one-way) and Active/Resolved -> Deleted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from dashcomments.domain.exceptions.validation_error import DomainValidationError
from dashcomments.domain.value_objects.comment_id import CommentId
from dashcomments.domain.value_objects.dashboard_tile_uuid import DashboardTileUuid
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid
from dashcomments.domain.value_objects.user_uuid import UserUuid


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


@dataclass
class Comment:
    # Required fields (no defaults) - must come first
    comment_id: CommentId
    dashboard_uuid: DashboardUuid
    dashboard_tile_uuid: str
    user_uuid: UserUuid
    text: str
    text_html: str
    created_at: datetime
    # Optional fields (with defaults) - must come last
    reply_to: Optional[CommentId] = None
    mentions: list[str] = field(default_factory=list)
    resolved: bool = False
    # Read side only, filled by the repository when listing
    user_name: Optional[str] = None
    can_remove: bool = False
    replies: list[Comment] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        dashboard_uuid: DashboardUuid,
        dashboard_tile_uuid: str,
        user_uuid: UserUuid,
        text: str,
        text_html: str,
        reply_to: Optional[CommentId] = None,
        mentions: Optional[Iterable[str]] = None,
    ) -> Comment:
        """Factory method to create a new Comment with a generated ID and timestamp."""
        if not text or not text.strip():
            raise DomainValidationError("Comment text cannot be empty")
        try:
            DashboardTileUuid(dashboard_tile_uuid)
        except ValueError as e:
            raise DomainValidationError(
                "Comment must be attached to a dashboard tile"
            ) from e

        return cls(
            comment_id=CommentId.generate(),
            dashboard_uuid=dashboard_uuid,
            dashboard_tile_uuid=dashboard_tile_uuid,
            user_uuid=user_uuid,
            text=text,
            text_html=text_html,
            created_at=datetime.now(timezone.utc),
            reply_to=reply_to,
            mentions=_unique(mentions or []),
        )

    @property
    def is_reply(self) -> bool:
        return self.reply_to is not None

    @property
    def has_mention(self) -> bool:
        return len(self.mentions) > 0

    def is_owned_by(self, user_uuid: UserUuid) -> bool:
        return self.user_uuid == user_uuid

    def resolve(self) -> None:
        # No way back to unresolved
        self.resolved = True
