"""Comment DTOs for API responses (camelCase on the wire)."""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dashcomments.domain.entities.comment import Comment


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommentUserDTO(_CamelModel):
    user_uuid: str
    name: Optional[str] = None


class CommentDTO(_CamelModel):
    comment_id: str
    dashboard_tile_uuid: str
    text: str
    text_html: str
    created_at: datetime
    user: CommentUserDTO
    reply_to: Optional[str] = None
    replies: list[CommentDTO] = []
    resolved: bool = False
    can_remove: bool = False
    mentions: list[str] = []

    @classmethod
    def from_entity(cls, comment: Comment) -> CommentDTO:
        return cls(
            comment_id=comment.comment_id.value,
            dashboard_tile_uuid=comment.dashboard_tile_uuid,
            text=comment.text,
            text_html=comment.text_html,
            created_at=comment.created_at,
            user=CommentUserDTO(
                user_uuid=comment.user_uuid.value, name=comment.user_name
            ),
            reply_to=comment.reply_to.value if comment.reply_to else None,
            replies=[cls.from_entity(reply) for reply in comment.replies],
            resolved=comment.resolved,
            can_remove=comment.can_remove,
            mentions=list(comment.mentions),
        )


def comments_by_tile_to_dto(
    grouped: dict[str, list[Comment]],
) -> dict[str, list[CommentDTO]]:
    return {
        tile_uuid: [CommentDTO.from_entity(comment) for comment in comments]
        for tile_uuid, comments in grouped.items()
    }
