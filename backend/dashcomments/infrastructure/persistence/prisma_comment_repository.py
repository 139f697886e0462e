"""
Prisma Comment Repository Implementation.

- Implements CommentRepository port from domain layer
- Maps between Prisma models and domain entities
- Thread grouping is delegated to the domain (group_comments_by_tile)

Mapping:
- Prisma model fields: comment_id, dashboard_uuid, dashboard_tile_uuid,
  user_uuid, text, text_html, reply_to, mentions, resolved, created_at
- Convert str -> CommentId / DashboardUuid / UserUuid when reading
- Author display name comes from the included user relation
- Deleting a comment cascades to its replies (reply_to self-relation)
"""

from typing import Optional
from prisma import Prisma
from prisma.errors import RecordNotFoundError
from prisma.models import DashboardTileComment as PrismaComment
from dashcomments.domain.entities.comment import Comment
from dashcomments.domain.ports.repositories import CommentRepository
from dashcomments.domain.services.comment_threads import group_comments_by_tile
from dashcomments.domain.value_objects.comment_id import CommentId
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid
from dashcomments.domain.value_objects.user_uuid import UserUuid


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        """Map Prisma record to domain entity."""
        user_name = None
        if record.user is not None:
            user_name = f"{record.user.first_name} {record.user.last_name}".strip()
        return Comment(
            comment_id=CommentId(record.comment_id),
            dashboard_uuid=DashboardUuid(record.dashboard_uuid),
            dashboard_tile_uuid=record.dashboard_tile_uuid,
            user_uuid=UserUuid(record.user_uuid),
            text=record.text,
            text_html=record.text_html,
            created_at=record.created_at,
            reply_to=CommentId(record.reply_to) if record.reply_to else None,
            mentions=list(record.mentions or []),
            resolved=record.resolved,
            user_name=user_name or None,
        )

    async def create(self, comment: Comment) -> CommentId:
        record = await self._prisma.dashboardtilecomment.create(
            data={
                "comment_id": comment.comment_id.value,
                "dashboard_uuid": comment.dashboard_uuid.value,
                "dashboard_tile_uuid": comment.dashboard_tile_uuid,
                "user_uuid": comment.user_uuid.value,
                "text": comment.text,
                "text_html": comment.text_html,
                "reply_to": comment.reply_to.value if comment.reply_to else None,
                "mentions": comment.mentions,
                "resolved": comment.resolved,
                "created_at": comment.created_at,
            }
        )
        return CommentId(record.comment_id)

    async def find_for_dashboard(
        self,
        dashboard_uuid: DashboardUuid,
        user_uuid: UserUuid,
        can_remove_any: bool,
    ) -> dict[str, list[Comment]]:
        records = await self._prisma.dashboardtilecomment.find_many(
            where={"dashboard_uuid": dashboard_uuid.value, "resolved": False},
            order={"created_at": "asc"},
            include={"user": True},
        )
        comments = [self._to_entity(record) for record in records]
        return group_comments_by_tile(comments, user_uuid, can_remove_any)

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        record = await self._prisma.dashboardtilecomment.find_unique(
            where={"comment_id": comment_id.value},
            include={"user": True},
        )
        return self._to_entity(record) if record else None

    async def resolve(self, comment_id: CommentId) -> None:
        await self._prisma.dashboardtilecomment.update(
            where={"comment_id": comment_id.value},
            data={"resolved": True},
        )

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete comment by ID. Returns True if deleted.

        Replies go with it through the reply_to cascade in the schema.
        """
        try:
            await self._prisma.dashboardtilecomment.delete(
                where={"comment_id": comment_id.value}
            )
            return True
        except RecordNotFoundError:
            return False
