"""
Comment Service - Permission-checked operations on dashboard comments.

Every operation follows the same sequence, each await gating the next:
    dashboard lookup → capability check → space access check → store → telemetry

Space access is fail-closed: when the space cannot be looked up the decision
is INDETERMINATE, which is treated as "no access".

Delete differs from the other operations: it is gated by space access only,
then allows managers to delete any comment and owners to delete their own.
With `legacy_owner_delete` enabled, an owner without manage capability gets
the comment deleted AND a ForbiddenError, matching the historical API.
"""

from logging import getLogger
from typing import Optional

from dashcomments.domain.authorization.decision import AccessDecision
from dashcomments.domain.authorization.vocabulary import Action, ResourceTag
from dashcomments.domain.entities.comment import Comment
from dashcomments.domain.entities.dashboard import Dashboard
from dashcomments.domain.entities.session_user import SessionUser
from dashcomments.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    ForbiddenError,
)
from dashcomments.domain.ports.comment_events import CommentEvent, CommentEventObserver
from dashcomments.domain.ports.repositories import (
    CommentRepository,
    DashboardRepository,
    SpaceRepository,
)
from dashcomments.domain.services.space_access import has_space_access
from dashcomments.domain.value_objects.comment_id import CommentId
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid

logger = getLogger(__name__)

SPACE_ACCESS_DENIED_MESSAGE = (
    "You don't have access to the space this dashboard belongs to"
)


class CommentService:
    def __init__(
        self,
        dashboard_repository: DashboardRepository,
        space_repository: SpaceRepository,
        comment_repository: CommentRepository,
        event_observer: CommentEventObserver,
        legacy_owner_delete: bool = False,
    ):
        self._dashboard_repository = dashboard_repository
        self._space_repository = space_repository
        self._comment_repository = comment_repository
        self._event_observer = event_observer
        self._legacy_owner_delete = legacy_owner_delete

    # ==================== ACCESS CHECKS ====================

    async def check_dashboard_space_access(
        self, user: SessionUser, space_uuid: str
    ) -> AccessDecision:
        try:
            space = await self._space_repository.get_space_summary(space_uuid)
        except Exception:
            logger.exception(f"Space lookup failed for space {space_uuid}")
            return AccessDecision.INDETERMINATE

        if space is None:
            logger.warning(f"Space {space_uuid} not found while checking access")
            return AccessDecision.INDETERMINATE

        return has_space_access(user, space)

    async def has_dashboard_space_access(
        self, user: SessionUser, space_uuid: str
    ) -> bool:
        decision = await self.check_dashboard_space_access(user, space_uuid)
        try:
            self._event_observer.track_access_decision(decision)
        except Exception:
            logger.warning("Failed to track space access decision", exc_info=True)
        return decision.is_allowed

    async def _get_dashboard(self, dashboard_uuid: DashboardUuid) -> Dashboard:
        dashboard = await self._dashboard_repository.get_by_id(dashboard_uuid)
        if dashboard is None:
            raise EntityNotFoundError(f"Dashboard {dashboard_uuid.value} not found")
        return dashboard

    async def _require_space_access(
        self, user: SessionUser, dashboard: Dashboard
    ) -> None:
        if not await self.has_dashboard_space_access(user, dashboard.space_uuid):
            raise ForbiddenError(SPACE_ACCESS_DENIED_MESSAGE)

    async def _get_dashboard_comment(
        self, dashboard: Dashboard, comment_id: CommentId
    ) -> Comment:
        comment = await self._comment_repository.get_by_id(comment_id)
        # Comments are only reachable through their own dashboard
        if comment is None or comment.dashboard_uuid != dashboard.dashboard_uuid:
            raise EntityNotFoundError(f"Comment {comment_id.value} not found")
        return comment

    async def _get_reply_parent(
        self, dashboard: Dashboard, reply_to: CommentId, dashboard_tile_uuid: str
    ) -> Comment:
        """
        Look up the comment a reply answers.

        The parent must live on the same dashboard tile, and no comment up its
        chain may be resolved, otherwise the reply would never be listed.
        """
        parent = await self._get_dashboard_comment(dashboard, reply_to)
        if parent.dashboard_tile_uuid != dashboard_tile_uuid:
            raise DomainValidationError(
                "A reply must be on the same tile as the comment it answers"
            )

        current = parent
        seen: set[str] = set()
        while True:
            if current.resolved:
                raise DomainValidationError("Cannot reply to a resolved comment")
            if current.reply_to is None or current.comment_id.value in seen:
                return parent
            seen.add(current.comment_id.value)
            current = await self._get_dashboard_comment(dashboard, current.reply_to)

    def _track(self, name: str, user: SessionUser, properties: dict) -> None:
        try:
            self._event_observer.track(
                CommentEvent(
                    name=name, user_uuid=user.user_uuid.value, properties=properties
                )
            )
        except Exception:
            logger.warning(f"Failed to track {name} event", exc_info=True)

    # ==================== OPERATIONS ====================

    async def create_comment(
        self,
        user: SessionUser,
        dashboard_uuid: DashboardUuid,
        dashboard_tile_uuid: str,
        text: str,
        text_html: str,
        reply_to: Optional[CommentId],
        mentions: list[str],
    ) -> CommentId:
        dashboard = await self._get_dashboard(dashboard_uuid)

        if user.ability.cannot(
            Action.CREATE,
            ResourceTag.DASHBOARD_COMMENTS,
            {
                "projectUuid": dashboard.project_uuid,
                "organizationUuid": user.organization_uuid.value,
            },
        ):
            raise ForbiddenError()

        await self._require_space_access(user, dashboard)

        if reply_to is not None:
            await self._get_reply_parent(dashboard, reply_to, dashboard_tile_uuid)

        comment = Comment.create(
            dashboard_uuid=dashboard_uuid,
            dashboard_tile_uuid=dashboard_tile_uuid,
            user_uuid=user.user_uuid,
            text=text,
            text_html=text_html,
            reply_to=reply_to,
            mentions=mentions,
        )
        comment_id = await self._comment_repository.create(comment)
        logger.info(
            f"User {user.user_uuid.value} commented on dashboard {dashboard_uuid.value}"
        )

        self._track(
            "comment.created",
            user,
            {
                "dashboardUuid": dashboard_uuid.value,
                "dashboardTileUuid": dashboard_tile_uuid,
                "isReply": comment.is_reply,
                "hasMention": comment.has_mention,
            },
        )
        return comment_id

    async def find_comments_for_dashboard(
        self, user: SessionUser, dashboard_uuid: DashboardUuid
    ) -> dict[str, list[Comment]]:
        dashboard = await self._get_dashboard(dashboard_uuid)

        if user.ability.cannot(
            Action.VIEW, ResourceTag.DASHBOARD_COMMENTS, dashboard.subject_attrs()
        ):
            raise ForbiddenError()

        await self._require_space_access(user, dashboard)

        can_user_remove_any_comment = user.ability.can(
            Action.MANAGE, ResourceTag.DASHBOARD_COMMENTS, dashboard.subject_attrs()
        )

        return await self._comment_repository.find_for_dashboard(
            dashboard_uuid, user.user_uuid, can_user_remove_any_comment
        )

    async def resolve_comment(
        self,
        user: SessionUser,
        dashboard_uuid: DashboardUuid,
        comment_id: CommentId,
    ) -> None:
        dashboard = await self._get_dashboard(dashboard_uuid)

        if user.ability.cannot(
            Action.MANAGE, ResourceTag.DASHBOARD_COMMENTS, dashboard.subject_attrs()
        ):
            raise ForbiddenError()

        await self._require_space_access(user, dashboard)

        comment = await self._get_dashboard_comment(dashboard, comment_id)
        await self._comment_repository.resolve(comment_id)

        self._track(
            "comment.resolved",
            user,
            {
                "dashboardUuid": dashboard_uuid.value,
                "dashboardTileUuid": comment.dashboard_tile_uuid,
                "isReply": comment.is_reply,
                "isOwner": comment.is_owned_by(user.user_uuid),
                "hasMention": comment.has_mention,
            },
        )

    async def delete_comment(
        self,
        user: SessionUser,
        dashboard_uuid: DashboardUuid,
        comment_id: CommentId,
    ) -> None:
        dashboard = await self._get_dashboard(dashboard_uuid)

        await self._require_space_access(user, dashboard)

        can_remove_any_comment = user.ability.can(
            Action.MANAGE, ResourceTag.DASHBOARD_COMMENTS, dashboard.subject_attrs()
        )

        comment = await self._get_dashboard_comment(dashboard, comment_id)
        is_owner = comment.is_owned_by(user.user_uuid)

        if not can_remove_any_comment:
            if not is_owner:
                raise ForbiddenError()

            await self._comment_repository.delete(comment_id)
            if self._legacy_owner_delete:
                logger.warning(
                    f"Comment {comment_id.value} deleted by its owner, "
                    "reporting Forbidden (legacy owner delete)"
                )
                raise ForbiddenError()
        else:
            await self._comment_repository.delete(comment_id)

        self._track(
            "comment.deleted",
            user,
            {
                "dashboardUuid": dashboard_uuid.value,
                "dashboardTileUuid": comment.dashboard_tile_uuid,
                "isReply": comment.is_reply,
                "isOwner": is_owner,
                "hasMention": comment.has_mention,
            },
        )
