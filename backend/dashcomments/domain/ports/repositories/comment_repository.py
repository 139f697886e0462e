"""
Comment Repository Port - Interface for comment persistence.
Implementation: dashcomments/infrastructure/persistence/prisma_comment_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from dashcomments.domain.entities.comment import Comment
from dashcomments.domain.value_objects.comment_id import CommentId
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid
from dashcomments.domain.value_objects.user_uuid import UserUuid


class CommentRepository(ABC):
    @abstractmethod
    async def create(self, comment: Comment) -> CommentId: ...

    @abstractmethod
    async def find_for_dashboard(
        self,
        dashboard_uuid: DashboardUuid,
        user_uuid: UserUuid,
        can_remove_any: bool,
    ) -> dict[str, list[Comment]]:
        """Unresolved comment threads keyed by dashboard tile uuid."""
        ...

    @abstractmethod
    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]: ...

    @abstractmethod
    async def resolve(self, comment_id: CommentId) -> None: ...

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment together with every reply in its chain."""
        ...
