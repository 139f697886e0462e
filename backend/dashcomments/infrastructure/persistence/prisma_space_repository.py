"""
Prisma Space Repository Implementation.

Errors from the database are not caught here: the comment service treats
a failed lookup as "access cannot be determined".
"""

from typing import Optional
from prisma import Prisma
from dashcomments.domain.entities.space import SpaceSummary
from dashcomments.domain.ports.repositories import SpaceRepository


class PrismaSpaceRepository(SpaceRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_space_summary(self, space_uuid: str) -> Optional[SpaceSummary]:
        record = await self._prisma.space.find_unique(
            where={"space_uuid": space_uuid},
            include={"project": True, "shares": True},
        )
        if record is None or record.project is None:
            return None

        return SpaceSummary(
            space_uuid=record.space_uuid,
            project_uuid=record.project_uuid,
            organization_uuid=record.project.organization_uuid,
            is_private=record.is_private,
            access=frozenset(share.user_uuid for share in record.shares or []),
        )
