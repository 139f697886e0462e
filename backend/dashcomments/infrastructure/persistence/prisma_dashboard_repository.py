"""
Prisma Dashboard Repository Implementation.

Reads the dashboard with its space and project to resolve the owning
project and organization.
"""

from typing import Optional
from prisma import Prisma
from dashcomments.domain.entities.dashboard import Dashboard
from dashcomments.domain.ports.repositories import DashboardRepository
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid


class PrismaDashboardRepository(DashboardRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_id(self, dashboard_uuid: DashboardUuid) -> Optional[Dashboard]:
        record = await self._prisma.dashboard.find_unique(
            where={"dashboard_uuid": dashboard_uuid.value},
            include={"space": {"include": {"project": True}}},
        )
        if record is None or record.space is None or record.space.project is None:
            return None

        return Dashboard(
            dashboard_uuid=DashboardUuid(record.dashboard_uuid),
            space_uuid=record.space_uuid,
            project_uuid=record.space.project_uuid,
            organization_uuid=record.space.project.organization_uuid,
        )
