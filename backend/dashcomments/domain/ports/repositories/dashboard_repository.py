"""
Dashboard Repository Port - Read-only dashboard lookup.
Implementation: dashcomments/infrastructure/persistence/prisma_dashboard_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from dashcomments.domain.entities.dashboard import Dashboard
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid


class DashboardRepository(ABC):
    @abstractmethod
    async def get_by_id(self, dashboard_uuid: DashboardUuid) -> Optional[Dashboard]: ...
