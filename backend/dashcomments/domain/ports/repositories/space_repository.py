"""
Space Repository Port - Read-only space lookup.
Implementation: dashcomments/infrastructure/persistence/prisma_space_repository.py

get_space_summary may raise on infrastructure failure; callers decide how
to degrade.
"""

from abc import ABC, abstractmethod
from typing import Optional
from dashcomments.domain.entities.space import SpaceSummary


class SpaceRepository(ABC):
    @abstractmethod
    async def get_space_summary(self, space_uuid: str) -> Optional[SpaceSummary]: ...
