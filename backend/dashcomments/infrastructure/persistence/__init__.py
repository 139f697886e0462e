"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from dashcomments.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from dashcomments.infrastructure.persistence.prisma_dashboard_repository import (
    PrismaDashboardRepository,
)
from dashcomments.infrastructure.persistence.prisma_space_repository import (
    PrismaSpaceRepository,
)

__all__ = [
    "PrismaCommentRepository",
    "PrismaDashboardRepository",
    "PrismaSpaceRepository",
]
