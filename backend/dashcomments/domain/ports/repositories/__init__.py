"""
REPOSITORY PORTS - Data lookup and persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application needs
- Does NOT specify implementation (Prisma, SQLAlchemy, etc.)

Infrastructure layer provides implementations.
"""

from dashcomments.domain.ports.repositories.comment_repository import CommentRepository
from dashcomments.domain.ports.repositories.dashboard_repository import DashboardRepository
from dashcomments.domain.ports.repositories.space_repository import SpaceRepository

__all__ = [
    "CommentRepository",
    "DashboardRepository",
    "SpaceRepository",
]
