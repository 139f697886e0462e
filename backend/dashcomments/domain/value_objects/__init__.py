"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from dashcomments.domain.value_objects.user_uuid import UserUuid
from dashcomments.domain.value_objects.organization_uuid import OrganizationUuid
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid
from dashcomments.domain.value_objects.dashboard_tile_uuid import DashboardTileUuid
from dashcomments.domain.value_objects.comment_id import CommentId

__all__ = [
    "UserUuid",
    "OrganizationUuid",
    "DashboardUuid",
    "DashboardTileUuid",
    "CommentId",
]
