"""
DOMAIN SERVICES - Pure functions over entities (no I/O)
"""

from dashcomments.domain.services.space_access import has_space_access
from dashcomments.domain.services.comment_threads import group_comments_by_tile

__all__ = [
    "has_space_access",
    "group_comments_by_tile",
]
