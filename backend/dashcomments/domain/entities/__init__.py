"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Pure Python dataclasses (no ORM, no Pydantic)

Dashboard and SpaceSummary are read-only references owned by other parts
of the application. Comment is the only entity this service mutates.
"""

from dashcomments.domain.entities.comment import Comment
from dashcomments.domain.entities.dashboard import Dashboard
from dashcomments.domain.entities.space import SpaceSummary
from dashcomments.domain.entities.session_user import SessionUser

__all__ = [
    "Comment",
    "Dashboard",
    "SpaceSummary",
    "SessionUser",
]
