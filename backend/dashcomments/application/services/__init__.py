"""Application services."""

from dashcomments.application.services.comment_service import (
    CommentService,
    SPACE_ACCESS_DENIED_MESSAGE,
)

__all__ = [
    "CommentService",
    "SPACE_ACCESS_DENIED_MESSAGE",
]
