"""Data Transfer Objects for API responses."""

from dashcomments.application.dto.comment import (
    CommentDTO,
    CommentUserDTO,
    comments_by_tile_to_dto,
)

__all__ = [
    "CommentDTO",
    "CommentUserDTO",
    "comments_by_tile_to_dto",
]
