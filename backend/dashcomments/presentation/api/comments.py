"""
Comments API Router - FastAPI endpoints for dashboard tile comments.

- Receives the CommentService via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Domain exceptions are mapped to status codes here

Flow:
  HTTP Request → Router → CommentService → Repositories → Database
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from dashcomments.application.dto.comment import CommentDTO, comments_by_tile_to_dto
from dashcomments.application.services import CommentService
from dashcomments.domain.entities.session_user import SessionUser
from dashcomments.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    ForbiddenError,
)
from dashcomments.domain.value_objects.comment_id import CommentId
from dashcomments.domain.value_objects.dashboard_tile_uuid import DashboardTileUuid
from dashcomments.domain.value_objects.dashboard_uuid import DashboardUuid
from dashcomments.presentation.dependencies.auth import get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateCommentRequest(BaseModel):
    """
    Request body for creating a comment.

    {
        "text": "plain text",
        "textHtml": "<p>plain text</p>",
        "replyTo": "uuid" | null,
        "mentions": ["user-uuid", ...]
    }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    text_html: str
    reply_to: Optional[str] = None
    mentions: list[str] = Field(default_factory=list)


class CreateCommentResponse(BaseModel):
    status: str = "ok"
    results: str  # new comment id


class ListCommentsResponse(BaseModel):
    status: str = "ok"
    results: dict[str, list[CommentDTO]]


class EmptyResponse(BaseModel):
    status: str = "ok"
    results: None = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


def _to_http_error(e: Exception) -> HTTPException:
    logger.info(f"Comment request rejected: {type(e).__name__}: {e}")
    if isinstance(e, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, ForbiddenError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    # 422 Unprocessable Entity
    return HTTPException(status_code=422, detail=str(e))


# ==================== ENDPOINTS ====================


@router.post(
    "/dashboards/{dashboard_uuid}/{dashboard_tile_uuid}",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def create_comment(
    dashboard_uuid: str,
    dashboard_tile_uuid: str,
    request: CreateCommentRequest,
    service: FromDishka[CommentService],
    current_user: SessionUser = Depends(get_current_user),
):
    """Create a comment (or a reply) on a dashboard tile."""
    try:
        comment_id = await service.create_comment(
            current_user,
            DashboardUuid(dashboard_uuid),
            DashboardTileUuid(dashboard_tile_uuid).value,
            request.text,
            request.text_html,
            CommentId(request.reply_to) if request.reply_to else None,
            request.mentions,
        )
        return CreateCommentResponse(results=comment_id.value)
    except (EntityNotFoundError, ForbiddenError, DomainValidationError, ValueError) as e:
        raise _to_http_error(e) from e


@router.get(
    "/dashboards/{dashboard_uuid}",
    response_model=ListCommentsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_comments(
    dashboard_uuid: str,
    service: FromDishka[CommentService],
    current_user: SessionUser = Depends(get_current_user),
):
    """
    Get unresolved comment threads of a dashboard, grouped by tile.

    Response:
    {
        "status": "ok",
        "results": {
            "<tileUuid>": [
                {"commentId": "uuid", "text": "...", "canRemove": true, "replies": [...]},
                ...
            ]
        }
    }
    """
    try:
        grouped = await service.find_comments_for_dashboard(
            current_user, DashboardUuid(dashboard_uuid)
        )
        return ListCommentsResponse(results=comments_by_tile_to_dto(grouped))
    except (EntityNotFoundError, ForbiddenError, DomainValidationError, ValueError) as e:
        raise _to_http_error(e) from e


@router.patch(
    "/dashboards/{dashboard_uuid}/{comment_id}",
    response_model=EmptyResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def resolve_comment(
    dashboard_uuid: str,
    comment_id: str,
    service: FromDishka[CommentService],
    current_user: SessionUser = Depends(get_current_user),
):
    """Resolve a comment. Resolved comments are hidden from the listing."""
    try:
        await service.resolve_comment(
            current_user, DashboardUuid(dashboard_uuid), CommentId(comment_id)
        )
        return EmptyResponse()
    except (EntityNotFoundError, ForbiddenError, DomainValidationError, ValueError) as e:
        raise _to_http_error(e) from e


@router.delete(
    "/dashboards/{dashboard_uuid}/{comment_id}",
    response_model=EmptyResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_comment(
    dashboard_uuid: str,
    comment_id: str,
    service: FromDishka[CommentService],
    current_user: SessionUser = Depends(get_current_user),
):
    """Delete a comment."""
    try:
        await service.delete_comment(
            current_user, DashboardUuid(dashboard_uuid), CommentId(comment_id)
        )
        return EmptyResponse()
    except (EntityNotFoundError, ForbiddenError, DomainValidationError, ValueError) as e:
        raise _to_http_error(e) from e
