"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Response

from dashcomments.observability.metrics import get_metrics_content

router = APIRouter(tags=["metrics"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    payload, content_type = get_metrics_content()
    return Response(content=payload, media_type=content_type)
