"""
API Routers - FastAPI endpoint definitions.
"""

from dashcomments.presentation.api.comments import router as comments_router
from dashcomments.presentation.api.metrics import router as metrics_router

__all__ = [
    "comments_router",
    "metrics_router",
]
