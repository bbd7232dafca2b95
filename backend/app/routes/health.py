"""
Blog Management API — Health Check Route
=========================================

What:  Liveness endpoint for load balancers and container health checks.
How:   Answers without touching the database, so a slow store never makes
       the process look dead.
"""

import logging

from fastapi import APIRouter

from app import __version__
from app.schemas.blog_post import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="OK",
        message="Blog Management API is running",
        version=__version__,
    )
