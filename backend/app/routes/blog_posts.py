"""
Blog Management API — Blog Post Route Handlers
===============================================

What:  CRUD endpoints for blog posts under `{API_PREFIX}/blog-post`.
How:   FastAPI parses the body into request schemas, a per-request
       BlogPostService is injected, and the global exception handlers in
       main.py render failures as `{"error", "message"}`.

Status mapping:
    Operation   Success  Validation  NotFound  Storage
    create      201      400         n/a       400
    get one     200      400         404       500
    get all     200      n/a         n/a       500
    update      200      400         404       400
    delete      200      400         404       500

    A body that cannot be parsed is rejected with 400 "Invalid request body"
    by the RequestValidationError handler before the service is called.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import DatabaseError, ValidationError
from app.repositories.blog_post_repository import BlogPostRepository
from app.schemas.blog_post import (
    BlogPostCreateRequest,
    BlogPostEnvelope,
    BlogPostListEnvelope,
    BlogPostUpdateRequest,
    ErrorResponse,
    MessageResponse,
)
from app.services.blog_post_service import BlogPostService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.api_prefix}/blog-post", tags=["Blog Posts"])


# ── Dependencies ──────────────────────────────────────────────────────────

def get_blog_post_service(
    db: AsyncSession = Depends(get_db_session),
) -> BlogPostService:
    """Wires session → repository → service for one request."""
    return BlogPostService(BlogPostRepository(db))


@contextmanager
def reported_as(error: str, storage_status: int = 500) -> Iterator[None]:
    """
    Label validation and storage failures raised inside the block.

    Errors that already carry a specific label (e.g. "Blog ID is required")
    keep it. NotFoundError passes through untouched.
    """
    try:
        yield
    except (ValidationError, DatabaseError) as exc:
        if exc.has_default_error:
            exc.error = error
        if isinstance(exc, DatabaseError):
            exc.status_code = storage_status
        raise


# ── Endpoints ─────────────────────────────────────────────────────────────

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BlogPostEnvelope,
    responses={
        400: {"description": "Invalid body, validation or storage failure", "model": ErrorResponse},
    },
    summary="Create a new blog post",
)
async def create_blog_post(
    request: BlogPostCreateRequest,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostEnvelope:
    """Create a blog post from title, optional description, and body."""
    with reported_as("Failed to create blog post", storage_status=status.HTTP_400_BAD_REQUEST):
        post = await service.create_blog(request)

    return BlogPostEnvelope(message="Blog post created successfully", data=post)


@router.get(
    "",
    response_model=BlogPostListEnvelope,
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get all blog posts",
)
async def get_all_blog_posts(
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostListEnvelope:
    """All active posts, newest first, with their count."""
    with reported_as("Failed to retrieve blog posts"):
        posts = await service.get_all_blogs()

    return BlogPostListEnvelope(
        message="Blog posts retrieved successfully",
        data=posts,
        count=len(posts),
    )


@router.get(
    "/{post_id}",
    response_model=BlogPostEnvelope,
    responses={
        400: {"description": "Invalid ID", "model": ErrorResponse},
        404: {"description": "Blog post not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a blog post by ID",
)
async def get_blog_post(
    post_id: str,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostEnvelope:
    with reported_as("Failed to retrieve blog post"):
        post = await service.get_blog_by_id(post_id.strip())

    return BlogPostEnvelope(message="Blog post retrieved successfully", data=post)


@router.patch(
    "/{post_id}",
    response_model=BlogPostEnvelope,
    responses={
        400: {"description": "Invalid body, validation or storage failure", "model": ErrorResponse},
        404: {"description": "Blog post not found", "model": ErrorResponse},
    },
    summary="Update a blog post",
)
async def update_blog_post(
    post_id: str,
    request: BlogPostUpdateRequest,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostEnvelope:
    """
    Partial update: only fields present in the body change.

    Storage failures are reported as 400 like validation failures, matching
    the create endpoint.
    """
    with reported_as("Failed to update blog post", storage_status=status.HTTP_400_BAD_REQUEST):
        post = await service.update_blog(post_id.strip(), request)

    return BlogPostEnvelope(message="Blog post updated successfully", data=post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid ID", "model": ErrorResponse},
        404: {"description": "Blog post not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a blog post",
)
async def delete_blog_post(
    post_id: str,
    service: BlogPostService = Depends(get_blog_post_service),
) -> MessageResponse:
    """Soft delete; the post disappears from every read."""
    with reported_as("Failed to delete blog post"):
        await service.delete_blog(post_id.strip())

    return MessageResponse(message="Blog post deleted successfully")
