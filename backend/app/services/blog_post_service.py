"""
Blog Management API — Blog Post Service (Business Logic)
=========================================================

What:  Business rules layered over the blog post repository.
How:   Validates input, assigns ids and timestamps, merges PATCH payloads,
       and shapes ORM entities into BlogPostResponse objects.
Who:   Called by the blog post route handlers; calls BlogPostRepositoryBase.

Partial update (PATCH) flow:
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ Load by  │───▶│  Validate    │───▶│ Apply fields │───▶│ Persist  │
    │ id       │    │  supplied    │    │ + updated_at │    │ (update) │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘

    Validation runs before any field is applied, so a rejected PATCH leaves
    the stored post untouched.

Errors:
    ValidationError raised here; NotFoundError and DatabaseError propagate
    unchanged from the repository.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from app.exceptions import ValidationError
from app.models.blog_post import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    BlogPost,
)
from app.repositories.base import BlogPostRepositoryBase
from app.schemas.blog_post import (
    BlogPostCreateRequest,
    BlogPostResponse,
    BlogPostUpdateRequest,
)

logger = logging.getLogger(__name__)

ID_REQUIRED_ERROR = "Blog ID is required"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BlogPostService:
    """
    Business logic for blog posts.

    Responsibilities:
        - create_blog():    validate, assign id/timestamps, insert
        - get_blog_by_id(): single post lookup
        - get_all_blogs():  newest-first listing
        - update_blog():    partial update merge
        - delete_blog():    soft delete
    """

    def __init__(self, repository: BlogPostRepositoryBase):
        self.repository = repository

    # ── Create ────────────────────────────────────────────────────────────

    async def create_blog(
        self, request: Optional[BlogPostCreateRequest]
    ) -> BlogPostResponse:
        """
        Create a new blog post.

        Returns:
            BlogPostResponse with a fresh UUID and created_at == updated_at.

        Raises:
            ValidationError: Missing request, empty title/body, field too long.
            DatabaseError:   Insert failed.
        """
        self._validate_create_request(request)

        now = _utcnow()
        post = BlogPost(
            id=str(uuid.uuid4()),
            title=request.title,
            description=request.description,
            body=request.body,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )

        await self.repository.create(post)
        logger.info("Blog post created: %s", post.id)

        return self._to_response(post)

    # ── Read ──────────────────────────────────────────────────────────────

    async def get_blog_by_id(self, post_id: str) -> BlogPostResponse:
        """
        Raises:
            ValidationError: Empty id.
            NotFoundError:   No active post with this id.
        """
        self._require_id(post_id)
        post = await self.repository.get_by_id(post_id)
        return self._to_response(post)

    async def get_all_blogs(self) -> List[BlogPostResponse]:
        posts = await self.repository.get_all()
        return [self._to_response(post) for post in posts]

    # ── Update ────────────────────────────────────────────────────────────

    async def update_blog(
        self, post_id: str, request: Optional[BlogPostUpdateRequest]
    ) -> BlogPostResponse:
        """
        Apply a partial update.

        Only fields that are not None in `request` change. updated_at is
        refreshed and the post is re-persisted even when no field was
        supplied.

        Raises:
            ValidationError: Empty id, empty title/body, field too long.
            NotFoundError:   No active post with this id (on load or on write).
            DatabaseError:   Update failed.
        """
        self._require_id(post_id)
        if request is None:
            request = BlogPostUpdateRequest()

        post = await self.repository.get_by_id(post_id)

        self._validate_update_request(request)

        if request.title is not None:
            post.title = request.title
        if request.description is not None:
            post.description = request.description
        if request.body is not None:
            post.body = request.body

        # Never move updated_at backwards, even if the clock does
        post.updated_at = max(_utcnow(), _as_utc(post.updated_at))

        await self.repository.update(post)
        logger.info(
            "Blog post updated: %s (fields=%s)",
            post_id,
            sorted(request.model_dump(exclude_none=True)),
        )

        return self._to_response(post)

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete_blog(self, post_id: str) -> None:
        """
        Raises:
            ValidationError: Empty id.
            NotFoundError:   No active post with this id.
        """
        self._require_id(post_id)
        await self.repository.delete(post_id)
        logger.info("Blog post deleted: %s", post_id)

    # ── Validation ────────────────────────────────────────────────────────

    @staticmethod
    def _require_id(post_id: Optional[str]) -> None:
        if not post_id:
            raise ValidationError(
                message="blog ID is required",
                field="id",
                error=ID_REQUIRED_ERROR,
            )

    @staticmethod
    def _validate_create_request(request: Optional[BlogPostCreateRequest]) -> None:
        if request is None:
            raise ValidationError(message="request is required")
        if request.title == "":
            raise ValidationError(message="title is required", field="title")
        if request.body == "":
            raise ValidationError(message="body is required", field="body")
        _check_lengths(request.title, request.description)

    @staticmethod
    def _validate_update_request(request: BlogPostUpdateRequest) -> None:
        if request.title == "":
            raise ValidationError(message="title cannot be empty", field="title")
        if request.body == "":
            raise ValidationError(message="body cannot be empty", field="body")
        _check_lengths(request.title, request.description)

    # ── Shaping ───────────────────────────────────────────────────────────

    @staticmethod
    def _to_response(post: BlogPost) -> BlogPostResponse:
        return BlogPostResponse(
            id=post.id,
            title=post.title,
            description=post.description,
            body=post.body,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


def _check_lengths(title: Optional[str], description: Optional[str]) -> None:
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            message=f"title must be at most {TITLE_MAX_LENGTH} characters",
            field="title",
        )
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            message=f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
