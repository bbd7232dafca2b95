"""
Blog Management API — Blog Post Repository (SQLAlchemy)
========================================================

What:  AsyncSession-backed implementation of BlogPostRepositoryBase.
Who:   Built per request by the route dependency; called by BlogPostService.

Statements:
    create     INSERT (add + flush, so constraint errors surface here)
    get_by_id  SELECT ... WHERE id = :id AND deleted_at IS NULL
    get_all    SELECT ... WHERE deleted_at IS NULL ORDER BY created_at DESC
    update     UPDATE ... WHERE id = :id AND deleted_at IS NULL
    delete     UPDATE ... SET deleted_at = now WHERE id = :id AND deleted_at IS NULL

Transactions are owned by get_db_session (commit on success, rollback on
error). Concurrent updates of the same id are last-write-wins; there is no
version column.
"""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.blog_post import BlogPost
from app.repositories.base import BlogPostRepositoryBase

logger = logging.getLogger(__name__)

RESOURCE = "blog post"


class BlogPostRepository(BlogPostRepositoryBase):
    """Persistence for blog posts over a single request-scoped session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, post: BlogPost) -> None:
        self.session.add(post)
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating blog post %s: %s", post.id, str(e))
            raise DatabaseError(
                message="Could not save the blog post.",
                context={"post_id": post.id, "error_type": type(e).__name__},
            ) from e

    async def get_by_id(self, post_id: str) -> BlogPost:
        try:
            result = await self.session.execute(
                select(BlogPost).where(
                    BlogPost.id == post_id,
                    BlogPost.deleted_at.is_(None),
                )
            )
            post = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching blog post %s: %s", post_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the blog post.",
                context={"post_id": post_id, "error_type": type(e).__name__},
            ) from e

        if post is None:
            raise NotFoundError(resource=RESOURCE, resource_id=post_id)

        # Detach so that the service's in-memory merge is not autoflushed
        self.session.expunge(post)
        return post

    async def get_all(self) -> List[BlogPost]:
        try:
            result = await self.session.execute(
                select(BlogPost)
                .where(BlogPost.deleted_at.is_(None))
                .order_by(BlogPost.created_at.desc())
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing blog posts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve blog posts.",
                context={"error_type": type(e).__name__},
            ) from e

    async def update(self, post: BlogPost) -> None:
        stmt = (
            update(BlogPost)
            .where(BlogPost.id == post.id, BlogPost.deleted_at.is_(None))
            .values(
                title=post.title,
                description=post.description,
                body=post.body,
                updated_at=post.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Database error updating blog post %s: %s", post.id, str(e))
            raise DatabaseError(
                message="Could not update the blog post.",
                context={"post_id": post.id, "error_type": type(e).__name__},
            ) from e

        if result.rowcount == 0:
            raise NotFoundError(resource=RESOURCE, resource_id=post.id)

    async def delete(self, post_id: str) -> None:
        stmt = (
            update(BlogPost)
            .where(BlogPost.id == post_id, BlogPost.deleted_at.is_(None))
            .values(deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Database error deleting blog post %s: %s", post_id, str(e))
            raise DatabaseError(
                message="Could not delete the blog post.",
                context={"post_id": post_id, "error_type": type(e).__name__},
            ) from e

        if result.rowcount == 0:
            raise NotFoundError(resource=RESOURCE, resource_id=post_id)
