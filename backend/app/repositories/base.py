"""
Blog Management API — Abstract Blog Post Repository
====================================================

What:  Abstract base class defining the persistence contract for blog posts.
How:   BlogPostRepository implements it over SQLAlchemy; unit tests replace it
       with AsyncMock(spec=BlogPostRepositoryBase).
Who:   Consumed by BlogPostService.
"""

from abc import ABC, abstractmethod
from typing import List

from app.models.blog_post import BlogPost


class BlogPostRepositoryBase(ABC):
    """
    Contract:
        - All reads and writes ignore soft-deleted rows
        - "No matching row" raises NotFoundError
        - Any storage failure raises DatabaseError
        - No retries; every failure is terminal for the call
    """

    @abstractmethod
    async def create(self, post: BlogPost) -> None:
        """
        Insert a new row.

        Raises:
            DatabaseError: Constraint violation or connectivity failure.
        """
        ...

    @abstractmethod
    async def get_by_id(self, post_id: str) -> BlogPost:
        """
        Return the active post with this id.

        The returned object is detached: mutating it does not write anything
        until it is passed to update().

        Raises:
            NotFoundError: No such row, or the row is soft-deleted.
            DatabaseError: Query failed.
        """
        ...

    @abstractmethod
    async def get_all(self) -> List[BlogPost]:
        """Return all active posts, newest first. Empty table → []."""
        ...

    @abstractmethod
    async def update(self, post: BlogPost) -> None:
        """
        Persist title, description, body and updated_at by primary key.

        Raises:
            NotFoundError: Zero rows affected (missing or deleted).
            DatabaseError: Statement failed.
        """
        ...

    @abstractmethod
    async def delete(self, post_id: str) -> None:
        """
        Soft-delete the post.

        Raises:
            NotFoundError: Zero rows affected (missing or already deleted).
            DatabaseError: Statement failed.
        """
        ...
