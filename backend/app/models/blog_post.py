"""
Blog Management API — BlogPost SQLAlchemy Model
================================================

What:  ORM model representing the `blog_posts` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by BlogPostRepository and by BlogPostService (entity construction).

Table Design:
    - id: UUID4 string assigned by the service, never by the database
    - title / description / body: content columns; limits below
    - created_at / updated_at: UTC, timezone-aware; written by the service
    - deleted_at: soft-delete marker. NULL = active, non-NULL = deleted.
      Every repository query filters on `deleted_at IS NULL`.

    Generic SQLAlchemy types are used so the same model runs on PostgreSQL
    (production) and SQLite (tests).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# Shared with the service-layer validation
TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class BlogPost(Base):
    """
    Represents a blog post.

    Lifecycle:
        1. Created by BlogPostService.create_blog (created_at == updated_at)
        2. Updated any number of times (updated_at refreshed on every PATCH)
        3. Soft-deleted once; afterwards invisible to every read and write

    Query Patterns:
        - List: WHERE deleted_at IS NULL ORDER BY created_at DESC
        - Get one: WHERE id = :id AND deleted_at IS NULL
    """

    __tablename__ = "blog_posts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="UUID4 string assigned at creation",
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
    )

    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # Stored in UTC. SQLite returns these naive; the response schema
    # re-attaches UTC.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the post was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Last successful update (UTC)",
    )

    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Soft-delete marker; NULL while the post is active",
    )

    # ── Indexes ───────────────────────────────────────────────────────────
    __table_args__ = (
        Index("idx_blog_posts_created_at", created_at.desc()),
        Index("idx_blog_posts_deleted_at", deleted_at),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<BlogPost(id={self.id}, title='{self.title}', "
            f"created_at='{self.created_at}')>"
        )
