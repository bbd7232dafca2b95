"""Create blog_posts table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `blog_posts` table with its soft-delete column and indexes.
How:   Mirrors app/models/blog_post.py.

Rollback: downgrade() drops the table (all posts are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "blog_posts",
        sa.Column(
            "id",
            sa.String(36),
            nullable=False,
            comment="UUID4 string assigned at creation",
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column(
            "description",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
        ),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When the post was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Last successful update (UTC)",
        ),
        sa.Column(
            "deleted_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Soft-delete marker; NULL while the post is active",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Listing order is newest first
    op.create_index(
        "idx_blog_posts_created_at",
        "blog_posts",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_blog_posts_deleted_at", "blog_posts", ["deleted_at"])


def downgrade() -> None:
    op.drop_index("idx_blog_posts_deleted_at", table_name="blog_posts")
    op.drop_index("idx_blog_posts_created_at", table_name="blog_posts")
    op.drop_table("blog_posts")
