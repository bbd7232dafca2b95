"""
Blog Management API — Pydantic Request/Response Schemas
========================================================

What:  Pydantic models defining the HTTP contract of the blog post API.
How:   FastAPI parses request bodies into these models, serializes responses
       from them, and generates the OpenAPI document at /docs.

Request models only check types. Business rules (required fields, length
limits, empty-string handling on PATCH) live in BlogPostService so that
callers outside HTTP get the same validation and the same messages.

Response models never expose internal columns (deleted_at).
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class BlogPostCreateRequest(BaseModel):
    """
    Body of POST /blog-post.

    Missing keys default to "" so that the service can report which
    required field is missing.
    """
    title: str = Field(
        default="",
        description="Post title (1-255 characters, required)",
        examples=["My First Blog Post"],
    )
    description: str = Field(
        default="",
        description="Short summary (up to 1000 characters)",
        examples=["This is a brief description of my blog post"],
    )
    body: str = Field(
        default="",
        description="Main content (required)",
        examples=["This is the main content of my blog post..."],
    )


class BlogPostUpdateRequest(BaseModel):
    """
    Body of PATCH /blog-post/{id}.

    Each field is optional: an absent (or null) field is left unchanged.
    An empty string is rejected for title and body and accepted for
    description.
    """
    title: Optional[str] = Field(default=None, examples=["Updated Blog Post Title"])
    description: Optional[str] = Field(default=None, examples=["Updated description"])
    body: Optional[str] = Field(default=None, examples=["Updated blog post content..."])


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class BlogPostResponse(BaseModel):
    """Public representation of a blog post."""
    id: str = Field(description="Unique post identifier (UUID)")
    title: str
    description: str
    body: str
    created_at: datetime = Field(description="Creation time (UTC, ISO 8601)")
    updated_at: datetime = Field(description="Last update time (UTC, ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Naive timestamps (SQLite) are stored as UTC; make that explicit."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class BlogPostEnvelope(BaseModel):
    """Response wrapper for create, get-one and update."""
    message: str = Field(description="Human-readable success message")
    data: BlogPostResponse


class BlogPostListEnvelope(BaseModel):
    """Response wrapper for GET /blog-post."""
    message: str = Field(description="Human-readable success message")
    data: List[BlogPostResponse] = Field(description="Posts, newest first")
    count: int = Field(description="Number of posts in data")


class MessageResponse(BaseModel):
    """Response for operations without a payload (delete)."""
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Shape shared by every error response.

    Example:
        {
            "error": "Blog post not found",
            "message": "The requested blog post does not exist"
        }
    """
    error: str = Field(description="Short error label")
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Always 'OK' while the process serves requests")
    message: str
    version: str = Field(description="Application version")
