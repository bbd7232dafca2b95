"""
Blog Management API — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the three failure classes of the API.
How:   Each exception carries a human-readable message, a short `error` label
       and an HTTP status code. Global exception handlers (registered in
       main.py) turn them into `{"error": ..., "message": ...}` responses.
Who:   Raised by repositories and services; relabelled by route handlers;
       rendered by the handlers in main.py.

Exception Hierarchy:
    BlogAPIError (base)
    ├── ValidationError   → 400 Bad Request (caller can fix the input)
    ├── NotFoundError     → 404 Not Found (missing or soft-deleted)
    └── DatabaseError     → 500 Internal Server Error (storage failure)

Route handlers may override `error` and `status_code` on an instance, e.g.
create and update report storage failures as 400.
"""

from typing import Any, Dict, Optional


class BlogAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:     Human-readable description (returned in the response)
        context:     Additional debug info (logged, never returned)
        error:       Short label returned as the `error` field
        status_code: HTTP status used by the global exception handler
    """

    status_code: int = 500
    default_error: str = "Request failed"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ):
        self.message = message
        self.context = context or {}
        self.error = error or self.default_error
        super().__init__(self.message)

    @property
    def has_default_error(self) -> bool:
        """True while nobody has given this error an operation-specific label."""
        return self.error == self.default_error


class ValidationError(BlogAPIError):
    """
    Raised when caller-supplied input violates a rule.

    When:    Missing request, empty title/body, empty id, field too long.
    HTTP:    400 Bad Request
    """

    status_code = 400
    default_error = "Validation failed"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx, error=error)
        self.field = field


class NotFoundError(BlogAPIError):
    """
    Raised when a requested resource does not exist or is soft-deleted.

    HTTP:    404 Not Found

    The response never echoes the id back; it is kept in `context` for logs.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(
            message=f"The requested {resource} does not exist",
            context=ctx,
            error=f"{resource.capitalize()} not found",
        )
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(BlogAPIError):
    """
    Raised when a database operation fails unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error (create/update routes report 400)

    The SQL and driver message are logged server-side only; the client
    receives `message`.
    """

    status_code = 500
    default_error = "Storage error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
