"""
Blog Management API — Access Log Middleware
============================================

What:  One access log line per HTTP request.
How:   Times the rest of the stack, then logs the route *template* that
       matched (so every `/api/blog-post/{post_id}` request groups under one
       key), the post id when the route carries one, the status and the
       request id.

Line format:
    PATCH /api/blog-post/{post_id} 200 4.1ms post=550e8400-... [a1b2c3d4]
    GET /api/nothing-here 404 0.3ms [9f8e7d6c]        (no route matched)

Level follows the status class: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
Request bodies are never logged. /health is skipped.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import get_request_id

logger = logging.getLogger("blog_api.access")

UNLOGGED_PATHS = frozenset({"/health"})


def route_template(request: Request) -> str:
    """The matched route's path template, or the raw path when nothing matched."""
    # The router writes "route" into the shared scope while call_next runs
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, route template, status and duration for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        post_id = request.scope.get("path_params", {}).get("post_id")
        target = f" post={post_id}" if post_id else ""

        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.1fms%s [%s]",
            request.method,
            route_template(request),
            response.status_code,
            elapsed_ms,
            target,
            get_request_id(request),
        )
        return response
