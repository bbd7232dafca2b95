"""
Blog Management API — Request ID Middleware
============================================

What:  Assigns a correlation id to each request and echoes it in the response.
How:   Reuses a client-supplied X-Request-ID header or generates a short id,
       stores it in a ContextVar for code running inside the request and on
       request.state for code that runs after the ContextVar is reset (the
       outermost 500 handler), and sets it on the response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str:
    """
    Request id for `request`, usable at any layer of the stack.

    request.state lives in the scope, which every middleware shares, so it
    outlives the ContextVar. The header is the fallback for requests that
    never reached RequestIDMiddleware.
    """
    return (
        getattr(request.state, "request_id", None)
        or request.headers.get(REQUEST_ID_HEADER)
        or request_id_var.get("")
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request id to the request context and the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
