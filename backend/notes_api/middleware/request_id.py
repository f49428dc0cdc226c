"""
Notes API — Request ID Middleware
===================================

What:  Assigns an ID to each incoming request and echoes it in the response.
Why:   Lets a client error report be matched to the server log lines of the
       same request.
How:   Uses the client's X-Request-ID header when present, otherwise an
       8-character UUID prefix; stores it in a ContextVar for loggers and
       exception handlers, and sets it on the response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
