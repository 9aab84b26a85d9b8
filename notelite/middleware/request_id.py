"""
NoteLite Backend — Request ID Middleware
==========================================

What:  Assigns a short unique ID to each incoming request and returns it in
       the `X-Request-ID` response header.
Why:   Every log line and error body of a request can be correlated by ID.
How:   Reuses a client-supplied X-Request-ID or generates one, stores it in a
       ContextVar for loggers and error handlers, and echoes it back.
Who:   Applied to every request via Starlette middleware.
When:  Before request logging and authentication, so 401 responses carry it.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client-supplied IDs end up in log lines and error bodies
_CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(header_value: Optional[str]) -> str:
    """Reuse a well-formed client ID, otherwise generate a fresh one."""
    if header_value and _CLIENT_ID_PATTERN.fullmatch(header_value):
        return header_value
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if it is at most 64
           characters of [A-Za-z0-9._-]
        2. Otherwise generate an 8-character ID from a UUID4
        3. Store it in the ContextVar and on request.state
        4. Add it to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
