"""
NoteLite Backend — HTTP Basic Authentication Middleware
=========================================================

What:  Rejects every request that does not carry valid HTTP Basic credentials.
Why:   One gate in front of the whole application, so no route (including
       the OpenAPI docs and unknown paths) can be reached anonymously.
How:   Parses `Authorization: Basic base64(username:password)`, checks it
       against the PrincipalStore in a worker thread (Argon2 is CPU-bound),
       and answers 401 with a `WWW-Authenticate` challenge on failure.
Who:   Applied to every request via Starlette middleware.
When:  After RequestID and request logging (so 401s are logged with an ID),
       before any route handler runs.

Security posture:
    - Stateless: no sessions or cookies, so no CSRF token is required.
    - Fails closed: missing header, wrong scheme, bad base64, missing colon,
      unknown user and wrong password all produce the same 401 body.
    - Credentials are never logged; only the username of a failed attempt.
"""

import base64
import binascii
import logging
from typing import Optional, Tuple

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from notelite.middleware.request_id import request_id_var
from notelite.security import PrincipalStore

logger = logging.getLogger(__name__)


def parse_basic_credentials(header: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Decode an Authorization header value into (username, password).

    Returns None for anything that is not well-formed Basic credentials.
    The password may itself contain colons; only the first colon splits.
    """
    if not header:
        return None
    scheme, _, encoded = header.partition(" ")
    if scheme.lower() != "basic" or not encoded.strip():
        return None
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """
    Requires valid HTTP Basic credentials on every request.

    On success the username is stored on `request.state.principal` for
    handlers and logs. On failure the request never reaches the router.
    """

    def __init__(self, app: ASGIApp, principals: PrincipalStore, realm: str = "notelite"):
        super().__init__(app)
        self.principals = principals
        self.realm = realm

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        credentials = parse_basic_credentials(request.headers.get("Authorization"))
        if credentials is None:
            return self._challenge("Authentication required")

        username, password = credentials
        authenticated = await run_in_threadpool(
            self.principals.authenticate, username, password
        )
        if not authenticated:
            logger.warning(
                "Rejected credentials for user '%s' on %s %s",
                username,
                request.method,
                request.url.path,
            )
            return self._challenge("Invalid username or password")

        request.state.principal = username
        return await call_next(request)

    def _challenge(self, message: str) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={
                "error": "unauthorized",
                "message": message,
                "details": None,
                "request_id": request_id_var.get(""),
            },
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}", charset="UTF-8"'},
        )
