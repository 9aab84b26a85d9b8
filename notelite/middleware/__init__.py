# Middleware package init
"""
NoteLite Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.
Why:   Tracing, access logging and authentication apply to all routes alike
       and must not be repeated in each handler.

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Logging] → [Basic Auth] → [GZip] → Route Handler

    Why this order:
    1. CORS first: preflight OPTIONS requests are answered before the auth
       gate, and CORS headers are added to 401 responses too
    2. Request ID: correlation ID for logs and error bodies
    3. Logging: records every request, including rejected ones
    4. Basic Auth: nothing below this point runs without valid credentials
"""
