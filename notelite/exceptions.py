"""
NoteLite Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the error scenarios of the notes API.
Why:   Typed exceptions let the global handlers pick the right HTTP status
       code instead of every missing note turning into a 500.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.
Who:   Raised by the store, services and bootstrap; caught by global handlers.

Exception Hierarchy:
    NoteLiteError (base)        → 500 Internal Server Error
    ├── ValidationError         → 400 Bad Request (client can fix)
    ├── NotFoundError           → 404 Not Found
    ├── DatabaseError           → 500 Internal Server Error
    └── SeedDataError           → aborts startup (never reaches a client)

Authentication failures are answered directly by BasicAuthMiddleware with a
401 challenge; they never become exceptions because middleware runs outside
the routing layer's exception handlers.
"""

from typing import Any, Dict, Optional


class NoteLiteError(Exception):
    """
    Base exception for all NoteLite application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client
                  unless the handler chooses to)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteLiteError):
    """
    Raised when client input fails validation.

    HTTP: 400 Bad Request

    FastAPI's own RequestValidationError (malformed JSON, wrong types) is
    mapped to the same 400 response shape in main.py.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteLiteError):
    """
    Raised when a requested resource does not exist.

    When:    get, update or delete of a note id that has no row, including a
             delete that lost a race against another delete.
    HTTP:    404 Not Found

    The missing id is kept on `resource_id` so callers and logs can report it.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NoteLiteError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. SQL text and
        constraint names are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SeedDataError(NoteLiteError):
    """
    Raised when the startup seed fixture cannot be read or parsed.

    The lifespan lets this propagate, so uvicorn refuses to start serving
    with a half-initialized store.
    """

    def __init__(
        self,
        message: str = "Seed fixture could not be loaded",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
