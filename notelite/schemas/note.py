"""
NoteLite Backend — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract of the notes endpoints.
Why:   Input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate Swagger/OpenAPI documentation automatically.

Wire format:
    Notes are exchanged in camelCase:

        {
            "id": 7,
            "title": "Shopping",
            "content": "milk, eggs",
            "createdAt": "2024-01-15T12:00:00Z",
            "updatedAt": "2024-01-15T12:00:00Z"
        }

    Request bodies only contribute `title` and `content`. Clients often echo a
    full note back on PUT, so `id`, `createdAt` and `updatedAt` are accepted
    and silently ignored rather than rejected.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteRequest(BaseModel):
    """
    Body of POST /api/notes and PUT /api/notes/{id}, and one entry of the
    seed fixture.

    No emptiness validation: a note with an empty title or content is valid.
    Titles are capped at the 255-character column width.
    """
    title: str = Field(
        default="",
        max_length=255,
        description="Note title (searchable), at most 255 characters; longer titles are rejected with 400",
    )
    content: str = Field(default="", description="Note body")

    model_config = ConfigDict(extra="ignore")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Full representation of a note.

    Returned by every notes endpoint that has a body. `id` and the
    timestamps are nullable in the contract, but every note the API returns
    has been persisted and carries all three.
    """
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: Optional[datetime] = Field(
        default=None, description="When the note was first saved (UTC ISO 8601)"
    )
    updated_at: Optional[datetime] = Field(
        default=None, description="When the note was last modified (UTC ISO 8601)"
    )

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "note with ID '42' was not found",
            "details": null,
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
