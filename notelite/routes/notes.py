"""
NoteLite Backend — Notes Route Handlers
=========================================

What:  The six notes endpoints under /api/notes.
Why:   Maps HTTP verbs onto NoteService operations and status codes.
How:   FastAPI validates path/query/body, the handler delegates to
       NoteService, and the global handlers in main.py turn NotFoundError
       into 404 and validation failures into 400.
Who:   Any HTTP client holding valid Basic credentials (the auth gate runs
       before these handlers).

Route Table:
    POST   /api/notes                 201 + note
    GET    /api/notes                 200 + list of notes
    GET    /api/notes/search?title=   200 + list of notes
    GET    /api/notes/{note_id}       200 + note          (404 if missing)
    PUT    /api/notes/{note_id}       200 + note          (404 if missing)
    DELETE /api/notes/{note_id}       204                 (404 if missing)

    /search is registered before /{note_id}; otherwise "search" would be
    captured as a note id and rejected as a non-integer.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from notelite.database import get_db_session
from notelite.schemas.note import ErrorResponse, NoteRequest, NoteResponse
from notelite.services.note_service import note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(
    prefix="/api/notes",
    tags=["Notes"],
    responses={
        401: {"description": "Missing or invalid credentials", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
_BAD_REQUEST = {400: {"description": "Malformed request", "model": ErrorResponse}}


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Create a note",
)
async def create_note(
    payload: NoteRequest,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """Create a note. Empty title and content are accepted."""
    return await note_service.create_note(db=db, payload=payload)


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note, ordered by id. No pagination.",
)
async def get_all_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.get_all_notes(db=db)


@router.get(
    "/search",
    response_model=List[NoteResponse],
    responses=_BAD_REQUEST,
    summary="Search notes by title",
    description=(
        "Case-insensitive substring match on the title. "
        "An empty `title` matches every note."
    ),
)
async def search_notes_by_title(
    title: str = Query(description="Fragment to look for in note titles"),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.search_notes_by_title(db=db, fragment=title)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Get a single note by ID",
)
async def get_note_by_id(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note_by_id(db=db, note_id=note_id)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Replace the title and content of a note",
)
async def update_note(
    note_id: int,
    payload: NoteRequest,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Update a note.

    Only `title` and `content` are read from the body; an `id` or timestamps
    echoed back by the client are ignored.
    """
    return await note_service.update_note(db=db, note_id=note_id, details=payload)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note_by_id(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note_by_id(db=db, note_id=note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
