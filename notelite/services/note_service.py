"""
NoteLite Backend — Note Service (Business Logic)
==================================================

What:  Business rules for the six note operations.
Why:   Keeps "exists-or-fail" semantics and error translation out of the
       HTTP layer, so they can be tested without a server.
How:   Each call builds a NoteStore over the caller's session, performs one
       row-level operation, and returns response schemas.
Who:   Called by route handlers in notelite/routes/notes.py.

Error Handling Strategy:
    - A missing id raises NotFoundError (→ 404) carrying the id.
    - Application errors (NoteLiteError subclasses) propagate unchanged.
    - Anything else coming out of the database layer is logged with its
      stack trace and wrapped in DatabaseError (→ 500, generic message).

Concurrency:
    Two requests updating the same note are not serialized; the last commit
    wins. delete_note_by_id checks existence before deleting, and a delete
    that loses a race with another delete still ends in NotFoundError.

Design Decision:
    NoteService is stateless — it receives the db session for each call.
    Each call therefore runs inside the request's own transaction, and tests
    can hand it any session.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from notelite.exceptions import DatabaseError, NoteLiteError, NotFoundError
from notelite.models.note import Note
from notelite.repositories.note_store import NoteStore
from notelite.schemas.note import NoteRequest, NoteResponse

logger = logging.getLogger(__name__)


def _to_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        title=note.title,
        content=note.content,
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - create_note():           persist a new note, no validation
        - update_note():           replace title/content of an existing note
        - delete_note_by_id():     hard-delete an existing note
        - get_all_notes():         full, unpaginated snapshot
        - get_note_by_id():        single note or NotFoundError
        - search_notes_by_title(): case-insensitive substring search
    """

    async def create_note(self, db: AsyncSession, payload: NoteRequest) -> NoteResponse:
        """
        Create a note from the request body.

        Empty title and content are accepted as-is. The store assigns the id
        and sets createdAt == updatedAt.
        """
        try:
            note = await NoteStore(db).save(
                Note(title=payload.title, content=payload.content)
            )
            logger.info("Note %s created", note.id)
            return _to_response(note)
        except NoteLiteError:
            raise
        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_note(
        self, db: AsyncSession, note_id: int, details: NoteRequest
    ) -> NoteResponse:
        """
        Replace the title and content of an existing note.

        Only title and content are taken from `details`; id and created_at are
        never touched, and the store moves updated_at forward.

        Raises:
            NotFoundError: no note with this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            store = NoteStore(db)
            note = await store.find_by_id(note_id)
            if note is None:
                raise NotFoundError(resource="note", resource_id=note_id)

            note.title = details.title
            note.content = details.content
            note = await store.save(note)
            logger.info("Note %s updated", note_id)
            return _to_response(note)

        except NoteLiteError:
            raise
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id},
            )

    async def delete_note_by_id(self, db: AsyncSession, note_id: int) -> None:
        """
        Delete an existing note.

        Raises:
            NotFoundError: no note with this id, either at the existence check
                or at the delete itself when another request removed it in
                between (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            store = NoteStore(db)
            if not await store.exists_by_id(note_id):
                raise NotFoundError(resource="note", resource_id=note_id)
            await store.delete_by_id(note_id)
            logger.info("Note %s deleted", note_id)

        except NoteLiteError:
            raise
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id},
            )

    async def get_all_notes(self, db: AsyncSession) -> List[NoteResponse]:
        try:
            notes = await NoteStore(db).find_all()
            return [_to_response(note) for note in notes]
        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_note_by_id(self, db: AsyncSession, note_id: int) -> NoteResponse:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: no note with this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            note = await NoteStore(db).find_by_id(note_id)
            if note is None:
                raise NotFoundError(resource="note", resource_id=note_id)
            return _to_response(note)

        except NoteLiteError:
            raise
        except Exception as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            )

    async def search_notes_by_title(
        self, db: AsyncSession, fragment: str
    ) -> List[NoteResponse]:
        """
        Notes whose title contains `fragment`, case-insensitively.

        An empty fragment returns every note; an empty store returns [].
        """
        try:
            notes = await NoteStore(db).find_by_title_containing_ignore_case(fragment)
            logger.debug("Title search %r matched %d notes", fragment, len(notes))
            return [_to_response(note) for note in notes]
        except Exception as e:
            logger.error("Database error searching notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not search notes. Please try again.",
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
# NoteService is stateless; one shared instance serves every request
note_service = NoteService()
