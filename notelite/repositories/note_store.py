"""
NoteLite Backend — Note Store
===============================

What:  Persistence gateway for the `notes` table.
Why:   Gives the service layer an explicit method set (save, find, exists,
       delete, search) with one SQL statement per call.
How:   Wraps an AsyncSession. Writes are flushed, never committed: the
       session owner (get_db_session or the bootstrap loader) decides when
       the transaction ends.
Who:   Created per call by NoteService and by the bootstrap loader.

Timestamp bookkeeping lives here so every write path (API and seed) gets the
same rules:
    insert: created_at = updated_at = one clock reading
    update: updated_at = max(now, previous updated_at), created_at untouched
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from notelite.exceptions import NotFoundError
from notelite.models.note import Note, utcnow

logger = logging.getLogger(__name__)


class NoteStore:
    """
    CRUD access to notes for a single session.

    Ordering:
        find_all and the title search return notes ordered by id, so the
        order is stable across calls.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, note: Note) -> Note:
        """
        Insert a transient note or flush changes to a persisted one.

        Returns the same instance with id and timestamps populated.
        """
        self._stamp(note, utcnow())
        await self.db.flush()
        return note

    async def save_all(self, notes: Iterable[Note]) -> List[Note]:
        """Save several notes in one flush; used by the startup seed."""
        now = utcnow()
        saved = []
        for note in notes:
            self._stamp(note, now)
            saved.append(note)
        await self.db.flush()
        return saved

    def _stamp(self, note: Note, now: datetime) -> None:
        if note.is_transient:
            note.created_at = now
            note.updated_at = now
            self.db.add(note)
        else:
            # A clock stepping backwards must not move updated_at backwards
            previous = note.updated_at
            note.updated_at = max(now, previous) if previous else now

    async def find_by_id(self, note_id: int) -> Optional[Note]:
        result = await self.db.execute(select(Note).where(Note.id == note_id))
        return result.scalar_one_or_none()

    async def exists_by_id(self, note_id: int) -> bool:
        result = await self.db.execute(
            select(func.count(Note.id)).where(Note.id == note_id)
        )
        return (result.scalar() or 0) > 0

    async def delete_by_id(self, note_id: int) -> None:
        """
        Hard-delete one note.

        Raises:
            NotFoundError: no row had this id. This is also what a caller sees
                when a concurrent request deleted the note after the caller's
                existence check.
        """
        result = await self.db.execute(delete(Note).where(Note.id == note_id))
        if result.rowcount == 0:
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.debug("Deleted note %s", note_id)

    async def find_all(self) -> List[Note]:
        result = await self.db.execute(select(Note).order_by(Note.id))
        return list(result.scalars().all())

    async def find_by_title_containing_ignore_case(self, fragment: str) -> List[Note]:
        """
        Notes whose title contains `fragment`, ignoring case.

        Query plan:
            SELECT * FROM notes
            WHERE lower(title) LIKE '%' || lower(:fragment) || '%' ESCAPE '/'
            ORDER BY id

        autoescape makes `%` and `_` in the fragment match literally. An empty
        fragment matches every note.
        """
        query = (
            select(Note)
            .where(Note.title.icontains(fragment, autoescape=True))
            .order_by(Note.id)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Note.id)))
        return result.scalar() or 0
