"""
NoteLite Backend — Startup Seed Loader
========================================

What:  Fills an empty `notes` table from a JSON fixture at startup.
Why:   A fresh deployment has sample notes to look at without manual setup.
How:   Counts rows; only when the table is empty, reads the fixture with
       aiofiles, validates it as a list of NoteRequest, and inserts every note
       in one transaction through NoteStore (so timestamps follow the same
       rules as API-created notes).
Who:   Called once by the FastAPI lifespan in main.py.
When:  Before the application starts accepting requests.

Idempotency:
    The emptiness check is the guard. Running the loader twice inserts the
    fixture at most once, and never touches a table that already has data.

Fixture format (notelite/data/notes-data.json):
    [
        {"title": "Welcome", "content": "..."},
        ...
    ]
    Extra keys such as "id", "createdAt" or "updatedAt" are ignored.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Union

import aiofiles
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notelite.exceptions import SeedDataError
from notelite.models.note import Note
from notelite.repositories.note_store import NoteStore
from notelite.schemas.note import NoteRequest

logger = logging.getLogger(__name__)

_fixture_adapter = TypeAdapter(List[NoteRequest])


async def load_seed_fixture(fixture_path: Optional[Union[str, Path]] = None) -> List[NoteRequest]:
    """
    Read and validate the seed fixture.

    Args:
        fixture_path: JSON file to read. None means the fixture packaged with
            notelite.

    Raises:
        SeedDataError: the file cannot be read or is not a JSON array of notes.
    """
    if fixture_path is None:
        resource = resources.files("notelite").joinpath("data/notes-data.json")
        with resources.as_file(resource) as packaged_path:
            return await _read_fixture(packaged_path)
    return await _read_fixture(Path(fixture_path))


async def _read_fixture(path: Path) -> List[NoteRequest]:
    try:
        async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
            raw = await f.read()
    except OSError as e:
        raise SeedDataError(
            message=f"Seed fixture could not be read: {path}",
            context={"path": str(path), "error": str(e)},
        ) from e

    try:
        return _fixture_adapter.validate_json(raw)
    except PydanticValidationError as e:
        raise SeedDataError(
            message=f"Seed fixture is not a valid list of notes: {path}",
            context={"path": str(path), "errors": e.error_count()},
        ) from e


async def seed_notes_if_empty(
    session_factory: async_sessionmaker[AsyncSession],
    fixture_path: Optional[Union[str, Path]] = None,
) -> int:
    """
    Insert the fixture notes if, and only if, the notes table is empty.

    Returns:
        Number of notes inserted (0 when the table already had data).

    Raises:
        SeedDataError: fixture unreadable or invalid. Database errors
            propagate unchanged; both abort application startup.
    """
    async with session_factory() as session:
        store = NoteStore(session)
        existing = await store.count()
        if existing:
            logger.info("Notes table already has %d rows; skipping seed data", existing)
            return 0

        entries = await load_seed_fixture(fixture_path)
        await store.save_all(Note(title=e.title, content=e.content) for e in entries)
        await session.commit()

    logger.info("Seeded %d sample notes into an empty notes table", len(entries))
    return len(entries)
