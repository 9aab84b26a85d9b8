"""
NoteLite Backend — Seed Loader Tests
======================================

What:  Tests for the startup seed loader and its lifespan wiring.
Why:   Seeding must happen exactly once, only into an empty table, and a bad
       fixture must stop startup instead of serving a half-filled store.

What we test:
    ✅ Packaged fixture seeds an empty table
    ✅ Second run and non-empty tables are left untouched
    ✅ Custom fixture paths, extra keys ignored
    ✅ Unreadable or invalid fixtures raise SeedDataError
    ✅ Lifespan seeds when enabled and aborts on a bad fixture
"""

import json
from unittest.mock import patch

import pytest

from notelite.bootstrap import load_seed_fixture, seed_notes_if_empty
from notelite.config import settings
from notelite.database import async_session_factory
from notelite.exceptions import SeedDataError
from notelite.main import app, lifespan
from notelite.models.note import Note
from notelite.repositories.note_store import NoteStore


async def _all_notes():
    async with async_session_factory() as session:
        return await NoteStore(session).find_all()


class TestLoadSeedFixture:

    @pytest.mark.asyncio
    async def test_packaged_fixture_loads(self):
        entries = await load_seed_fixture()

        assert len(entries) > 0
        assert any(e.title == "Welcome to NoteLite" for e in entries)

    @pytest.mark.asyncio
    async def test_extra_keys_are_ignored(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text(json.dumps([
            {"id": 5, "title": "t", "content": "c", "createdAt": "2020-01-01T00:00:00Z"},
        ]))

        entries = await load_seed_fixture(path)

        assert [(e.title, e.content) for e in entries] == [("t", "c")]

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path):
        with pytest.raises(SeedDataError):
            await load_seed_fixture(tmp_path / "does-not-exist.json")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["{not json", '{"title": "not a list"}', '[{"title": 5}]'])
    async def test_invalid_fixture_raises(self, tmp_path, raw):
        path = tmp_path / "notes.json"
        path.write_text(raw)

        with pytest.raises(SeedDataError):
            await load_seed_fixture(str(path))


class TestSeedNotesIfEmpty:

    @pytest.mark.asyncio
    async def test_seeds_empty_table(self, db_schema):
        expected = await load_seed_fixture()

        inserted = await seed_notes_if_empty(async_session_factory)

        notes = await _all_notes()
        assert inserted == len(expected) == len(notes)
        assert [n.title for n in notes] == [e.title for e in expected]
        assert all(n.created_at == n.updated_at for n in notes)

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, db_schema):
        first = await seed_notes_if_empty(async_session_factory)
        second = await seed_notes_if_empty(async_session_factory)

        assert first > 0
        assert second == 0
        assert len(await _all_notes()) == first

    @pytest.mark.asyncio
    async def test_non_empty_table_is_untouched(self, db_schema):
        async with async_session_factory() as session:
            await NoteStore(session).save(Note(title="mine", content="keep"))
            await session.commit()

        inserted = await seed_notes_if_empty(async_session_factory)

        assert inserted == 0
        assert [n.title for n in await _all_notes()] == ["mine"]

    @pytest.mark.asyncio
    async def test_bad_fixture_leaves_table_empty(self, db_schema, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[")

        with pytest.raises(SeedDataError):
            await seed_notes_if_empty(async_session_factory, path)

        assert await _all_notes() == []


class TestLifespanSeeding:

    @pytest.mark.asyncio
    async def test_lifespan_seeds_when_enabled(self, db_schema):
        with patch.object(settings, "seed_on_startup", True):
            async with lifespan(app):
                notes = await _all_notes()

        assert len(notes) == len(await load_seed_fixture())

    @pytest.mark.asyncio
    async def test_lifespan_skips_seed_when_disabled(self, db_schema):
        with patch.object(settings, "seed_on_startup", False):
            async with lifespan(app):
                notes = await _all_notes()

        assert notes == []

    @pytest.mark.asyncio
    async def test_bad_fixture_aborts_startup(self, db_schema, tmp_path):
        with patch.object(settings, "seed_on_startup", True), \
             patch.object(settings, "seed_fixture_path", str(tmp_path / "missing.json")):
            with pytest.raises(SeedDataError):
                async with lifespan(app):
                    pass
