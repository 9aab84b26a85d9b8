"""
NoteLite Backend — Note SQLAlchemy Model
==========================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteStore for every query and by Alembic for schema management.

Table Design:
    - id:         Integer primary key assigned by the database on insert
    - title:      Short free text, searched case-insensitively
    - content:    Unbounded free text
    - created_at: UTC, set once when the row is first saved
    - updated_at: UTC, set on insert and refreshed on every update

    A Note whose `id` is None has not been saved yet (transient).
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from notelite.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware DateTime that always hands back UTC datetimes.

    PostgreSQL stores the offset (TIMESTAMP WITH TIME ZONE); SQLite does not
    and returns naive values. Both come back as aware UTC datetimes, so
    comparisons between stored and freshly generated timestamps never mix
    naive and aware values.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Note(Base):
    """
    A short text note.

    Lifecycle:
        1. Created through NoteStore.save (id and both timestamps assigned)
        2. Updated through NoteStore.save (title/content replaced,
           updated_at refreshed, id and created_at untouched)
        3. Deleted through NoteStore.delete_by_id (hard delete)

    Query Patterns:
        - Get single note: SELECT ... WHERE id = :id  (primary key lookup)
        - List notes:      SELECT ... ORDER BY id
        - Search by title: SELECT ... WHERE lower(title) LIKE :pattern ORDER BY id
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )

    # TEXT: no length limit on note bodies
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # NoteStore sets both explicitly from a single clock reading on insert,
    # so created_at == updated_at for a fresh note. The column defaults only
    # apply to rows inserted without going through the store.
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
    )

    @property
    def is_transient(self) -> bool:
        return self.id is None

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Note(id={self.id}, title='{self.title}', "
            f"updated_at='{self.updated_at}')>"
        )
