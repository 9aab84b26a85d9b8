"""
NoteLite Backend — Application Package Initializer
===================================================

What: Marks the `notelite` directory as a Python package.
Why:  Enables module imports like `from notelite.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │   Middleware (Request ID, Auth)     │  ← Cross-cutting, every request
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Exists-or-fail rules
    ├─────────────────────────────────────┤
    │     Repositories (Note Store)       │  ← One query per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch SQL, services never touch HTTP, and the store is the
    only place that builds queries against the `notes` table.
"""

__version__ = "1.0.0"
