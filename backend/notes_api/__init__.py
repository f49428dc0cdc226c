"""
Notes API — Application Package Initializer
=============================================

What: Marks the `notes_api` directory as a Python package.
Who:  Used by uvicorn (`notes_api.main:app`), Alembic and pytest.

Architecture Note:
    The backend is a thin layered CRUD service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP status codes and bodies
    ├─────────────────────────────────────┤
    │         NoteService                 │  ← one store call per operation,
    │                                     │    failures mapped to app errors
    ├─────────────────────────────────────┤
    │         NoteStore (persistence)     │  ← insert / find_all /
    │                                     │    update_by_id / delete_by_id
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Sessions)          │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The store is injected per request, so routes and the service can be
    exercised against any NoteStore implementation.
"""

__version__ = "1.0.0"
