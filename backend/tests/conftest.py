"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the backend test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_note_store:  AsyncMock with the NoteStore interface
    ├── sample_note:      transient Note ORM instance
    ├── db_engine:        in-memory aiosqlite engine with the schema created
    ├── db_session:       AsyncSession bound to db_engine
    ├── test_client:      HTTPX AsyncClient → app, sessions from db_engine
    └── mock_store_client: HTTPX AsyncClient → app, store = mock_note_store
"""

import os
from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

# Settings are read at import time; point them at SQLite before any app import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notes_api.database import Base, get_db_session
from notes_api.main import app
from notes_api.models.note import Note
from notes_api.routes.notes import get_note_store
from notes_api.services.note_store import NoteStore


# ══════════════════════════════════════════════════════════════════════════
# Test Doubles and Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_note_store():
    """
    Provides a mock NoteStore.

    Usage:
        async def test_list(mock_note_store):
            mock_note_store.find_all.return_value = [note]
            result = await note_service.list_notes(mock_note_store)
    """
    return AsyncMock(spec=NoteStore)


@pytest.fixture
def sample_note():
    """A Note as the store would return it after insert."""
    now = datetime.now(timezone.utc)
    return Note(
        id=str(uuid4()),
        title="Groceries",
        content="milk, eggs",
        completed=False,
        created_at=now,
        updated_at=now,
    )


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine with the notes table created.

    StaticPool keeps a single connection, so every session in a test sees
    the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    Each request gets its own session on the test engine, committed or
    rolled back exactly like notes_api.database.get_db_session.
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def mock_store_client(mock_note_store):
    """HTTPX AsyncClient whose requests all use `mock_note_store`."""
    app.dependency_overrides[get_note_store] = lambda: mock_note_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
