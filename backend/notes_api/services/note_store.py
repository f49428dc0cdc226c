"""
Notes API — Note Store (Persistence Collaborator)
===================================================

What:  Abstract interface over the notes table plus its SQLAlchemy implementation.
Why:   NoteService never touches the ORM directly; it receives a NoteStore for
       each call. Tests hand it a mock or a store over a throwaway SQLite
       session instead of patching a module-level database client.
How:   Four coroutines: insert, find_all, update_by_id, delete_by_id.
       SQLAlchemyNoteStore flushes inside each call so constraint violations
       are raised by the operation that caused them. Committing is left to
       the per-request session dependency.
Who:   Built per request by routes/notes.py:get_note_store().

Contract:
    insert(fields)              -> Note     (assigns id and timestamps)
    find_all()                  -> [Note]   (insertion order)
    update_by_id(id, fields)    -> Note     (NotFoundError if id is absent)
    delete_by_id(id)            -> None     (NotFoundError if id is absent)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.exceptions import NotFoundError
from notes_api.models.note import Note, new_note_id, utc_now

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content", "completed")


class NoteStore(ABC):
    """
    Abstract persistence interface for notes.

    Implementations:
        - SQLAlchemyNoteStore: async SQLAlchemy session (PostgreSQL, SQLite)
    """

    @abstractmethod
    async def insert(self, fields: Dict[str, Any]) -> Note:
        """
        Persist a new note built from `fields` (title, content).

        The store assigns `id`, `completed=False`, `created_at` and
        `updated_at`. Missing required fields are not checked here; the
        database rejects them and the error propagates.
        """
        ...

    @abstractmethod
    async def find_all(self) -> List[Note]:
        """Return every note in insertion order."""
        ...

    @abstractmethod
    async def update_by_id(self, note_id: str, fields: Dict[str, Any]) -> Note:
        """
        Write the given fields onto an existing note and refresh `updated_at`.

        Raises:
            NotFoundError: No note has this id.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, note_id: str) -> None:
        """
        Permanently remove a note.

        Raises:
            NotFoundError: No note has this id.
        """
        ...


class SQLAlchemyNoteStore(NoteStore):
    """NoteStore backed by an AsyncSession owned by the caller."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, fields: Dict[str, Any]) -> Note:
        now = utc_now()
        note = Note(
            id=new_note_id(),
            title=fields.get("title"),
            content=fields.get("content"),
            completed=False,
            created_at=now,
            updated_at=now,
        )
        self.session.add(note)
        await self.session.flush()
        return note

    async def find_all(self) -> List[Note]:
        result = await self.session.execute(
            select(Note).order_by(Note.seq)
        )
        return list(result.scalars().all())

    async def update_by_id(self, note_id: str, fields: Dict[str, Any]) -> Note:
        note = await self._get(note_id)
        for name in UPDATABLE_FIELDS:
            if name in fields:
                setattr(note, name, fields[name])
        note.updated_at = utc_now()
        await self.session.flush()
        return note

    async def delete_by_id(self, note_id: str) -> None:
        note = await self._get(note_id)
        await self.session.delete(note)
        await self.session.flush()

    async def _get(self, note_id: str) -> Note:
        result = await self.session.execute(select(Note).where(Note.id == note_id))
        note = result.scalar_one_or_none()
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note
