"""
Notes API — Note Service (Request → Store → Response Mapping)
===============================================================

What:  The four note operations: create, list, update, delete.
Why:   Keeps the failure-to-status mapping in one place, independent of HTTP.
How:   Each method performs exactly one NoteStore call. Success is converted
       to NoteResponse; any failure is logged and re-raised as an
       application exception with a fixed user-facing message.
Who:   Called by route handlers in routes/notes.py.

Failure Mapping:
    create  → DatabaseError  "Failed to create note"                 (500)
    list    → DatabaseError  "Failed to fetch notes"                 (500)
    update  → NotFoundError  "Note not found or failed to update"    (404)
    delete  → NotFoundError  "Note not found or failed to delete"    (404)

    Update and delete do not tell a missing row apart from any other store
    failure; both become the same 404.

Design Decision:
    NoteService is stateless. It receives the store for each call, the same
    way it would receive a session, so one instance serves every request.
"""

import logging
from typing import List

from notes_api.exceptions import DatabaseError, NotFoundError
from notes_api.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notes_api.services.note_store import NoteStore

logger = logging.getLogger(__name__)

CREATE_FAILED = "Failed to create note"
LIST_FAILED = "Failed to fetch notes"
UPDATE_FAILED = "Note not found or failed to update"
DELETE_FAILED = "Note not found or failed to delete"


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - create_note(): insert with title/content as sent
        - list_notes():  every stored note
        - update_note(): partial update of title/content/completed
        - delete_note(): permanent removal
    """

    async def create_note(self, store: NoteStore, payload: NoteCreate) -> NoteResponse:
        """
        Create a note from the request body.

        No input checks happen here: a missing title goes to the store as
        NULL and the NOT NULL constraint turns it into a DatabaseError.

        Raises:
            DatabaseError: Any store failure (→ 500)
        """
        try:
            note = await store.insert(payload.model_dump())
        except Exception as e:
            logger.error("Failed to create note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=CREATE_FAILED,
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def list_notes(self, store: NoteStore) -> List[NoteResponse]:
        """
        Return all notes in creation order.

        Raises:
            DatabaseError: Any store failure (→ 500)
        """
        try:
            notes = await store.find_all()
        except Exception as e:
            logger.error("Failed to fetch notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=LIST_FAILED,
                context={"error_type": type(e).__name__},
            ) from e

        return [NoteResponse.model_validate(note) for note in notes]

    async def update_note(
        self,
        store: NoteStore,
        note_id: str,
        payload: NoteUpdate,
    ) -> NoteResponse:
        """
        Apply a partial update.

        Only keys present in the request body are written; omitted fields
        keep their stored value.

        Raises:
            NotFoundError: Unknown id or any other store failure (→ 404)
        """
        fields = payload.model_dump(exclude_unset=True)
        try:
            note = await store.update_by_id(note_id, fields)
        except Exception as e:
            logger.warning("Failed to update note %s: %s", note_id, str(e))
            raise NotFoundError(
                resource="note",
                resource_id=note_id,
                message=UPDATE_FAILED,
                context={"error_type": type(e).__name__, "fields": sorted(fields)},
            ) from e

        logger.info("Note updated: %s (%s)", note_id, ", ".join(sorted(fields)) or "no fields")
        return NoteResponse.model_validate(note)

    async def delete_note(self, store: NoteStore, note_id: str) -> None:
        """
        Permanently delete a note.

        Raises:
            NotFoundError: Unknown id or any other store failure (→ 404)
        """
        try:
            await store.delete_by_id(note_id)
        except Exception as e:
            logger.warning("Failed to delete note %s: %s", note_id, str(e))
            raise NotFoundError(
                resource="note",
                resource_id=note_id,
                message=DELETE_FAILED,
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note deleted: %s", note_id)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
