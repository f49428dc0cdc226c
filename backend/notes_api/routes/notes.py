"""
Notes API — Notes Route Handlers
==================================

What:  POST/GET /api/notes and PUT/DELETE /api/notes/{note_id}.
How:   Each handler receives a NoteStore through dependency injection,
       delegates to NoteService and returns the mapped result. Failures are
       raised as application exceptions and rendered by the global handlers
       in main.py.
Who:   Called by the notes client (client/notes_client).

Route Inventory:
    POST   /api/notes             → 201 Note        | 500 {"error": ...}
    GET    /api/notes             → 200 [Note]      | 500 {"error": ...}
    PUT    /api/notes/{note_id}   → 200 Note        | 404 {"error": ...}
    DELETE /api/notes/{note_id}   → 204 (no body)   | 404 {"error": ...}
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db_session
from notes_api.schemas.note import ErrorResponse, NoteCreate, NoteResponse, NoteUpdate
from notes_api.services.note_service import note_service
from notes_api.services.note_store import NoteStore, SQLAlchemyNoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


async def get_note_store(db: AsyncSession = Depends(get_db_session)) -> NoteStore:
    """
    Dependency providing the persistence handle for one request.

    Tests swap it via `app.dependency_overrides[get_note_store]`.
    """
    return SQLAlchemyNoteStore(db)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        500: {"description": "Store rejected the note", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    """
    Create a note from `{title, content?}`.

    The title is not checked here; a missing title fails in the store and
    is reported as 500.
    """
    return await note_service.create_note(store, payload or NoteCreate())


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={
        200: {"description": "All notes, oldest first"},
        500: {"description": "Store failure", "model": ErrorResponse},
    },
    summary="List all notes",
)
async def list_notes(
    store: NoteStore = Depends(get_note_store),
) -> List[NoteResponse]:
    return await note_service.list_notes(store)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "Updated note", "model": NoteResponse},
        404: {"description": "Note not found or update failed", "model": ErrorResponse},
    },
    summary="Update a note",
    description="Partial update: fields omitted from the body keep their current value.",
)
async def update_note(
    note_id: str,
    payload: Optional[NoteUpdate] = None,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    return await note_service.update_note(store, note_id, payload or NoteUpdate())


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={
        204: {"description": "Note deleted"},
        404: {"description": "Note not found or delete failed", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> Response:
    """Permanently delete a note. A second delete of the same id returns 404."""
    await note_service.delete_note(store, note_id)
    return Response(status_code=204)
