"""
Notes Client — Board (Application State)
==========================================

What:  In-memory state of one notes session: the note list, the form
       fields, the note being edited, and loading/error flags.
How:   Every action issues at most one request through NotesAPI and changes
       the list only after the server confirms it. A failed mutation leaves
       the list as it was, records the message in `error` and re-raises.

State Transitions:
    load()               notes := server list
    submit() (create)    notes += [created]
    submit() (edit)      notes[id] := updated
    toggle_completed()   notes[id] := updated
    delete()             notes -= [id]
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from notes_client.api import NotesAPI
from notes_client.exceptions import EmptyTitleError, NotesAPIError, NoteNotLoadedError
from notes_client.models import Note

logger = logging.getLogger(__name__)


class NotesBoard:
    """
    Holds the notes and drives NotesAPI from user actions.

    Attributes:
        notes:    Notes in the order the server listed or created them
        loading:  True while the initial list request is in flight
        error:    Message of the last failed request, None after a success
        editing:  Note currently selected for editing, if any
        title:    Form title field
        content:  Form content field
    """

    def __init__(self, api: NotesAPI):
        self.api = api
        self.notes: List[Note] = []
        self.loading = False
        self.error: Optional[str] = None
        self.editing: Optional[Note] = None
        self.title = ""
        self.content = ""

    def get(self, note_id: str) -> Note:
        for note in self.notes:
            if note.id == note_id:
                return note
        raise NoteNotLoadedError(note_id)

    # ── Loading ───────────────────────────────────────────────────────────

    async def load(self) -> None:
        """
        Fetch the full list. On failure `error` is set and `notes` is kept;
        nothing is raised.
        """
        self.loading = True
        try:
            self.notes = await self.api.list_notes()
            self.error = None
        except NotesAPIError as e:
            logger.warning("Loading notes failed: %s", e.message)
            self.error = e.message
        finally:
            self.loading = False

    # ── Form ──────────────────────────────────────────────────────────────

    def start_edit(self, note: Note) -> None:
        self.editing = note
        self.title = note.title
        self.content = note.content or ""

    def cancel_edit(self) -> None:
        self.editing = None
        self.title = ""
        self.content = ""

    async def submit(self, title: str, content: Optional[str] = None) -> Optional[Note]:
        """
        Save the form: update the note being edited, otherwise create one.

        An edit sends only the fields that differ from the selected note and
        sends nothing at all when none differ.

        Returns:
            The saved note, or None when an edit had no changes.

        Raises:
            EmptyTitleError: `title` is empty or whitespace (no request made)
            NotesAPIError:   The server rejected the request
        """
        self.title = title
        self.content = content or ""
        if not title.strip():
            raise EmptyTitleError()

        if self.editing is None:
            note = await self._mutate(self.api.create_note(title, content))
            self.notes.append(note)
            logger.info("Created note %s", note.id)
        else:
            changes: Dict[str, Any] = {}
            if title != self.editing.title:
                changes["title"] = title
            if (content or None) != (self.editing.content or None):
                changes["content"] = content
            if not changes:
                self.cancel_edit()
                return None
            note = await self._mutate(self.api.update_note(self.editing.id, **changes))
            self._replace(note)
            logger.info("Updated note %s (%s)", note.id, ", ".join(sorted(changes)))

        self.cancel_edit()
        return note

    # ── List actions ──────────────────────────────────────────────────────

    async def delete(self, note_id: str, confirm: Callable[[Note], bool]) -> bool:
        """
        Delete a note after `confirm(note)` approves it.

        Returns:
            True if the note was deleted, False if confirmation was declined.
        """
        note = self.get(note_id)
        if not confirm(note):
            return False

        await self._mutate(self.api.delete_note(note_id))
        self.notes = [n for n in self.notes if n.id != note_id]
        if self.editing is not None and self.editing.id == note_id:
            self.cancel_edit()
        logger.info("Deleted note %s", note_id)
        return True

    async def toggle_completed(self, note_id: str) -> Note:
        note = self.get(note_id)
        updated = await self._mutate(
            self.api.update_note(note_id, completed=not note.completed)
        )
        self._replace(updated)
        return updated

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _mutate(self, request):
        try:
            result = await request
        except NotesAPIError as e:
            self.error = e.message
            raise
        self.error = None
        return result

    def _replace(self, note: Note) -> None:
        self.notes = [note if n.id == note.id else n for n in self.notes]
