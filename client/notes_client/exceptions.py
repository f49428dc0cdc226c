"""
Notes Client — Exceptions
===========================

Exception Hierarchy:
    NotesClientError (base)
    ├── NotesAPIError         HTTP error status or transport failure
    ├── EmptyTitleError       form submitted with a blank title
    └── NoteNotLoadedError    id not present on the board
"""

from typing import Optional


class NotesClientError(Exception):
    """Base exception for the notes client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotesAPIError(NotesClientError):
    """
    A request to the Notes API failed.

    Attributes:
        message:      Server `error` field, or "<status> <reason>: <text>"
        status_code:  HTTP status, None when no response was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyTitleError(NotesClientError):
    """Raised before any request when the form title is empty or blank."""

    def __init__(self, message: str = "Title is required"):
        super().__init__(message)


class NoteNotLoadedError(NotesClientError):
    """Raised when an action names a note the board does not hold."""

    def __init__(self, note_id: str):
        super().__init__(f"No note with id '{note_id}' on the board")
        self.note_id = note_id
