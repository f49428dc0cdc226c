"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the notes service.
Why:   Each exception carries the fixed, user-facing message of its failure
       and the HTTP status it maps to, so route handlers stay free of
       try/except blocks.
How:   Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` with the exception's status code.
Who:   Raised by the note store and the note service; caught by global handlers.

Exception Hierarchy:
    NotesError (base)   → 500 Internal Server Error
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error

The `context` dict is logged server-side and never returned to the client.
"""

from typing import Any, Dict, Optional


class NotesError(Exception):
    """
    Base exception for all notes application errors.

    Attributes:
        message:      User-facing error description (returned as `error`)
        context:      Additional debug info (logged but NOT returned)
        status_code:  HTTP status used by the global handler
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NotesError):
    """
    Raised when a note does not exist, or when an update/delete fails.

    HTTP: 404 Not Found

    The store raises it with a generated message naming the missing id.
    The service re-raises every update/delete failure as a NotFoundError
    with a fixed message, so a missing row and a broken connection
    produce the same 404 response on those paths.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(NotesError):
    """
    Raised when creating or listing notes fails.

    HTTP: 500 Internal Server Error

    Covers constraint violations (e.g. a create without a title), lost
    connections and any other store failure on the create/list paths.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
