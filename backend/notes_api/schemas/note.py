"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract between client and backend.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI uses these models to parse request bodies and serialize
       responses. Field names are snake_case in Python and camelCase on
       the wire (createdAt, updatedAt).

Validation is deliberately loose: NoteCreate accepts a missing title and
forwards it to the store, which rejects it with a NOT NULL violation.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /api/notes."""

    title: Optional[str] = Field(default=None, description="Note title (required by the store)")
    content: Optional[str] = Field(default=None, description="Optional note body")


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Partial semantics come from `model_dump(exclude_unset=True)`: only the
    keys present in the request body are written. An explicit null is
    written as null.
    """

    title: Optional[str] = Field(default=None, description="New title")
    content: Optional[str] = Field(default=None, description="New body")
    completed: Optional[bool] = Field(default=None, description="New completion flag")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Full representation of a note, as returned by every note endpoint.

    Example:
        {
            "id": "3b9d6c1e-6f0e-4c39-9a7e-0d1f3a4b5c6d",
            "title": "Groceries",
            "content": "milk, eggs",
            "completed": false,
            "createdAt": "2024-01-15T12:00:00Z",
            "updatedAt": "2024-01-15T12:00:00Z"
        }
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(description="Unique note identifier")
    title: str = Field(description="Note title")
    content: Optional[str] = Field(default=None, description="Note body, null when absent")
    completed: bool = Field(description="Completion flag")
    created_at: datetime = Field(description="Creation timestamp (ISO 8601)")
    updated_at: datetime = Field(description="Last update timestamp (ISO 8601)")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite hands back naive datetimes; every stored timestamp is UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MessageResponse(BaseModel):
    """Body of GET /."""

    message: str = Field(description="Liveness message")


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing note endpoint.

    Example:
        {"error": "Note not found or failed to update"}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Body of GET /health."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
