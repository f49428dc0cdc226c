"""
Notes API — Note SQLAlchemy Model
===================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SQLAlchemyNoteStore for CRUD operations.

Table Design:
    - seq: autoincrement primary key. Only used to list notes in insertion
      order; never exposed.
    - id: UUID4 rendered as text. The API treats ids as opaque strings, so an
      unknown id like "abc" reaches the store and fails there (404) instead
      of failing path validation.
    - title: NOT NULL. This is the only input rule the service enforces,
      and it is enforced by the database.
    - content: nullable free text
    - completed: defaults to false
    - created_at / updated_at: UTC with time zone; the store writes both
      from a single clock reading on insert so created_at <= updated_at holds
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, text
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_note_id() -> str:
    return str(uuid.uuid4())


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Created via POST /api/notes (id and timestamps assigned by the store)
        2. Mutated via PUT /api/notes/{id} (partial fields, updated_at refreshed)
        3. Deleted via DELETE /api/notes/{id} (permanent, no soft delete)
    """

    __tablename__ = "notes"

    # ── Keys ──────────────────────────────────────────────────────────────
    seq: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Insertion sequence, defines list order",
    )

    id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        default=new_note_id,
        comment="Opaque unique identifier (UUID4 text)",
    )

    # ── Content ───────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note title, required at creation",
    )

    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Optional note body",
    )

    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Completion flag",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was last updated (UTC)",
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, title={self.title!r}, "
            f"completed={self.completed})>"
        )
