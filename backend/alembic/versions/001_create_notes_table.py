"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `notes` table: seq, id, title, content, completed,
       created_at, updated_at.
How:   Portable column types only, so the same revision runs on
       PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (all notes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table."""
    op.create_table(
        "notes",
        sa.Column(
            "seq",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Insertion sequence, defines list order",
        ),
        sa.Column(
            "id",
            sa.String(36),
            nullable=False,
            comment="Opaque unique identifier (UUID4 text)",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Note title, required at creation",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=True,
            comment="Optional note body",
        ),
        sa.Column(
            "completed",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
            comment="Completion flag",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was last updated (UTC)",
        ),
        sa.PrimaryKeyConstraint("seq"),
        sa.UniqueConstraint("id"),
    )


def downgrade() -> None:
    """Drop the notes table. Destructive: all notes are permanently lost."""
    op.drop_table("notes")
