"""
Notes Client — Note Model
===========================

Client-side view of a note, parsed from the camelCase JSON the API returns.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Note(BaseModel):
    """
    A note as returned by the server.

    Example:
        Note.model_validate({"id": "…", "title": "Groceries", "content": None,
                             "completed": False, "createdAt": "…", "updatedAt": "…"})
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    title: str
    content: Optional[str] = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime
