"""
Notes Client — Test Configuration (conftest.py)
=================================================

What:  A fake Notes API served through httpx.MockTransport, plus NotesAPI
       and NotesBoard fixtures wired to it.

Fixture Hierarchy (all function-scoped):
    ├── fake_server:  in-memory notes server; records every request
    ├── api:          NotesAPI → fake_server
    └── board:        NotesBoard over `api`
"""

import json
from typing import Dict, List, Optional
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from notes_client.api import NotesAPI
from notes_client.board import NotesBoard

BASE_URL = "http://notes.test/api"
CREATED_AT = "2024-01-15T12:00:00Z"
UPDATED_AT = "2024-01-15T12:30:00Z"


class FakeNotesServer:
    """
    Minimal stand-in for the Notes API.

    Set `fail_with` to a response to make every /api request return it.
    """

    def __init__(self) -> None:
        self.notes: Dict[str, dict] = {}
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[httpx.Response] = None

    def add(self, title: str, content: Optional[str] = None, completed: bool = False) -> dict:
        note = {
            "id": str(uuid4()),
            "title": title,
            "content": content,
            "completed": completed,
            "createdAt": CREATED_AT,
            "updatedAt": CREATED_AT,
        }
        self.notes[note["id"]] = note
        return note

    @property
    def mutations(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method != "GET"]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/":
            return httpx.Response(200, json={"message": "API is running!"})
        if self.fail_with is not None:
            return self.fail_with

        if path == "/api/notes":
            if request.method == "GET":
                return httpx.Response(200, json=list(self.notes.values()))
            body = json.loads(request.content or b"{}")
            if not body.get("title"):
                return httpx.Response(500, json={"error": "Failed to create note"})
            note = self.add(body["title"], body.get("content"))
            return httpx.Response(201, json=note)

        note_id = path.rsplit("/", 1)[-1]
        if request.method == "PUT":
            if note_id not in self.notes:
                return httpx.Response(404, json={"error": "Note not found or failed to update"})
            note = self.notes[note_id]
            for key, value in json.loads(request.content or b"{}").items():
                if key in ("title", "content", "completed"):
                    note[key] = value
            note["updatedAt"] = UPDATED_AT
            return httpx.Response(200, json=note)
        if request.method == "DELETE":
            if self.notes.pop(note_id, None) is None:
                return httpx.Response(404, json={"error": "Note not found or failed to delete"})
            return httpx.Response(204)

        return httpx.Response(405, text="Method Not Allowed")


@pytest.fixture
def fake_server() -> FakeNotesServer:
    return FakeNotesServer()


@pytest_asyncio.fixture
async def api(fake_server):
    client = NotesAPI(base_url=BASE_URL, transport=fake_server.transport())
    yield client
    await client.close()


@pytest.fixture
def board(api) -> NotesBoard:
    return NotesBoard(api)
