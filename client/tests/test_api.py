"""Unit tests for the NotesAPI request functions."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from notes_client.api import NotesAPI, error_message
from notes_client.exceptions import NotesAPIError, NotesClientError


@pytest.mark.asyncio
class TestRequests:
    """Each call sends one request with the expected method, path and body."""

    async def test_list_notes(self, api, fake_server):
        fake_server.add("Groceries", "milk")

        notes = await api.list_notes()

        assert [n.title for n in notes] == ["Groceries"]
        assert notes[0].created_at == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        [request] = fake_server.requests
        assert (request.method, request.url.path) == ("GET", "/api/notes")

    async def test_create_note(self, api, fake_server):
        note = await api.create_note("Groceries", "milk")

        assert note.title == "Groceries"
        assert note.completed is False
        [request] = fake_server.requests
        assert request.method == "POST"
        assert json.loads(request.content) == {"title": "Groceries", "content": "milk"}

    async def test_update_sends_only_given_fields(self, api, fake_server):
        stored = fake_server.add("Groceries", "milk")

        note = await api.update_note(stored["id"], completed=True)

        assert note.completed is True
        assert note.content == "milk"
        [request] = fake_server.requests
        assert request.url.path == f"/api/notes/{stored['id']}"
        assert json.loads(request.content) == {"completed": True}

    async def test_delete_note(self, api, fake_server):
        stored = fake_server.add("Groceries")

        assert await api.delete_note(stored["id"]) is None
        assert fake_server.notes == {}

    async def test_health_uses_server_root(self, api, fake_server):
        assert await api.health() == "API is running!"
        assert fake_server.requests[0].url.path == "/"


@pytest.mark.asyncio
class TestErrors:

    async def test_error_field_becomes_message(self, api):
        with pytest.raises(NotesAPIError) as exc_info:
            await api.update_note("missing", title="x")

        assert exc_info.value.message == "Note not found or failed to update"
        assert exc_info.value.status_code == 404

    async def test_create_failure(self, api):
        with pytest.raises(NotesAPIError) as exc_info:
            await api.create_note("")

        assert exc_info.value.message == "Failed to create note"
        assert exc_info.value.status_code == 500

    async def test_fallback_message_without_json(self, api, fake_server):
        fake_server.fail_with = httpx.Response(502, text="upstream down")

        with pytest.raises(NotesAPIError) as exc_info:
            await api.list_notes()

        assert exc_info.value.message == "502 Bad Gateway: upstream down"
        assert exc_info.value.status_code == 502

    async def test_transport_failure(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        async with NotesAPI(
            base_url="http://notes.test/api", transport=httpx.MockTransport(refuse)
        ) as api:
            with pytest.raises(NotesAPIError) as exc_info:
                await api.list_notes()

        assert exc_info.value.status_code is None
        assert "Connection refused" in exc_info.value.message
        assert isinstance(exc_info.value, NotesClientError)


class TestErrorMessage:
    """error_message() on hand-built responses."""

    def test_json_without_error_field(self):
        response = httpx.Response(422, json={"detail": "bad"})

        message = error_message(response)

        assert message.startswith("422 Unprocessable Entity: ")
        assert "detail" in message

    def test_non_string_error_field(self):
        response = httpx.Response(500, json={"error": {"code": 1}})

        assert error_message(response).startswith("500 Internal Server Error: ")


class TestConfiguration:

    def test_base_url_strips_trailing_slash(self):
        assert NotesAPI(base_url="http://notes.test/api/").base_url == "http://notes.test/api"

    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("NOTES_API_URL", "http://elsewhere:8080/api")
        monkeypatch.setenv("NOTES_REQUEST_TIMEOUT", "2.5")

        api = NotesAPI()

        assert api.base_url == "http://elsewhere:8080/api"
        assert api.timeout == 2.5

    def test_no_timeout_by_default(self, monkeypatch):
        monkeypatch.delenv("NOTES_REQUEST_TIMEOUT", raising=False)

        assert NotesAPI(base_url="http://notes.test/api").timeout is None
