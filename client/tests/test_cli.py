"""Unit tests for the notes CLI commands."""

import json
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from notes_client.api import NotesAPI
from notes_client.cli import app, console

runner = CliRunner()


@pytest.fixture
def server(fake_server):
    """Route every CLI command to the fake server."""

    def make_api() -> NotesAPI:
        return NotesAPI(base_url="http://notes.test/api", transport=fake_server.transport())

    with patch("notes_client.cli.get_api", make_api):
        yield fake_server


class TestHelp:

    def test_help(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("list", "add", "edit", "toggle", "delete", "ping", "shell"):
            assert command in result.output

    def test_add_help(self) -> None:
        result = runner.invoke(app, ["add", "--help"])

        assert result.exit_code == 0
        assert "Create a note" in result.output


class TestListCommand:

    def test_list_empty(self, server) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "No notes yet." in result.output

    def test_list_shows_notes(self, server) -> None:
        server.add("Groceries", "milk")
        server.add("Dentist")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Groceries" in result.output
        assert "Dentist" in result.output

    def test_list_failure(self, server) -> None:
        server.fail_with = httpx.Response(500, json={"error": "Failed to fetch notes"})

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "Failed to fetch notes" in result.output


class TestMutations:

    def test_add(self, server) -> None:
        result = runner.invoke(app, ["add", "Groceries", "--content", "milk"])

        assert result.exit_code == 0
        assert "Created" in result.output
        [note] = server.notes.values()
        assert (note["title"], note["content"]) == ("Groceries", "milk")

    def test_add_blank_title(self, server) -> None:
        result = runner.invoke(app, ["add", "   "])

        assert result.exit_code == 1
        assert "Title is required" in result.output
        assert server.mutations == []

    def test_edit_title_only(self, server) -> None:
        stored = server.add("Groceries", "milk")

        result = runner.invoke(app, ["edit", stored["id"], "--title", "Groceries (weekly)"])

        assert result.exit_code == 0
        [request] = server.mutations
        assert json.loads(request.content) == {"title": "Groceries (weekly)"}
        assert server.notes[stored["id"]]["content"] == "milk"

    def test_edit_without_changes(self, server) -> None:
        stored = server.add("Groceries")

        result = runner.invoke(app, ["edit", stored["id"]])

        assert result.exit_code == 0
        assert "Nothing to change." in result.output
        assert server.mutations == []

    def test_edit_unknown_id(self, server) -> None:
        result = runner.invoke(app, ["edit", "nope", "--title", "x"])

        assert result.exit_code == 1
        assert "No note with id 'nope'" in result.output

    def test_toggle(self, server) -> None:
        stored = server.add("Groceries")

        result = runner.invoke(app, ["toggle", stored["id"]])

        assert result.exit_code == 0
        assert "as completed" in result.output
        assert server.notes[stored["id"]]["completed"] is True

    def test_delete_with_yes(self, server) -> None:
        stored = server.add("Groceries")

        result = runner.invoke(app, ["delete", stored["id"], "--yes"])

        assert result.exit_code == 0
        assert server.notes == {}

    def test_delete_declined(self, server) -> None:
        stored = server.add("Groceries")

        result = runner.invoke(app, ["delete", stored["id"]], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled." in result.output
        assert stored["id"] in server.notes
        assert server.mutations == []


class TestPing:

    def test_ping(self, server) -> None:
        result = runner.invoke(app, ["ping"])

        assert result.exit_code == 0
        assert "API is running!" in result.output


class TestShell:

    def test_shell_add_and_quit(self, server) -> None:
        result = runner.invoke(app, ["shell"], input="add Milk 'two liters'\nlist\nquit\n")

        assert result.exit_code == 0
        [note] = server.notes.values()
        assert (note["title"], note["content"]) == ("Milk", "two liters")
        assert "Goodbye!" in result.output

    def test_shell_shows_load_error(self, server) -> None:
        server.fail_with = httpx.Response(500, json={"error": "Failed to fetch notes"})

        result = runner.invoke(app, ["shell"], input="quit\n")

        assert result.exit_code == 0
        assert "Failed to fetch notes" in result.output

    def test_shell_keeps_running_after_error(self, server) -> None:
        result = runner.invoke(app, ["shell"], input="toggle nope\nadd Milk\nquit\n")

        assert result.exit_code == 0
        assert "No note with id 'nope'" in result.output
        assert len(server.notes) == 1

    def test_shell_end_of_input(self, server) -> None:
        result = runner.invoke(app, ["shell"], input="")

        assert result.exit_code == 0
        assert "Goodbye!" in result.output

    def test_shell_shows_loading_status(self, server) -> None:
        with patch.object(console, "status", wraps=console.status) as status:
            result = runner.invoke(app, ["shell"], input="refresh\nquit\n")

        assert result.exit_code == 0
        assert status.call_count == 2
        status.assert_called_with("Loading notes...")
