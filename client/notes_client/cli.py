"""
Notes Client — Terminal Front End
===================================

Typer commands over NotesBoard, rendered with Rich.

Usage:
    notes list
    notes add "Groceries" --content "milk, eggs"
    notes edit <id> --title "Groceries (weekly)"
    notes toggle <id>
    notes delete <id> --yes
    notes ping
    notes shell                 # interactive session, one board throughout

Options:
    --api-url         Override NOTES_API_URL
    --verbose, -v     Log requests (DEBUG level)
"""

import asyncio
import logging
import shlex
import sys
from typing import Awaitable, Callable, Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from notes_client.api import NotesAPI
from notes_client.board import NotesBoard
from notes_client.exceptions import NotesClientError
from notes_client.models import Note

app = typer.Typer(
    name="notes",
    help="Notes client - create, list, edit and delete notes.",
    no_args_is_help=True,
)

console = Console()

_state: Dict[str, Optional[str]] = {"api_url": None}


def get_api() -> NotesAPI:
    """Build the API client for one command."""
    return NotesAPI(base_url=_state["api_url"])


# ══════════════════════════════════════════════════════════════════════════
# Rendering
# ══════════════════════════════════════════════════════════════════════════

def render_notes(notes: List[Note]) -> None:
    if not notes:
        console.print("[dim]No notes yet.[/dim]")
        return

    table = Table(title="Notes", show_header=True)
    table.add_column("Title", style="cyan")
    table.add_column("Content")
    table.add_column("Done", justify="center")
    table.add_column("ID", style="dim", no_wrap=True)

    for note in notes:
        table.add_row(
            f"[strike]{escape(note.title)}[/strike]" if note.completed else escape(note.title),
            escape(note.content or ""),
            "[green]✓[/green]" if note.completed else "",
            note.id,
        )
    console.print(table)


def render_error(message: str) -> None:
    console.print(Panel(Text(message), title="Error", border_style="red", style="red"))


def _run(action: Callable[[NotesBoard], Awaitable[None]]) -> None:
    """Run one command against a freshly loaded board; exit 1 on failure."""

    async def runner() -> None:
        async with get_api() as api:
            board = NotesBoard(api)
            await board.load()
            if board.error:
                raise NotesClientError(board.error)
            await action(board)

    try:
        asyncio.run(runner())
    except NotesClientError as e:
        render_error(e.message)
        raise typer.Exit(1)


# ══════════════════════════════════════════════════════════════════════════
# One-shot Commands
# ══════════════════════════════════════════════════════════════════════════

@app.command("list")
def list_command() -> None:
    """List all notes, oldest first."""

    async def action(board: NotesBoard) -> None:
        render_notes(board.notes)

    _run(action)


@app.command()
def add(
    title: str = typer.Argument(..., help="Note title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="Note body"),
) -> None:
    """Create a note."""

    async def action(board: NotesBoard) -> None:
        note = await board.submit(title, content)
        console.print(f"[green]Created[/green] {note.id}")

    _run(action)


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note id"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New body"),
) -> None:
    """Change a note's title and/or content."""

    async def action(board: NotesBoard) -> None:
        board.start_edit(board.get(note_id))
        note = await board.submit(
            title if title is not None else board.title,
            content if content is not None else board.content,
        )
        if note is None:
            console.print("[dim]Nothing to change.[/dim]")
        else:
            console.print(f"[green]Updated[/green] {note.id}")

    _run(action)


@app.command()
def toggle(note_id: str = typer.Argument(..., help="Note id")) -> None:
    """Flip a note's completed flag."""

    async def action(board: NotesBoard) -> None:
        note = await board.toggle_completed(note_id)
        state = "completed" if note.completed else "not completed"
        console.print(f"[green]Marked[/green] {escape(note.title)} as {state}")

    _run(action)


@app.command()
def delete(
    note_id: str = typer.Argument(..., help="Note id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a note permanently."""

    def confirm(note: Note) -> bool:
        return yes or typer.confirm(f"Delete '{note.title}'?")

    async def action(board: NotesBoard) -> None:
        if await board.delete(note_id, confirm):
            console.print(f"[green]Deleted[/green] {note_id}")
        else:
            console.print("[dim]Cancelled.[/dim]")

    _run(action)


@app.command()
def ping() -> None:
    """Check that the server answers."""

    async def runner() -> str:
        async with get_api() as api:
            return await api.health()

    try:
        message = asyncio.run(runner())
    except NotesClientError as e:
        render_error(e.message)
        raise typer.Exit(1)
    console.print(f"[green]{message}[/green]")


# ══════════════════════════════════════════════════════════════════════════
# Interactive Shell
# ══════════════════════════════════════════════════════════════════════════

class NotesShell:
    """
    REPL over a single NotesBoard.

    Commands:
        list | add TITLE [CONTENT] | edit ID | toggle ID | delete ID
        refresh | help | quit
    """

    def __init__(self, board: NotesBoard) -> None:
        self.board = board
        self.running = False
        self.commands: Dict[str, Callable[[List[str]], Awaitable[None]]] = {
            "help": self._cmd_help,
            "list": self._cmd_list,
            "refresh": self._cmd_refresh,
            "add": self._cmd_add,
            "edit": self._cmd_edit,
            "toggle": self._cmd_toggle,
            "delete": self._cmd_delete,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    async def run(self) -> None:
        self.running = True
        console.print(Panel(
            "[bold]Notes[/bold]\n"
            "Type [cyan]help[/cyan] for commands, [cyan]quit[/cyan] to exit.",
            title="Welcome",
        ))
        await self._cmd_refresh([])

        while self.running:
            try:
                user_input = console.input("[bold cyan]notes>[/bold cyan] ").strip()
                if not user_input:
                    continue

                parts = shlex.split(user_input)
                command, args = parts[0].lower(), parts[1:]
                handler = self.commands.get(command)
                if handler is None:
                    console.print(f"[red]Unknown command: {command}[/red]")
                    continue
                await handler(args)

            except KeyboardInterrupt:
                console.print("\n[dim]Use 'quit' to exit[/dim]")
            except EOFError:
                break
            except ValueError as e:
                # shlex: unbalanced quotes
                render_error(str(e))
            except NotesClientError as e:
                render_error(e.message)

        console.print("[dim]Goodbye![/dim]")

    async def _cmd_help(self, args: List[str]) -> None:
        table = Table(title="Available Commands", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description")

        table.add_row("list", "Show the notes")
        table.add_row("refresh", "Reload the notes from the server")
        table.add_row("add TITLE [CONTENT]", "Create a note")
        table.add_row("edit ID", "Edit a note's title and content")
        table.add_row("toggle ID", "Flip a note's completed flag")
        table.add_row("delete ID", "Delete a note (asks first)")
        table.add_row("quit / exit", "Leave the shell")

        console.print(table)

    async def _cmd_list(self, args: List[str]) -> None:
        render_notes(self.board.notes)

    async def _cmd_refresh(self, args: List[str]) -> None:
        with console.status("Loading notes..."):
            await self.board.load()
        if self.board.error:
            render_error(self.board.error)
        else:
            render_notes(self.board.notes)

    async def _cmd_add(self, args: List[str]) -> None:
        if not args:
            console.print("[red]Usage: add TITLE [CONTENT][/red]")
            return
        await self.board.submit(args[0], args[1] if len(args) > 1 else None)
        render_notes(self.board.notes)

    async def _cmd_edit(self, args: List[str]) -> None:
        if len(args) != 1:
            console.print("[red]Usage: edit ID[/red]")
            return
        self.board.start_edit(self.board.get(args[0]))
        try:
            title = Prompt.ask("Title", default=self.board.title, console=console)
            content = Prompt.ask("Content", default=self.board.content, console=console)
            note = await self.board.submit(title, content)
        except NotesClientError:
            self.board.cancel_edit()
            raise
        if note is None:
            console.print("[dim]Nothing to change.[/dim]")
        render_notes(self.board.notes)

    async def _cmd_toggle(self, args: List[str]) -> None:
        if len(args) != 1:
            console.print("[red]Usage: toggle ID[/red]")
            return
        await self.board.toggle_completed(args[0])
        render_notes(self.board.notes)

    async def _cmd_delete(self, args: List[str]) -> None:
        if len(args) != 1:
            console.print("[red]Usage: delete ID[/red]")
            return
        deleted = await self.board.delete(
            args[0],
            lambda note: Confirm.ask(f"Delete '{escape(note.title)}'?", console=console),
        )
        if deleted:
            render_notes(self.board.notes)

    async def _cmd_quit(self, args: List[str]) -> None:
        self.running = False


@app.command()
def shell() -> None:
    """Start an interactive notes session."""

    async def runner() -> None:
        async with get_api() as api:
            await NotesShell(NotesBoard(api)).run()

    asyncio.run(runner())


@app.callback()
def main(
    api_url: Optional[str] = typer.Option(
        None, "--api-url", help="Notes API base URL (default: NOTES_API_URL)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests"),
) -> None:
    """Notes client - create, list, edit and delete notes."""
    _state["api_url"] = api_url
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
