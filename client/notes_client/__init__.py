"""
Notes Client — Package Initializer
====================================

What: Python client for the Notes API.

    ┌─────────────────────────────────────┐
    │   cli.py (typer + rich front end)   │  ← one-shot commands and `shell`
    ├─────────────────────────────────────┤
    │   board.py (NotesBoard)             │  ← note list, form, editing
    │                                     │    selection, loading/error
    ├─────────────────────────────────────┤
    │   api.py (NotesAPI)                 │  ← one HTTP request per call
    └─────────────────────────────────────┘

    The board only changes its list after the server confirms a request.
"""

__version__ = "1.0.0"
