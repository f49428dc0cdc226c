"""
Notes API — Server Entry Point
================================

Runs the API with uvicorn on HOST:PORT (default 0.0.0.0:3000).

    python -m notes_api
    notes-api
"""

import uvicorn

from notes_api.config import settings


def main() -> None:
    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
