"""
Notes Client — HTTP Request Functions
=======================================

What:  Async wrapper over httpx.AsyncClient for the Notes API.
How:   One request per call, no retries. Any non-2xx status becomes a
       NotesAPIError carrying the server's `error` message (or a
       "<status> <reason>: <text>" fallback); transport failures become a
       NotesAPIError with status_code=None.

Usage:
    async with NotesAPI() as api:
        note = await api.create_note("Groceries", "milk, eggs")
        await api.update_note(note.id, completed=True)
"""

import logging
from typing import Any, List, Optional

import httpx

from notes_client.config import get_client_settings
from notes_client.exceptions import NotesAPIError
from notes_client.models import Note

logger = logging.getLogger(__name__)


def error_message(response: httpx.Response) -> str:
    """Extract a readable message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"{response.status_code} {response.reason_phrase}: {response.text}"


class NotesAPI:
    """
    HTTP client for the notes endpoints.

    Args:
        base_url:   API base including `/api`. Defaults to NOTES_API_URL.
        timeout:    Seconds per request. Defaults to NOTES_REQUEST_TIMEOUT
                    (no timeout when unset).
        transport:  Optional httpx transport; tests pass httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_client_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "NotesAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = self._get_client()
        logger.debug("API request: %s %s", method, path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("API request failed: %s %s: %s", method, path, e)
            raise NotesAPIError(str(e) or type(e).__name__) from e

        logger.debug("API response: %s %s → %d", method, path, response.status_code)
        if not response.is_success:
            message = error_message(response)
            logger.warning(
                "API error: %s %s → %d %s", method, path, response.status_code, message
            )
            raise NotesAPIError(message, status_code=response.status_code)
        return response

    # ── Endpoints ─────────────────────────────────────────────────────────

    async def list_notes(self) -> List[Note]:
        response = await self._request("GET", "/notes")
        return [Note.model_validate(item) for item in response.json()]

    async def create_note(self, title: str, content: Optional[str] = None) -> Note:
        response = await self._request(
            "POST", "/notes", json={"title": title, "content": content}
        )
        return Note.model_validate(response.json())

    async def update_note(self, note_id: str, **fields: Any) -> Note:
        """
        Send a partial update.

        Only the keyword arguments given are sent, e.g.
        `update_note(note_id, completed=True)` leaves title and content alone.
        """
        response = await self._request("PUT", f"/notes/{note_id}", json=fields)
        return Note.model_validate(response.json())

    async def delete_note(self, note_id: str) -> None:
        await self._request("DELETE", f"/notes/{note_id}")

    async def health(self) -> str:
        """
        Return the server's liveness message from GET /.

        The root route sits outside the /api prefix, so the path is resolved
        against the server origin.
        """
        url = self._get_client().base_url.copy_with(path="/")
        response = await self._request("GET", str(url))
        return response.json()["message"]
