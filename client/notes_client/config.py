"""
Notes Client — Configuration
==============================

What:  Where the Notes API lives and how long to wait for it.
How:   Pydantic Settings with the NOTES_ prefix:

    NOTES_API_URL           base URL including the /api prefix
    NOTES_REQUEST_TIMEOUT   seconds; unset means wait indefinitely
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client settings loaded from NOTES_* environment variables."""

    api_url: str = Field(default="http://localhost:3000/api")
    request_timeout: Optional[float] = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_client_settings() -> ClientSettings:
    """Read settings from the current environment."""
    return ClientSettings()
