"""
Runtime configuration.

Values come from environment variables prefixed with ``METEOFRANCE_`` (or a
local ``.env`` file). The access token has no shipped default: set
``METEOFRANCE_API_TOKEN`` or pass ``token=`` to the client.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from meteofrance_client.language import Language

DEFAULT_API_URL = "https://webservice.meteofrance.com"
DEFAULT_TIMEOUT = 10.0  # seconds


class Settings(BaseSettings):
    """Client settings, overridable per instance."""

    model_config = SettingsConfigDict(
        env_prefix="METEOFRANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "meteofrance-client"
    api_url: str = DEFAULT_API_URL
    api_token: str = ""
    lang: Language = Language.FRENCH
    timeout: float = DEFAULT_TIMEOUT


@lru_cache
def get_settings() -> Settings:
    return Settings()
