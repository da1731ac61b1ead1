"""Client configuration.

Why here:
- Centralizes transport settings (pydantic-settings) without tying the Core
  to a particular entry point.
- Lets adapters (HTTP, decoding) read the same typed config.

Note:
- The API key is deliberately not part of these settings: it is passed to the
  client explicitly, so the library never picks it up from the environment.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.pokemontcg.io/v2"

# pokemontcg.io rejects pageSize above 250.
MAX_PAGE_SIZE = 250


class ClientSettings(BaseSettings):
    """Transport settings shared by every request of a `Client`."""

    model_config = SettingsConfigDict(
        env_prefix="POKEMON_TCG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL of the Pokémon TCG API (v2).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="pokemontcg-sdk/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    page_size: int = Field(
        default=MAX_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Records requested per page when following pagination.",
    )
