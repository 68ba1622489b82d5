"""Application configuration using Pydantic v2.

Startup settings for anilibrix including:
- API base URL and media host
- HTTP transport settings (timeout, client identifier, worker pool)
- UI locale for rendered error messages
- OS-specific data paths

Configuration can be overridden via environment variables:
    ANILIBRIX__API__API_URL=https://example.test/api/v1
    ANILIBRIX__HTTP__TIMEOUT_SECONDS=5
    ANILIBRIX__UI__LOCALE=ru

These values only seed the process. The live API base URL is owned by
services.config_store.ConfigStore and changes through save_settings.
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://anilibria.top/api/v1"
DEFAULT_SITE_URL = "https://anilibria.top"
DEFAULT_USER_AGENT = "AniLibrix-Python-Client"


def get_data_path() -> Path:
    """Get OS-specific data directory for anilibrix.

    Returns:
        Path: ~/.local/state/anilibrix (Linux/macOS) or %APPDATA%\\anilibrix (Windows)
    """
    if os.name == "nt":
        return Path(os.environ.get("APPDATA", Path.home())) / "anilibrix"
    return Path.home() / ".local" / "state" / "anilibrix"


class ApiSettings(BaseModel):
    """Remote API configuration."""

    api_url: str = Field(
        DEFAULT_API_URL,
        description="Initial base URL of the AniLibria REST API",
    )
    site_url: str = Field(
        DEFAULT_SITE_URL,
        description="Host used to resolve relative poster and media paths",
    )


class HttpSettings(BaseModel):
    """Shared HTTP transport configuration."""

    timeout_seconds: float = Field(
        10.0,
        ge=0.5,
        le=120.0,
        description="Default request timeout in seconds (per call override allowed)",
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT,
        min_length=1,
        description="Stable client identifier sent with every request",
    )
    max_workers: int = Field(
        4,
        ge=1,
        le=32,
        description="Threads available for concurrent requests",
    )


class UiSettings(BaseModel):
    """Presentation settings for the invocation surface."""

    locale: Literal["en", "ru"] = Field(
        "en",
        description="Language of rendered error messages",
    )


class ClientSettings(BaseSettings):
    """Root client settings with environment variable support.

    Environment variables use the prefix ANILIBRIX__ with nested delimiters:
    - ANILIBRIX__API__API_URL=https://example.test/api/v1
    - ANILIBRIX__HTTP__TIMEOUT_SECONDS=5
    - ANILIBRIX__UI__LOCALE=ru

    Can also be configured via .env file in project root.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",  # ANILIBRIX__HTTP__TIMEOUT_SECONDS
        env_prefix="ANILIBRIX__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    ui: UiSettings = Field(default_factory=UiSettings)


# Startup defaults - the composition root copies api_url into a ConfigStore
settings = ClientSettings()
