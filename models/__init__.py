"""Data models and configuration.

Pydantic models and configuration:
- models: Release, catalog, settings and episode data models
- config: Startup configuration (Pydantic Settings)
"""

from models.models import (
    CATALOG_PAGE_LIMIT,
    RELATED_FRANCHISE_KEY,
    AnimeName,
    AnimePoster,
    AnimeSummary,
    AppSettings,
    CatalogEnvelope,
    Episode,
    Genre,
    JsonPayload,
    VideoSource,
)
from models.config import ClientSettings, settings, get_data_path

__all__ = [
    "CATALOG_PAGE_LIMIT",
    "RELATED_FRANCHISE_KEY",
    "AnimeName",
    "AnimePoster",
    "AnimeSummary",
    "AppSettings",
    "CatalogEnvelope",
    "Episode",
    "Genre",
    "JsonPayload",
    "VideoSource",
    "ClientSettings",
    "settings",
    "get_data_path",
]
