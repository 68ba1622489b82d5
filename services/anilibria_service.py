"""AniLibria API operations.

Provides:
- AniLibriaService: one coroutine per UI-facing capability
- create_service: composition root wiring ConfigStore and Transport

Each operation snapshots the base URL from the ConfigStore, performs its
request through the shared Transport and decodes with classify().
"""

from typing import Any
from urllib.parse import quote

from models.config import ClientSettings
from models.config import settings as default_settings
from models.models import (
    CATALOG_PAGE_LIMIT,
    RELATED_FRANCHISE_KEY,
    AnimeSummary,
    AppSettings,
    CatalogEnvelope,
    FullRelease,
    JsonPayload,
    ReleaseID,
)
from services.classifier import classify
from services.config_store import ConfigStore
from services.transport import Transport
from utils.exceptions import AniLibrixError, DecodeError
from utils.logging import get_logger

logger = get_logger(__name__)


class AniLibriaService:
    """Endpoint operations against the AniLibria REST API."""

    def __init__(self, store: ConfigStore, transport: Transport) -> None:
        """Initialize the service.

        Args:
            store: Shared configuration store (base URL)
            transport: Shared HTTP transport
        """
        self.store = store
        self.transport = transport

    def _url(self, path: str, base: str | None = None) -> str:
        """Join path to a base URL snapshot, or to the current one."""
        base = (self.store.read() if base is None else base).rstrip("/")
        return f"{base}/{path.lstrip('/')}"

    @staticmethod
    def _segment(value: ReleaseID) -> str:
        return quote(str(value), safe="")

    async def get_catalog(self) -> list[AnimeSummary]:
        """Fetch the latest releases (fixed limit of 15)."""
        response = await self.transport.fetch(
            self._url("anime/releases/latest"),
            params={"limit": CATALOG_PAGE_LIMIT},
        )
        return classify(response, list[AnimeSummary])

    async def get_catalog_paginated(self, page: int) -> list[AnimeSummary]:
        """Fetch one catalog page.

        Args:
            page: Zero-based page index used by the UI

        Returns:
            Releases on the page. A page shorter than CATALOG_PAGE_LIMIT is the last one.

        Raises:
            ValueError: If page is negative or not an integer
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 0:
            raise ValueError(f"page must be a non-negative integer, got {page!r}")

        # The API counts pages from 1
        response = await self.transport.fetch(
            self._url("anime/catalog/releases"),
            params={"limit": CATALOG_PAGE_LIMIT, "page": page + 1},
        )
        return classify(response, CatalogEnvelope).data

    async def get_anime_details(self, id: ReleaseID) -> JsonPayload:
        """Fetch an episode payload, returned unmodified."""
        response = await self.transport.fetch(self._url(f"anime/releases/episodes/{self._segment(id)}"))
        return classify(response, JsonPayload)

    async def get_full_release(self, id: ReleaseID) -> FullRelease:
        """Fetch a release merged with its related franchises.

        The release request must succeed. The franchise request is
        best-effort: any failure yields an empty related_franchise list.

        Args:
            id: Release identifier

        Returns:
            Release payload with a related_franchise list

        Raises:
            TransportError, ServerError, DecodeError: If the release request fails
        """
        base = self.store.read()
        response = await self.transport.fetch(self._url(f"anime/releases/{self._segment(id)}", base))
        release = classify(response, JsonPayload)
        if not isinstance(release, dict):
            raise DecodeError(
                f"Expected a JSON object for release {id}, got {type(release).__name__}",
                raw_body=response.text,
                url=response.url,
            )

        release[RELATED_FRANCHISE_KEY] = await self._fetch_franchises(id, base)
        return release

    async def _fetch_franchises(self, id: ReleaseID, base: str) -> list[Any]:
        """Fetch franchises of a release, absorbing every failure."""
        try:
            response = await self.transport.fetch(self._url(f"anime/franchises/release/{self._segment(id)}", base))
            franchises = classify(response, JsonPayload)
        except AniLibrixError as e:
            logger.warning(f"Franchise lookup for release {id} failed ({e.kind}): {e}")
            return []

        if not isinstance(franchises, list):
            logger.warning(f"Franchise lookup for release {id} returned {type(franchises).__name__}, expected list")
            return []
        return franchises

    async def search_releases(self, query: str) -> list[AnimeSummary]:
        """Search releases by title."""
        response = await self.transport.fetch(
            self._url("app/search/releases"),
            params={"query": query},
        )
        return classify(response, list[AnimeSummary])

    def get_settings(self) -> AppSettings:
        """Return a snapshot of the current settings."""
        return self.store.snapshot()

    async def save_settings(self, new_settings: AppSettings) -> None:
        """Replace the current settings for the rest of the process lifetime."""
        self.store.write(new_settings.api_url)
        logger.info(f"Settings updated: {new_settings.api_url}")

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()


def create_service(config: ClientSettings | None = None, session=None) -> AniLibriaService:
    """Build the service with its shared store and transport.

    Args:
        config: Startup settings, defaults to the environment-loaded settings
        session: Optional requests-compatible session (used by tests)

    Returns:
        Ready to use AniLibriaService
    """
    config = config or default_settings
    store = ConfigStore(config.api.api_url)
    transport = Transport(
        user_agent=config.http.user_agent,
        timeout=config.http.timeout_seconds,
        max_workers=config.http.max_workers,
        session=session,
    )
    return AniLibriaService(store, transport)
