"""Pydantic data models for structured data transfer.

Defines DTOs (Data Transfer Objects) for:
- AnimeSummary: Release card returned by catalog, latest and search endpoints
- CatalogEnvelope: Paginated catalog response ({"data": [...]})
- AppSettings: Mutable client configuration exposed to the UI
- Episode / VideoSource: Episode payload helpers for the player
- JsonPayload: Untyped JSON passed through unchanged
"""

from typing import Any, TypeAlias
from urllib.parse import urljoin

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError

# Type aliases for common patterns
ReleaseID: TypeAlias = str
JsonPayload: TypeAlias = JsonValue
FullRelease: TypeAlias = dict[str, JsonValue]

CATALOG_PAGE_LIMIT = 15
RELATED_FRANCHISE_KEY = "related_franchise"


class _ApiModel(BaseModel):
    """Immutable model that tolerates extra upstream fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class AnimeName(_ApiModel):
    """Release titles.

    Attributes:
        main: Primary (Russian) title
        english: Optional English title
        alternative: Optional alternative title
    """

    main: str
    english: str | None = None
    alternative: str | None = None


class AnimePoster(_ApiModel):
    """Poster image paths, relative to the site host.

    Attributes:
        src: Full size image path
        preview: Preview image path
        thumbnail: Optional thumbnail path
    """

    src: str
    preview: str
    thumbnail: str | None = None

    def best_path(self, prefer_preview: bool = True) -> str:
        """Pick the image path to display.

        Args:
            prefer_preview: Use preview/thumbnail before the full image

        Returns:
            First non-empty path in preference order
        """
        order = (self.preview, self.thumbnail, self.src) if prefer_preview else (self.src, self.preview)
        return next((path for path in order if path), self.src)

    @staticmethod
    def absolute_url(site_url: str, path: str) -> str:
        """Resolve a host-relative media path against the site URL."""
        if path.startswith(("http://", "https://")):
            return path
        return urljoin(site_url.rstrip("/") + "/", path.lstrip("/"))


class Genre(_ApiModel):
    """Release genre."""

    id: int | None = None
    name: str


class AnimeSummary(_ApiModel):
    """Release card as returned by list endpoints.

    The player field is opaque: it is validated as JSON and returned as-is.
    """

    id: int = Field(..., description="Unique release identifier")
    name: AnimeName
    poster: AnimePoster
    year: int | None = None
    description: str | None = None
    genres: list[Genre] | None = None
    player: JsonPayload = None


class CatalogEnvelope(_ApiModel):
    """Paginated catalog response. Only data is modeled."""

    data: list[AnimeSummary]


class AppSettings(BaseModel):
    """Mutable client configuration.

    Attributes:
        api_url: Base URL of the remote API (not validated)
    """

    api_url: str


class VideoSource(BaseModel):
    """One playable HLS stream."""

    label: str
    src: str


class Episode(BaseModel):
    """Episode entry of a release (also the episode details payload).

    Only the fields the player needs are modeled, the rest is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    ordinal: float | None = None
    name: str | None = None
    hls_480: str | None = None
    hls_720: str | None = None
    hls_1080: str | None = None

    def sources(self) -> list[VideoSource]:
        """Available streams, best quality first."""
        candidates = (
            ("1080p", self.hls_1080),
            ("720p", self.hls_720),
            ("480p", self.hls_480),
        )
        return [VideoSource(label=label, src=src) for label, src in candidates if src]


def release_episodes(full_release: dict[str, Any]) -> list[Episode]:
    """Episodes of a release payload, skipping entries that do not parse."""
    episodes = []
    for item in full_release.get("episodes") or []:
        try:
            episodes.append(Episode.model_validate(item))
        except ValidationError:
            continue
    return episodes


def franchise_releases(full_release: dict[str, Any]) -> list[Any]:
    """Releases of the first related franchise.

    Args:
        full_release: Payload returned by get_full_release

    Returns:
        The franchise_releases list, or [] when missing or malformed
    """
    franchises = full_release.get(RELATED_FRANCHISE_KEY)
    if not isinstance(franchises, list) or not franchises:
        return []
    first = franchises[0]
    if not isinstance(first, dict):
        return []
    releases = first.get("franchise_releases")
    return releases if isinstance(releases, list) else []
