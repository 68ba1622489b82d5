"""
Shared test fixtures and configuration for anilibrix test suite.

This module provides:
- FakeSession: requests-compatible session routing URLs to canned responses
- Service fixtures wired to the fake session (no network)
- Sample API payloads
"""

import json
from typing import Any

import pytest
import requests

from models.config import ClientSettings
from services.anilibria_service import create_service

BASE_URL = "https://example.test/api/v1"


# ========== Fake HTTP session ==========


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int, text: str, url: str):
        self.status_code = status_code
        self.text = text
        self.url = url


class FakeSession:
    """requests.Session replacement.

    Routes are keyed by URL path suffix (e.g. "/anime/releases/42"). A route
    value is (status, body) where body is a str or JSON-serializable data,
    or an exception instance to raise.
    """

    def __init__(self, routes: dict[str, Any] | None = None):
        self.routes = dict(routes or {})
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        prepared = requests.Request("GET", url, params=params).prepare().url
        self.calls.append({"url": url, "params": params, "timeout": timeout, "full_url": prepared})

        for suffix, route in self.routes.items():
            if url.endswith(suffix):
                if isinstance(route, Exception):
                    raise route
                status, body = route
                text = body if isinstance(body, str) else json.dumps(body)
                return FakeResponse(status, text, prepared)

        return FakeResponse(404, '{"message": "not found"}', prepared)

    def close(self):
        self.closed = True

    def urls(self) -> list[str]:
        return [call["full_url"] for call in self.calls]


@pytest.fixture
def fake_session():
    """Empty fake session, add routes via fake_session.routes."""
    return FakeSession()


@pytest.fixture
def client_settings():
    """Startup settings pointing at the test base URL."""
    return ClientSettings(api={"api_url": BASE_URL}, http={"timeout_seconds": 5})


@pytest.fixture
def service(fake_session, client_settings):
    """Service wired to the fake session."""
    svc = create_service(client_settings, session=fake_session)
    yield svc
    svc.close()


# ========== Sample Data Fixtures ==========


def make_anime(anime_id: int, **overrides) -> dict[str, Any]:
    """Realistic release card as returned by the API."""
    anime = {
        "id": anime_id,
        "type": {"value": "TV", "description": "ТВ"},
        "name": {"main": f"Релиз {anime_id}", "english": f"Release {anime_id}", "alternative": None},
        "poster": {
            "src": f"/storage/releases/posters/{anime_id}/full.jpg",
            "preview": f"/storage/releases/posters/{anime_id}/preview.jpg",
            "thumbnail": f"/storage/releases/posters/{anime_id}/thumb.jpg",
        },
        "year": 2024,
        "description": "Описание",
        "genres": [{"id": 7, "name": "Комедия"}],
    }
    anime.update(overrides)
    return anime


@pytest.fixture
def sample_anime_list():
    """Three release cards."""
    return [make_anime(1), make_anime(2), make_anime(3)]


@pytest.fixture
def sample_release():
    """Release detail payload with episodes."""
    return {
        "id": 9919,
        "name": {"main": "Дандадан", "english": "Dandadan"},
        "poster": {"src": "/storage/9919/full.jpg", "preview": "/storage/9919/preview.jpg"},
        "episodes": [
            {
                "id": "a1b2-c3",
                "ordinal": 1,
                "name": "Эпизод 1",
                "hls_480": "https://cache.example/480.m3u8",
                "hls_720": "https://cache.example/720.m3u8",
                "hls_1080": None,
            },
            {"id": "d4e5-f6", "ordinal": 2, "name": None, "hls_720": "https://cache.example/2-720.m3u8"},
        ],
    }


@pytest.fixture
def sample_franchises():
    """Franchise lookup payload."""
    return [
        {
            "id": "f-1",
            "name": "Дандадан",
            "franchise_releases": [
                {"id": 1, "release_id": 9919, "release": make_anime(9919)},
                {"id": 2, "release_id": 9990, "release": make_anime(9990)},
            ],
        }
    ]
