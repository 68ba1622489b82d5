"""
Tests for commands/bridge.py

Coverage:
- Dispatch of every named command
- JSON-ready results
- Failures rendered as messages instead of exceptions
"""

import asyncio

import pytest

from commands.bridge import COMMANDS, CommandBridge, CommandResult

from conftest import BASE_URL, make_anime


@pytest.fixture
def bridge(service):
    return CommandBridge(service)


def invoke(bridge, name, params=None) -> CommandResult:
    return asyncio.run(bridge.invoke(name, params))


class TestDispatch:
    """Named commands."""

    def test_command_list(self):
        assert set(COMMANDS) == {
            "get_catalog",
            "get_catalog_paginated",
            "get_anime_details",
            "get_full_release",
            "search_releases",
            "save_settings",
            "get_settings",
        }

    def test_get_catalog_returns_plain_dicts(self, bridge, fake_session):
        fake_session.routes["/anime/releases/latest"] = (200, [make_anime(1)])

        result = invoke(bridge, "get_catalog")

        assert result.ok
        assert result.error is None
        assert result.data[0]["id"] == 1
        assert result.data[0]["name"]["main"] == "Релиз 1"

    def test_get_catalog_paginated(self, bridge, fake_session):
        fake_session.routes["/anime/catalog/releases"] = (200, {"data": [make_anime(2)]})

        result = invoke(bridge, "get_catalog_paginated", {"page": 4})

        assert result.ok
        assert fake_session.calls[0]["params"]["page"] == 5

    def test_get_full_release(self, bridge, fake_session, sample_release):
        fake_session.routes["/anime/releases/9919"] = (200, sample_release)

        result = invoke(bridge, "get_full_release", {"id": "9919"})

        assert result.ok
        assert result.data["related_franchise"] == []

    def test_get_anime_details(self, bridge, fake_session):
        fake_session.routes["/anime/releases/episodes/e1"] = (200, {"hls_720": "/720.m3u8"})
        assert invoke(bridge, "get_anime_details", {"id": "e1"}).data == {"hls_720": "/720.m3u8"}

    def test_search_releases(self, bridge, fake_session):
        fake_session.routes["/app/search/releases"] = (200, [])
        assert invoke(bridge, "search_releases", {"query": "x"}) == CommandResult(ok=True, data=[])

    def test_settings_round_trip(self, bridge):
        """save_settings accepts a plain dict, get_settings returns one."""
        assert invoke(bridge, "get_settings").data == {"api_url": BASE_URL}

        saved = invoke(bridge, "save_settings", {"new_settings": {"api_url": "https://mirror.test"}})

        assert saved == CommandResult(ok=True, data=None)
        assert invoke(bridge, "get_settings").data == {"api_url": "https://mirror.test"}


class TestFailures:
    """Errors become messages."""

    def test_server_error_message(self, bridge, fake_session):
        fake_session.routes["/anime/releases/latest"] = (503, "")

        result = invoke(bridge, "get_catalog")

        assert not result.ok
        assert result.data is None
        assert result.error == "Server returned status 503"

    def test_localized_message(self, service, fake_session):
        fake_session.routes["/anime/releases/latest"] = (500, "")
        result = invoke(CommandBridge(service, locale="ru"), "get_catalog")
        assert result.error == "Сервер вернул статус: 500"

    def test_decode_error_message_has_body(self, bridge, fake_session):
        fake_session.routes["/app/search/releases"] = (200, "<html>maintenance</html>")

        result = invoke(bridge, "search_releases", {"query": "x"})

        assert not result.ok
        assert "<html>maintenance</html>" in result.error

    def test_unknown_command(self, bridge):
        result = invoke(bridge, "delete_everything")
        assert not result.ok
        assert "delete_everything" in result.error

    def test_missing_parameter(self, bridge, fake_session):
        result = invoke(bridge, "get_full_release")
        assert not result.ok
        assert "id" in result.error
        assert fake_session.calls == []

    def test_invalid_page(self, bridge):
        result = invoke(bridge, "get_catalog_paginated", {"page": -3})
        assert not result.ok
        assert result.error.startswith("Invalid argument")

    def test_invalid_settings_payload(self, bridge):
        result = invoke(bridge, "save_settings", {"new_settings": {"url": "x"}})
        assert not result.ok
        assert invoke(bridge, "get_settings").data == {"api_url": BASE_URL}
