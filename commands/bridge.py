"""Named-operation invocation surface for the UI shell.

The UI calls operations by name with keyword parameters and receives either
JSON-ready data or a rendered error message, never an exception.
"""

from typing import Any, NamedTuple

from pydantic import BaseModel, ValidationError

from models.models import AppSettings
from services.anilibria_service import AniLibriaService
from utils.exceptions import AniLibrixError, UnknownCommandError
from utils.logging import get_logger
from utils.messages import DEFAULT_LOCALE, render_error

logger = get_logger(__name__)

COMMANDS = (
    "get_catalog",
    "get_catalog_paginated",
    "get_anime_details",
    "get_full_release",
    "search_releases",
    "save_settings",
    "get_settings",
)


class CommandResult(NamedTuple):
    """Outcome of one invocation.

    Attributes:
        ok: True if the operation succeeded
        data: JSON-ready result (None on failure)
        error: Rendered error message (None on success)
    """

    ok: bool
    data: Any = None
    error: str | None = None


def to_json_ready(value: Any) -> Any:
    """Convert models (and lists of models) to plain JSON data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_json_ready(item) for item in value]
    return value


class CommandBridge:
    """Dispatches named commands to AniLibriaService."""

    def __init__(self, service: AniLibriaService, locale: str = DEFAULT_LOCALE) -> None:
        self.service = service
        self.locale = locale

    async def invoke(self, name: str, params: dict[str, Any] | None = None) -> CommandResult:
        """Run a command by name.

        Args:
            name: One of COMMANDS
            params: Keyword parameters of the command

        Returns:
            CommandResult with data or a rendered error
        """
        params = params or {}
        try:
            value = await self._dispatch(name, params)
        except (AniLibrixError, ValueError, TypeError) as e:
            logger.error(f"Command {name} failed: {e}")
            return CommandResult(ok=False, error=render_error(e, self.locale))
        return CommandResult(ok=True, data=to_json_ready(value))

    async def _dispatch(self, name: str, params: dict[str, Any]) -> Any:
        service = self.service
        if name == "get_catalog":
            return await service.get_catalog()
        if name == "get_catalog_paginated":
            return await service.get_catalog_paginated(params["page"] if "page" in params else 0)
        if name == "get_anime_details":
            return await service.get_anime_details(_require(params, "id"))
        if name == "get_full_release":
            return await service.get_full_release(_require(params, "id"))
        if name == "search_releases":
            return await service.search_releases(_require(params, "query"))
        if name == "save_settings":
            raw = _require(params, "new_settings")
            try:
                new_settings = raw if isinstance(raw, AppSettings) else AppSettings.model_validate(raw)
            except ValidationError as e:
                raise ValueError(f"invalid settings: {e.error_count()} error(s)") from e
            return await service.save_settings(new_settings)
        if name == "get_settings":
            return service.get_settings()
        raise UnknownCommandError(name)


def _require(params: dict[str, Any], key: str) -> Any:
    if key not in params:
        raise ValueError(f"missing parameter '{key}'")
    return params[key]
