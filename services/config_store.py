"""Mutable client configuration shared by all operations.

One ConfigStore is created by the composition root and passed to the
service. The lock guards single attribute accesses only, so callers take a
snapshot of the base URL before any network call.
"""

import threading

from models.models import AppSettings


class ConfigStore:
    """Thread-safe holder of the API base URL."""

    def __init__(self, api_url: str) -> None:
        """Initialize the store.

        Args:
            api_url: Initial base URL of the remote API
        """
        self._lock = threading.Lock()
        self._settings = AppSettings(api_url=api_url)

    def read(self) -> str:
        """Return the current base URL."""
        with self._lock:
            return self._settings.api_url

    def write(self, new_url: str) -> None:
        """Replace the base URL.

        The value is stored as given. Well-formedness is not checked.
        """
        with self._lock:
            self._settings = AppSettings(api_url=new_url)

    def snapshot(self) -> AppSettings:
        """Return a copy of the current settings."""
        with self._lock:
            return self._settings.model_copy()
