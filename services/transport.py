"""Shared HTTP transport for the AniLibria API.

A single requests.Session is created per process so connections are pooled
and default headers are set once. Coroutines run the blocking request on
the transport's own thread pool.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, NamedTuple

import requests

from models.config import DEFAULT_USER_AGENT
from utils.exceptions import TransportError
from utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


class RawResponse(NamedTuple):
    """Unclassified HTTP response.

    Attributes:
        status: HTTP status code
        text: Response body decoded as text
        url: Final request URL (query string included)
    """

    status: int
    text: str
    url: str


class Transport:
    """GET-only HTTP client shared by every endpoint operation."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = 10.0,
        max_workers: int = 4,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            user_agent: Client identifier sent with every request
            timeout: Default timeout in seconds, None disables it
            max_workers: Threads used to run requests concurrently
            session: Session to use instead of a new requests.Session
        """
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({**DEFAULT_HEADERS, "User-Agent": user_agent})
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="anilibrix-http")

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """Execute a blocking GET request.

        Args:
            url: Absolute URL without query string
            params: Query parameters, encoded by requests
            timeout: Per call timeout override in seconds

        Returns:
            RawResponse with status, body text and final URL

        Raises:
            TransportError: If the request fails before a response arrives
        """
        effective_timeout = self.timeout if timeout is None else timeout
        try:
            response = self.session.get(url, params=params, timeout=effective_timeout)
            text = response.text
        except requests.RequestException as e:
            logger.debug(f"GET {url} failed: {e}")
            raise TransportError(str(e), url=url) from e

        logger.debug(f"GET {response.url} -> {response.status_code}")
        return RawResponse(status=response.status_code, text=text, url=response.url)

    async def fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """Execute a GET request without blocking the event loop.

        Cancelling the awaiting task returns control immediately; the worker
        thread finishes the request in the background.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, lambda: self.get(url, params, timeout))

    def close(self) -> None:
        """Release worker threads, then pooled connections.

        Queued requests are dropped. Requests already running finish first so
        no worker uses a closed session.
        """
        self._executor.shutdown(wait=True, cancel_futures=True)
        self.session.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
