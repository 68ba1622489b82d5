"""Custom exception hierarchy for anilibrix.

Errors are structured values: each carries a kind and the fields needed to
diagnose it (status code, raw body, URL). Turning them into user-facing text
is done by utils.messages.render_error.
"""


class AniLibrixError(Exception):
    """Base exception for all anilibrix errors."""

    kind = "error"


class TransportError(AniLibrixError):
    """Raised when a request could not be sent or no response arrived."""

    kind = "transport"

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.message = message
        self.url = url


class ServerError(AniLibrixError):
    """Raised when the API answers with a non-success status code."""

    kind = "server"

    def __init__(self, status: int, url: str | None = None):
        super().__init__(f"Server returned status {status}")
        self.status = status
        self.url = url


class DecodeError(AniLibrixError):
    """Raised when a success response does not match the expected shape.

    The raw body is kept unmodified so upstream schema drift can be
    diagnosed without replaying the request.
    """

    kind = "decode"

    def __init__(self, message: str, raw_body: str, url: str | None = None):
        super().__init__(message)
        self.message = message
        self.raw_body = raw_body
        self.url = url


class UnknownCommandError(AniLibrixError):
    """Raised when the command bridge receives an unknown operation name."""

    kind = "unknown_command"

    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name}")
        self.name = name
