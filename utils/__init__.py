"""Utilities and helper functions.

- exceptions: Structured error hierarchy
- messages: Localized rendering of errors
- logging: loguru setup
"""

from utils.exceptions import (
    AniLibrixError,
    DecodeError,
    ServerError,
    TransportError,
    UnknownCommandError,
)
from utils.messages import render_error

__all__ = [
    "AniLibrixError",
    "DecodeError",
    "ServerError",
    "TransportError",
    "UnknownCommandError",
    "render_error",
]
