"""Response classification.

Every endpoint operation funnels its response through classify(): non-2xx
statuses become ServerError, bodies that do not match the expected shape
become DecodeError carrying the raw body.
"""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from services.transport import RawResponse
from utils.exceptions import DecodeError, ServerError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def is_success(status: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status <= 299


def classify(response: RawResponse, shape: type[T] | Any) -> T:
    """Decode a response or raise a classified error.

    Args:
        response: Raw transport response
        shape: Type the body must validate against (pydantic model,
            list[...] alias, JsonValue, ...)

    Returns:
        Decoded value

    Raises:
        ServerError: Status outside 200-299
        DecodeError: Body is not valid JSON or does not match shape
    """
    if not is_success(response.status):
        raise ServerError(response.status, url=response.url)

    try:
        return _adapter(shape).validate_json(response.text)
    except ValidationError as e:
        raise DecodeError(_summarize(e), raw_body=response.text, url=response.url) from e


def _summarize(error: ValidationError) -> str:
    """One-line description of the first validation problems."""
    parts = []
    for item in error.errors()[:3]:
        location = ".".join(str(part) for part in item["loc"]) or "<body>"
        parts.append(f"{location}: {item['msg']}")
    if error.error_count() > 3:
        parts.append(f"... {error.error_count() - 3} more")
    return "; ".join(parts)
