"""Human-readable rendering of anilibrix errors.

Error classes stay language-neutral; this module owns the wording.
Supported locales: en (default) and ru.
"""

from utils.exceptions import (
    DecodeError,
    ServerError,
    TransportError,
    UnknownCommandError,
)

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "transport": "Network error: {message}",
        "server": "Server returned status {status}",
        "decode": "Failed to parse response: {message}. Response body: {raw_body}",
        "unknown_command": "Unknown command: {name}",
        "invalid_argument": "Invalid argument: {message}",
        "error": "Unexpected error: {message}",
    },
    "ru": {
        "transport": "Ошибка сети: {message}",
        "server": "Сервер вернул статус: {status}",
        "decode": "Ошибка разбора ответа: {message}. Тело ответа: {raw_body}",
        "unknown_command": "Неизвестная команда: {name}",
        "invalid_argument": "Некорректный аргумент: {message}",
        "error": "Непредвиденная ошибка: {message}",
    },
}


def render_error(error: Exception, locale: str = DEFAULT_LOCALE) -> str:
    """Render an error as a message for the UI.

    Args:
        error: Error raised by an operation
        locale: Message catalog to use, unknown locales fall back to en

    Returns:
        Localized, human-readable description
    """
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])

    if isinstance(error, TransportError):
        return catalog["transport"].format(message=error.message)
    if isinstance(error, ServerError):
        return catalog["server"].format(status=error.status)
    if isinstance(error, DecodeError):
        return catalog["decode"].format(message=error.message, raw_body=error.raw_body)
    if isinstance(error, UnknownCommandError):
        return catalog["unknown_command"].format(name=error.name)
    if isinstance(error, (ValueError, TypeError)):
        return catalog["invalid_argument"].format(message=error)
    return catalog["error"].format(message=error)
