"""loguru setup for anilibrix.

Modules take a logger from get_logger(__name__). The first call installs
quiet defaults (WARNING on stderr plus a rotating file in the data
directory). Entry points call configure_logging() to choose the console
level; each call replaces the handlers installed by the previous one.
"""

import sys
from pathlib import Path

from loguru import logger as _base_logger

from models.config import get_data_path

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
LOG_FILE_NAME = "anilibrix.log"

# Handler ids owned by configure_logging, None until the first call
_handler_ids: list[int] | None = None


def configure_logging(debug: bool = False, log_dir: Path | None = None) -> None:
    """Install console and file handlers, replacing earlier ones.

    Args:
        debug: Log DEBUG and up to stderr instead of WARNING and up
        log_dir: Directory of the log file, defaults to get_data_path()
    """
    global _handler_ids

    if _handler_ids is None:
        # Drop loguru's default stderr handler once
        _base_logger.remove()
    else:
        for handler_id in _handler_ids:
            _base_logger.remove(handler_id)

    handler_ids = [
        _base_logger.add(sys.stderr, format=CONSOLE_FORMAT, level="DEBUG" if debug else "WARNING"),
    ]

    log_dir = log_dir or get_data_path()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        _base_logger.warning(f"File logging disabled, cannot create {log_dir}: {e}")
    else:
        handler_ids.append(
            _base_logger.add(
                log_dir / LOG_FILE_NAME,
                format=FILE_FORMAT,
                level="DEBUG",
                rotation="10 MB",
                retention=5,
                compression="zip",
            )
        )

    _handler_ids = handler_ids


def get_logger(name: str):
    """Logger bound to a module name, installing defaults on first use."""
    if _handler_ids is None:
        configure_logging()
    return _base_logger.bind(name=name)
