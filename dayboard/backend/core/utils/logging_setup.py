"""
Logging Setup Utilities.

Console output goes through Rich; an optional plain-text file receives
everything down to DEBUG so a quiet console still leaves a full trail.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers held at WARNING regardless of the chosen level
QUIET_LOGGERS = ("urllib3", "requests", "httpx", "uvicorn.access", "multipart")


def resolve_level(level: int | str) -> int:
    """Accept ``logging`` constants or names such as ``"debug"``."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | str | None = None,
) -> None:
    """
    Replace the root logger's handlers with a Rich console handler and,
    when ``log_file`` is given, a UTF-8 file handler.

    Args:
        level: Console level, as a constant or a name
        log_file: Optional file path; parent directories are created
    """
    level = resolve_level(level)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = RichHandler(show_time=False, show_path=False, rich_tracebacks=True, markup=False)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_from_config(section: dict[str, Any], verbose: bool = False, debug: bool = False) -> int:
    """
    Apply the ``logging`` section of the configuration.

    ``--debug`` beats ``--verbose``, which beats ``logging.level``.

    Returns:
        The console level in effect
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = resolve_level(section.get("level", "WARNING"))
    setup_logging(level, section.get("file"))
    return level
