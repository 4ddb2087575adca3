"""Logger bootstrap for cmus-notify.

Where: platform/logging/config.py
What: Assemble the package logger from a Rich console handler and an optional rotating file.
Why: The CLI only knows the verbosity and log file after parsing arguments and settings.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from cmus_notify.config.paths import default_log_file

from .handlers import CoverRichHandler


LOGGER_NAME: Final[str] = "cmus_notify"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(level: int) -> logging.Handler:
    handler = CoverRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``cmus_notify`` logger.

    Handlers from a previous call are closed and replaced, so the CLI can call
    this again once it knows the verbosity and the configured log file.

    Args:
        log_file: Rotating log file to add. ``None`` keeps logging console-only.
        console_level: Threshold of the Rich console handler.
        file_level: Threshold of the file handler.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    configured.addHandler(_console_handler(console_level))
    if log_file is not None:
        configured.addHandler(_file_handler(log_file, file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
