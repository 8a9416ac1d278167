"""
Logging setup for the wordtrie command line.

Library modules only create loggers:
    import logging
    logger = logging.getLogger(__name__)

Handlers are attached once, by ``setup_logging``, from the CLI.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from wordtrie.config.settings import LoggingSettings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_dir: Path, settings: LoggingSettings) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        filename=log_dir / settings.log_file,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )


def setup_logging(
    log_dir: Path | None = None,
    settings: Optional[LoggingSettings] = None,
) -> None:
    """
    Attach console and rotating-file handlers to the ``wordtrie`` logger.

    Args:
        log_dir: Directory for the log file. If None, or if it cannot be
            created, only the console handler is installed.
        settings: Level, file name and rotation limits.
    """
    settings = settings or LoggingSettings()
    package_logger = logging.getLogger("wordtrie")
    package_logger.setLevel(settings.level)

    # Already configured
    if package_logger.handlers:
        return

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    # stdout carries command output
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_dir is not None:
        try:
            handlers.append(_file_handler(log_dir, settings))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("File logging disabled (%s): %s", log_dir, file_error)
