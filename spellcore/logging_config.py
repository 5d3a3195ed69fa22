"""Logging configuration for the server and the CLI."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from spellcore.config import settings

# Dictionary builds run on a worker thread, so the thread name is part of every line
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] "
    "%(filename)s:%(lineno)d - %(message)s"
)

NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite")


def setup_logging(level: str | None = None, stream=sys.stdout) -> None:
    """Configure the root logger.

    Args:
        level: Level name overriding settings.log_level (the CLI passes DEBUG
            for --verbose)
        stream: Stream for the console handler; the CLI logs to stderr so
            that command output stays clean
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level or settings.log_level))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if settings.log_file_enabled:
        log_path = settings.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
