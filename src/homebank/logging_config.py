"""
Logging configuration for the HomeBank client.

Writes rotating logs to <HOMEBANK_LOG_DIR>/homebank.log and mirrors
warnings and errors to the console.
"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import Settings, get_settings

LOG_FILE_NAME = "homebank.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "homebank"


def setup_logging(settings: Optional[Settings] = None) -> Path:
    """
    Configure the ``homebank`` logger tree.

    Child loggers (``homebank.transport``, ``homebank.reconciler``, ...) propagate
    into it. Safe to call again: previous handlers are replaced. Returns the
    path of the log file.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    rotating = RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    rotating.setLevel(level)
    rotating.setFormatter(formatter)
    package_logger.addHandler(rotating)

    # Console only surfaces warnings and errors
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    package_logger.info("Logging configured. Log file: %s", log_file)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
