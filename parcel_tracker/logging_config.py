# parcel_tracker/logging_config.py
import logging
import sys
from pathlib import Path

from .config import settings


def setup_logging(log_level: str = None, log_file: str = None):
    """
    Configure logging for the tracker.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        log_file: optional path of a log file

    Both default to the TRACKER_LOG_LEVEL / TRACKER_LOG_FILE settings.
    """
    log_level = (log_level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt=date_format
    ))
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("logging configured: level=%s", log_level)
    if log_file:
        logger.info("writing logs to %s", log_file)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)
