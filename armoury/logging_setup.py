"""
Logging configuration for the rebalancer CLI and API.

Batch runs log one summary line at INFO and a line per weapon at DEBUG,
so ``--debug`` is the way to see why a given weapon was skipped.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from armoury.constants import APP_DIR_NAME

LOG_FILE_NAME = "rebalancer.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def get_log_file(log_dir: Optional[Path] = None) -> Path:
    """Path of the rebalancer log, ~/.animated_armoury/rebalancer.log by default."""
    return (log_dir or Path.home() / APP_DIR_NAME) / LOG_FILE_NAME


def _make_handler(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level)
    return handler


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> Path:
    """
    Route all armoury, api and uvicorn logging to a rotating file and stderr.

    Safe to call more than once: handlers from a previous call are replaced.

    Args:
        debug: Log per-weapon outcomes and classifier rule hits
        log_dir: Directory for the log file (defaults to the app directory)

    Returns:
        Path of the log file
    """
    log_file = get_log_file(log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    root_logger.addHandler(_make_handler(
        RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        ),
        FILE_FORMAT,
        level,
    ))
    root_logger.addHandler(_make_handler(logging.StreamHandler(), CONSOLE_FORMAT, level))

    root_logger.info(f"Logging to {log_file} (debug={debug})")
    return log_file
