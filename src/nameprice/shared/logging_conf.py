"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for applications
embedding the price model. It sets up consistent formatting, log levels and
output handlers so that warnings from rate validation and debug traces from
conversions and premium calculations land in one place.

Files that USE this module:
- Host applications (setup_logging at startup)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- nameprice.config.settings (default logging options)
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler

from nameprice.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
) -> None:
    """
    Configure application-wide logging settings.

    Can output to stdout, a file, or both. File logging rotates. Arguments
    left as None fall back to the values in settings.

    Args:
        level: Logging level name or number (default: settings.log_level)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is named nameprice.log)
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup log files to keep
    """
    level = level if level is not None else settings.log_level
    log_file = log_file if log_file is not None else settings.log_file
    log_dir = log_dir if log_dir is not None else settings.log_dir
    max_bytes = max_bytes if max_bytes is not None else settings.log_max_bytes
    backup_count = backup_count if backup_count is not None else settings.log_backup_count

    handlers = []

    # Stdout can be disabled when a supervisor already captures output
    log_to_stdout = os.environ.get("NAMEPRICE_LOG_STDOUT", str(settings.log_stdout)).lower() == "true"

    if log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(stdout_handler)

    log_file_path = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "nameprice.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    if not handlers:
        handlers = [logging.StreamHandler(sys.stdout)]

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path is not None:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.info("Logging configured: stdout, level=%s", level)
