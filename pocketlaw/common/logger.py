"""Logging infrastructure for Pocketlaw.

Configures the package logger once at startup with console output and,
when enabled, a rotating log file. Timestamps are ISO 8601. Modules log
through ``logging.getLogger(__name__)`` and inherit this configuration.
"""

import logging
import logging.handlers
import os
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logger(
    name: str = "pocketlaw",
    log_dir: str = "/var/log/pocketlaw",
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    file_logging: bool = False,
    console_logging: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Set up a logger with console and optional file handlers.

    Args:
        name: Logger name, normally the package name
        log_dir: Directory for the log file
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string
        date_format: Custom date format string (ISO 8601 by default)
        file_logging: Enable rotating file output
        console_logging: Enable console output
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level is not a standard level name
    """
    level_upper = level.upper()
    if level_upper not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(VALID_LEVELS)}"
        )

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_upper))

    # Reconfiguring must not stack handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        log_format or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{name}.log"),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name != "pocketlaw" and not name.startswith("pocketlaw."):
        name = f"pocketlaw.{name}"
    return logging.getLogger(name)
