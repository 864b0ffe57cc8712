"""Logging configuration and utilities."""

import logging
import sys
from pathlib import Path

from kinect_measurements.core.config import get_settings


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure library-wide logging.

    Arguments left as None are taken from the ``LOG_`` settings section.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
    """
    settings = get_settings().logging
    level = level or settings.level
    log_file = log_file or settings.file

    log_level = getattr(logging, level.upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Configure package logger
    package_logger = logging.getLogger("kinect_measurements")
    package_logger.setLevel(log_level)

    # Replace handlers from any earlier call
    package_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger under the kinect_measurements namespace
    """
    # Ensure name is under kinect_measurements namespace
    if not name.startswith("kinect_measurements"):
        name = f"kinect_measurements.{name}"

    return logging.getLogger(name)
