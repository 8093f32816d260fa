"""
Logging Configuration Module.

This module provides centralized logging configuration for the Ranger provider.
The host launches the provider as a subprocess and captures its stderr, so the
console handler is the primary sink; a file handler can be enabled for local
debugging.

Features:
- Configurable log levels per module
- Console and optional file logging
- Simple, detailed and JSON line formats
- Masking helper for secrets (passwords) that end up in log fields
"""

import logging
from pathlib import Path
from typing import Optional

from ranger_provider.core.config import Settings

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FILE_NAME = "ranger_provider.log"

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "ranger_provider": "INFO",
    "ranger_provider.provider": "DEBUG",
    "ranger_provider.ranger_api": "DEBUG",
    # Third-party libraries (reduce noise)
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def _format_string(fmt: str) -> str:
    if fmt == "json":
        return JSON_FORMAT
    if fmt == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Configure logging for the provider process.

    Args:
        log_level: Override the configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the configured format (simple, detailed, json)
        enable_file: Override whether file logging is enabled
        settings: Settings to read defaults from; loaded from the environment when omitted
    """
    cfg = (settings or Settings()).logging
    level = (log_level or cfg.level).upper()
    fmt = log_format or cfg.format
    file_enabled = cfg.enable_file_logging if enable_file is None else enable_file

    formatter = logging.Formatter(_format_string(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_enabled:
        log_dir = Path(cfg.file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info("Logging configured: level=%s, format=%s, file_logging=%s", level, fmt, file_enabled)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


def mask_secret(value: Optional[str]) -> str:
    """Render a secret as asterisks of the same length for log output."""
    if not value:
        return ""
    return "*" * len(value)
