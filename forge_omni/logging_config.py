"""
Logging Configuration Module.

This module provides logging configuration for applications embedding
forge_omni. Importing the package never configures logging; call
`setup_logging()` from the host application's entry point.

Features:
- Configurable log level, defaulting to FORGE_OMNI_LOG_LEVEL from settings
- Simple, detailed and JSON-like formats
- Module-specific log levels that keep httpx quiet
"""

import logging
from typing import Optional

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "forge_omni": "DEBUG",
    "forge_omni.client": "DEBUG",
    "forge_omni.service": "INFO",
    # Third-party libraries (reduce noise)
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "asyncio": "WARNING",
}


def _default_log_level() -> str:
    """Read the log level from settings.

    Deferred so that importing this module does not read the environment.
    """
    from forge_omni.config import Settings

    return Settings().log_level


def setup_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure console logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
    """
    level = (log_level or _default_log_level()).upper()
    fmt = log_format or "detailed"
    if fmt not in FORMATS:
        raise ValueError(f"Unknown log format {fmt!r}; expected one of {sorted(FORMATS)}")

    formatter = logging.Formatter(FORMATS[fmt], datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info("Logging configured: level=%s, format=%s", level, fmt)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
