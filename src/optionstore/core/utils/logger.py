# optionstore/core/utils/logger.py

"""
Logging configuration and utilities for optionstore.

This module provides the package-wide logger and a small set of helpers
for consistent log messages across the store, whitelist and coercion code.

Key Features:
- Global logger instance with lazy initialization
- Defaults taken from ``OPTIONSTORE_*`` settings
- Standardized ``[MODULE] message | Context: ...`` formatting
- Optional file output next to the console handler
"""

import logging
import sys

from optionstore.core.utils.config import OptionStoreSettings, get_settings

LOGGER_NAME = "optionstore"

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for optionstore.

    Any argument left as ``None`` falls back to the value from the
    environment settings (see ``optionstore.core.utils.config``).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional). If provided, logs will be
                 written to both console and file.
        format_string: Custom log format string (optional).

    Returns:
        Configured logger instance

    Note:
        Calling this again replaces the handlers of the existing logger
        rather than stacking new ones. Malformed settings or an unwritable
        log file fall back to console-only logging at the default level,
        with a notice on stderr, so logging never changes what callers see.
    """
    global _logger

    try:
        settings = get_settings()
    except ValueError as exc:
        _notice(f"ignoring logging settings: {exc}")
        settings = OptionStoreSettings()
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file
    numeric_level = getattr(logging, level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(format_string or settings.log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as exc:
            _notice(f"cannot open log file {log_file!r}: {exc}")
        else:
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    _logger = logger
    return logger


def _notice(message: str) -> None:
    sys.stderr.write(f"optionstore: {message}\n")


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it will be set up
    with the configured defaults.
    """
    if _logger is None:
        return setup_logging()
    return _logger


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    _logger = None


def _format(module: str, message: str, context: str) -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    Args:
        module: Name of the module where the error occurred
        error: Error message describing what went wrong
        context: Additional context information (optional)
        exception: Exception object to include stack trace (optional)
    """
    logger = get_logger()
    message = _format(module, error, context)
    if exception:
        logger.error(message, exc_info=exception)
    else:
        logger.error(message)
    for handler in logger.handlers:
        handler.flush()


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))
