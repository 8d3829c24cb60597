"""Environment-driven settings for optionstore."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "OPTIONSTORE_"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_settings: Optional["OptionStoreSettings"] = None


@dataclass(frozen=True)
class OptionStoreSettings:
    """Process-wide settings read from ``OPTIONSTORE_*`` variables."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    log_format: str = DEFAULT_LOG_FORMAT
    thread_safe: bool = False


def _parse_bool(key: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


def _parse_level(key: str, raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"{key} must be one of: {', '.join(sorted(_LOG_LEVELS))}, got {raw!r}"
        )
    return level


def load_settings(use_dotenv: bool = True) -> OptionStoreSettings:
    """
    Build settings from the environment.

    A ``.env`` file in the working directory is loaded first when
    ``use_dotenv`` is set; variables already present in the environment
    win over the file.

    Raises:
        ValueError: If a variable holds a value that cannot be parsed
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    kwargs = {}
    level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        kwargs["log_level"] = _parse_level(f"{ENV_PREFIX}LOG_LEVEL", level)
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        kwargs["log_file"] = log_file
    log_format = os.getenv(f"{ENV_PREFIX}LOG_FORMAT")
    if log_format:
        kwargs["log_format"] = log_format
    thread_safe = os.getenv(f"{ENV_PREFIX}THREAD_SAFE")
    if thread_safe:
        kwargs["thread_safe"] = _parse_bool(f"{ENV_PREFIX}THREAD_SAFE", thread_safe)
    return OptionStoreSettings(**kwargs)


def get_settings() -> OptionStoreSettings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None
