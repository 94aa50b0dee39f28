"""
Log level registry used when binding filters from configuration
"""

import logging
import threading
from typing import Dict, Optional, Union

TRACE = 5
DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR
FATAL = logging.CRITICAL
OFF = 60

NOT_SET_LOG_LEVEL = None
"""Marker for a level field that was never configured"""

logger = logging.getLogger(__name__)

_lock = threading.Lock()

_name_to_level: Dict[str, int] = {
    "TRACE": TRACE,
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARN": WARN,
    "WARNING": WARN,
    "ERROR": ERROR,
    "FATAL": FATAL,
    "CRITICAL": FATAL,
    "OFF": OFF,
}

_level_to_name: Dict[int, str] = {
    TRACE: "TRACE",
    DEBUG: "DEBUG",
    INFO: "INFO",
    WARN: "WARN",
    ERROR: "ERROR",
    FATAL: "FATAL",
    OFF: "OFF",
}


def level_from_string(name: Optional[str]) -> Optional[int]:
    """
    Translate a level name into its numeric value.

    Empty or missing names mean the level is not set. Unknown names are
    reported and also treated as not set.
    """
    if not name or not name.strip():
        return NOT_SET_LOG_LEVEL

    level = _name_to_level.get(name.strip().upper())
    if level is None:
        logger.warning("Unknown log level name %r, treating as not set", name)
        return NOT_SET_LOG_LEVEL
    return level


def get_level_name(level: Optional[int]) -> str:
    """Return the registered name for a level, or ``Level N`` if unknown"""
    if level is NOT_SET_LOG_LEVEL:
        return "NOTSET"
    name = _level_to_name.get(level)
    if name is not None:
        return name
    return f"Level {level}"


def normalize_level(level: Union[int, str, None]) -> Optional[int]:
    """Accept either a numeric level or a level name"""
    if level is None or isinstance(level, int):
        return level
    if isinstance(level, str):
        return level_from_string(level)
    raise TypeError(f"Level not an integer or a level name: {level!r}")


def add_level_name(level: int, level_name: str) -> None:
    """Register an additional level name"""
    if not isinstance(level, int):
        raise TypeError(f"Expected integer level but got {type(level).__name__}")
    if not isinstance(level_name, str) or not level_name:
        raise TypeError("Level name must be a non-empty string")

    with _lock:
        _level_to_name[level] = level_name.upper()
        _name_to_level[level_name.upper()] = level
