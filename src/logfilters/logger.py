import logging
import sys
from typing import Any, Dict, Optional

from .config import LoggerConfig, get_default_config
from .filtering import ChainFilter, FilterEngine
from .levels import level_from_string

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Filter engine cache, one entry per FilterConfig object until cleared.
# Each engine holds its config, so a cached id is never reused.
_filter_engines: Dict[int, FilterEngine] = {}


def clear_filter_engines() -> None:
    """Drop all cached engines; loggers already configured keep theirs"""
    _filter_engines.clear()


def _get_or_create_engine(config: LoggerConfig) -> Optional[FilterEngine]:
    """Get the engine for a configuration, creating it on first use"""
    if not (config.filter_config and config.filter_config.enabled):
        return None

    filter_id = id(config.filter_config)
    if filter_id not in _filter_engines:
        _filter_engines[filter_id] = FilterEngine(config.filter_config)
    return _filter_engines[filter_id]


def _add_console_handler(logger: logging.Logger) -> None:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(console_handler)


def get_logger(name: str, config: Optional[LoggerConfig] = None) -> logging.Logger:
    """Create a logger whose records pass through the configured filter chain"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        config = config or get_default_config()
        level = level_from_string(config.log_level)
        logger.setLevel(level if level is not None else logging.INFO)

        _add_console_handler(logger)

        engine = _get_or_create_engine(config)
        if engine is not None:
            logger.addFilter(ChainFilter(engine))

        logger.propagate = True

    return logger


def get_filter_metrics(
    config: Optional[LoggerConfig] = None,
) -> Optional[Dict[str, Any]]:
    """Get filtering metrics for the given configuration"""
    config = config or get_default_config()

    if not config.filter_config or not config.filter_config.enabled:
        return None

    filter_id = id(config.filter_config)
    if filter_id in _filter_engines:
        return _filter_engines[filter_id].get_metrics()

    return None


def reset_filter_metrics(config: Optional[LoggerConfig] = None) -> None:
    """Reset filtering metrics for the given configuration"""
    config = config or get_default_config()

    if not config.filter_config or not config.filter_config.enabled:
        return

    filter_id = id(config.filter_config)
    if filter_id in _filter_engines:
        _filter_engines[filter_id].reset_metrics()
