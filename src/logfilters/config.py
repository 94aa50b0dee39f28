import os
from dataclasses import dataclass
from typing import Dict, Optional

from .filtering import FilterConfig

ENV_PREFIX = "LOGFILTERS_"
_FILTERS_PREFIX = ENV_PREFIX + "FILTERS_"


@dataclass
class LoggerConfig:
    """Configuration for filtered loggers"""

    log_level: str = "INFO"
    filter_config: Optional[FilterConfig] = None

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def _filter_properties_from_env(cls) -> Dict[str, str]:
        """Translate LOGFILTERS_FILTERS_<n>[_<Key>] variables to properties"""
        properties = {}
        for name, value in os.environ.items():
            if not name.startswith(_FILTERS_PREFIX):
                continue
            index, _, key = name[len(_FILTERS_PREFIX):].partition("_")
            if not index.isdigit():
                continue
            if key:
                properties[f"filters.{index}.{key}"] = value
            else:
                properties[f"filters.{index}"] = value
        return properties

    @classmethod
    def _create_filter_config_from_env(cls) -> Optional[FilterConfig]:
        """Create filter configuration from environment variables"""
        if not cls._parse_bool_env(ENV_PREFIX + "FILTERING"):
            return None

        filter_config = FilterConfig.from_properties(cls._filter_properties_from_env())
        filter_config.collect_metrics = cls._parse_bool_env(
            ENV_PREFIX + "COLLECT_METRICS", "true"
        )
        return filter_config

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """Create configuration from environment variables"""
        return cls(
            log_level=os.getenv(ENV_PREFIX + "LEVEL", "INFO"),
            filter_config=cls._create_filter_config_from_env(),
        )


_default_config: Optional[LoggerConfig] = None


def get_default_config() -> LoggerConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = LoggerConfig.from_env()
    return _default_config


def set_default_config(config: LoggerConfig) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
