"""
Helpers for binding filter settings from a key-value property set
"""

import logging
from typing import Dict, Mapping, Optional

from ..levels import level_from_string

logger = logging.getLogger(__name__)

Properties = Mapping[str, str]


def get_property(properties: Properties, key: str, default: str = "") -> str:
    """Get a string property, default if absent"""
    value = properties.get(key)
    return default if value is None else str(value)


def parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean value, None if it is not recognizable"""
    text = value.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    try:
        return int(text) != 0
    except ValueError:
        return None


def get_bool(properties: Properties, key: str, default: bool) -> bool:
    """Get a boolean property, keeping the default when absent or malformed"""
    value = properties.get(key)
    if value is None:
        return default

    parsed = parse_bool(str(value))
    if parsed is None:
        logger.warning(
            "Cannot parse %s=%r as boolean, using default %s", key, value, default
        )
        return default
    return parsed


def get_level(properties: Properties, key: str) -> Optional[int]:
    """Get a level property, None when absent or unknown"""
    return level_from_string(properties.get(key))


def get_property_subset(properties: Properties, prefix: str) -> Dict[str, str]:
    """Return the properties under prefix with the prefix stripped"""
    return {
        key[len(prefix):]: value
        for key, value in properties.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }
