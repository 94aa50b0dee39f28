"""
Configuration for the filter chain
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .base import Filter
from .context_filter import MDCMatchFilter, NDCMatchFilter
from .deny_filter import DenyAllFilter
from .level_filter import LogLevelMatchFilter, LogLevelRangeFilter
from .properties import Properties, get_property_subset
from .string_filter import StringMatchFilter

logger = logging.getLogger(__name__)

_FILTER_KINDS: Dict[str, Callable[[Properties], Filter]] = {
    "DenyAllFilter": DenyAllFilter.from_properties,
    "LogLevelMatchFilter": LogLevelMatchFilter.from_properties,
    "LogLevelRangeFilter": LogLevelRangeFilter.from_properties,
    "StringMatchFilter": StringMatchFilter.from_properties,
    "NDCMatchFilter": NDCMatchFilter.from_properties,
    "MDCMatchFilter": MDCMatchFilter.from_properties,
}


def create_filter(kind: str, properties: Properties) -> Filter:
    """Create one of the known filter kinds from its properties"""
    # Accept qualified names such as "spi::LogLevelMatchFilter"
    name = kind.strip().replace("::", ".").rsplit(".", 1)[-1]
    if not name.endswith("Filter"):
        name += "Filter"

    factory = _FILTER_KINDS.get(name)
    if factory is None:
        raise ValueError(f"Unknown filter kind: {kind}")
    return factory(properties)


@dataclass
class FilterConfig:
    """Configuration for the filter chain"""

    enabled: bool = True
    filters: List[Filter] = field(default_factory=list)
    collect_metrics: bool = True
    _head: Optional[Filter] = field(default=None, init=False, repr=False, compare=False)
    _built: bool = field(default=False, init=False, repr=False, compare=False)

    def build_chain(self) -> Optional[Filter]:
        """Link the configured filters in order and return the chain head"""
        if not self._built:
            nodes = []
            for filter_obj in self.filters:
                if filter_obj.next is not None:
                    raise ValueError(
                        f"{type(filter_obj).__name__} is already linked into a chain"
                    )
                # Link copies so the same filter can sit in several configs
                nodes.append(copy.copy(filter_obj))
            self._head = Filter.chain(*nodes)
            self._built = True
            logger.debug("Built filter chain: %s", self.filters)
        return self._head

    @classmethod
    def from_properties(
        cls, properties: Properties, prefix: str = "filters"
    ) -> "FilterConfig":
        """
        Build a configuration from numbered filter properties.

        Example:
            filters.1=LogLevelRange
            filters.1.LogLevelMin=WARN
            filters.2=DenyAll
        """
        subset = get_property_subset(properties, prefix + ".")
        indices = sorted((key for key in subset if key.isdecimal()), key=int)

        filters = [
            create_filter(subset[index], get_property_subset(subset, f"{index}."))
            for index in indices
        ]
        return cls(enabled=True, filters=filters)

    @classmethod
    def create_allowlist_config(cls, *filters: Filter) -> "FilterConfig":
        """Create a configuration that denies anything the filters do not accept"""
        return cls(enabled=True, filters=[*filters, DenyAllFilter()])

    @classmethod
    def create_level_range_config(
        cls, min_level: str = "INFO", max_level: Optional[str] = None
    ) -> "FilterConfig":
        """Create a configuration admitting only a range of levels"""
        return cls(
            enabled=True,
            filters=[LogLevelRangeFilter(min_level, max_level, accept_on_match=False)],
            collect_metrics=False,
        )
