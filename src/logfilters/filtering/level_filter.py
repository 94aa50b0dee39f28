"""
Level-based log filtering
"""

from typing import Optional, Union

from ..event import LogEvent
from ..levels import get_level_name, normalize_level
from .base import Filter, FilterResult
from .properties import Properties, get_bool, get_level


class LogLevelMatchFilter(Filter):
    """
    Match events of exactly one level.

    A matching event is accepted (or denied when ``accept_on_match`` is
    False). Every other event is left to later filters.
    """

    def __init__(
        self,
        log_level_to_match: Union[int, str, None] = None,
        accept_on_match: bool = True,
    ):
        super().__init__()
        self.log_level_to_match = normalize_level(log_level_to_match)
        self.accept_on_match = accept_on_match

    def decide(self, event: LogEvent) -> FilterResult:
        if self.log_level_to_match is None:
            return FilterResult.NEUTRAL

        if event.level == self.log_level_to_match:
            return FilterResult.ACCEPT if self.accept_on_match else FilterResult.DENY
        return FilterResult.NEUTRAL

    @classmethod
    def from_properties(cls, properties: Properties) -> "LogLevelMatchFilter":
        return cls(
            log_level_to_match=get_level(properties, "LogLevelToMatch"),
            accept_on_match=get_bool(properties, "AcceptOnMatch", True),
        )

    def __repr__(self) -> str:
        return (
            f"LogLevelMatchFilter(level={get_level_name(self.log_level_to_match)}, "
            f"accept_on_match={self.accept_on_match})"
        )


class LogLevelRangeFilter(Filter):
    """
    Deny events outside [log_level_min, log_level_max].

    In-range events are accepted when ``accept_on_match`` is True and left
    neutral otherwise. An unset bound does not constrain its side.
    """

    def __init__(
        self,
        log_level_min: Union[int, str, None] = None,
        log_level_max: Union[int, str, None] = None,
        accept_on_match: bool = True,
    ):
        super().__init__()
        self.log_level_min = normalize_level(log_level_min)
        self.log_level_max = normalize_level(log_level_max)
        self.accept_on_match = accept_on_match

    def decide(self, event: LogEvent) -> FilterResult:
        if self.log_level_min is not None and event.level < self.log_level_min:
            return FilterResult.DENY

        if self.log_level_max is not None and event.level > self.log_level_max:
            return FilterResult.DENY

        return FilterResult.ACCEPT if self.accept_on_match else FilterResult.NEUTRAL

    @classmethod
    def from_properties(cls, properties: Properties) -> "LogLevelRangeFilter":
        return cls(
            log_level_min=get_level(properties, "LogLevelMin"),
            log_level_max=get_level(properties, "LogLevelMax"),
            accept_on_match=get_bool(properties, "AcceptOnMatch", True),
        )

    def __repr__(self) -> str:
        return (
            f"LogLevelRangeFilter(min={get_level_name(self.log_level_min)}, "
            f"max={get_level_name(self.log_level_max)}, "
            f"accept_on_match={self.accept_on_match})"
        )
