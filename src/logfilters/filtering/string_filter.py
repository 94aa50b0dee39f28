"""
Message substring filtering
"""

from ..event import LogEvent
from .base import Filter, FilterResult
from .properties import Properties, get_bool, get_property


class StringMatchFilter(Filter):
    """Accept or deny events whose message contains string_to_match"""

    def __init__(self, string_to_match: str = "", accept_on_match: bool = True):
        super().__init__()
        self.string_to_match = string_to_match or ""
        self.accept_on_match = accept_on_match

    def decide(self, event: LogEvent) -> FilterResult:
        message = event.message
        # An empty pattern would match everything
        if not self.string_to_match or not message:
            return FilterResult.NEUTRAL

        if self.string_to_match not in message:
            return FilterResult.NEUTRAL
        return FilterResult.ACCEPT if self.accept_on_match else FilterResult.DENY

    @classmethod
    def from_properties(cls, properties: Properties) -> "StringMatchFilter":
        return cls(
            string_to_match=get_property(properties, "StringToMatch"),
            accept_on_match=get_bool(properties, "AcceptOnMatch", True),
        )

    def __repr__(self) -> str:
        return (
            f"StringMatchFilter(string_to_match={self.string_to_match!r}, "
            f"accept_on_match={self.accept_on_match})"
        )
