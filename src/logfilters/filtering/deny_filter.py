"""
Catch-all filter rejecting every event
"""

from typing import Optional

from ..event import LogEvent
from .base import Filter, FilterResult
from .properties import Properties


class DenyAllFilter(Filter):
    """Deny every event; place last to reject whatever was not accepted"""

    def decide(self, event: LogEvent) -> FilterResult:
        return FilterResult.DENY

    @classmethod
    def from_properties(cls, properties: Optional[Properties] = None) -> "DenyAllFilter":
        return cls()
