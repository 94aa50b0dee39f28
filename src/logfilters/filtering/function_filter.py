"""
Custom function-based log filtering
"""

import logging
from typing import Callable

from ..event import LogEvent
from .base import Filter, FilterResult

logger = logging.getLogger(__name__)


class FunctionFilter(Filter):
    """Delegate the decision to a caller-supplied function"""

    def __init__(self, function: Callable[[LogEvent], FilterResult], name: str = "function"):
        super().__init__()
        self.function = function
        self.name = name

    def decide(self, event: LogEvent) -> FilterResult:
        try:
            result = self.function(event)
        except Exception:
            # No opinion on error, later filters still decide
            logger.exception("%s filter raised, treating as neutral", self.name)
            return FilterResult.NEUTRAL

        if not isinstance(result, FilterResult):
            logger.warning(
                "%s filter returned %r instead of a FilterResult, treating as neutral",
                self.name,
                result,
            )
            return FilterResult.NEUTRAL
        return result

    def __repr__(self) -> str:
        return f"FunctionFilter(name={self.name!r})"
