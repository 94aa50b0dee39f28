"""
Base classes for the filter chain
"""

import enum
import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from ..event import LogEvent

logger = logging.getLogger(__name__)


class FilterResult(enum.Enum):
    """Outcome of a single filter decision"""

    DENY = "deny"
    NEUTRAL = "neutral"
    ACCEPT = "accept"


class Filter(ABC):
    """
    Abstract base class for chainable log filters.

    Every filter owns an optional link to the next filter. Configuration is
    set at construction and never changed by ``decide``.
    """

    def __init__(self) -> None:
        self.next: Optional["Filter"] = None

    @abstractmethod
    def decide(self, event: LogEvent) -> FilterResult:
        """Decide on the event: ACCEPT, DENY or NEUTRAL"""
        pass

    def append_filter(self, filter_obj: Optional["Filter"]) -> None:
        """Link filter_obj after the current tail of this chain"""
        if filter_obj is None:
            logger.warning("Ignoring attempt to append None to filter chain")
            return

        tail = self
        linked = set()
        for node in self:
            linked.add(id(node))
            tail = node

        # Neither filter_obj nor anything after it may already be linked here
        if any(id(node) in linked for node in filter_obj):
            raise ValueError(
                f"Appending {type(filter_obj).__name__} would create a cycle"
            )

        tail.next = filter_obj

    def __iter__(self) -> Iterator["Filter"]:
        node: Optional[Filter] = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @staticmethod
    def chain(*filters: "Filter") -> Optional["Filter"]:
        """Link the given filters in order and return the head"""
        if not filters:
            return None
        head = filters[0]
        for filter_obj in filters[1:]:
            head.append_filter(filter_obj)
        return head


def evaluate_chain(head: Optional[Filter], event: LogEvent) -> FilterResult:
    """
    Walk the chain and return the first non-neutral decision.

    An empty chain, or one where every filter stays neutral, accepts.
    """
    node = head
    while node is not None:
        result = node.decide(event)
        if result is not FilterResult.NEUTRAL:
            return result
        node = node.next

    return FilterResult.ACCEPT
