"""
Adapter attaching a filter chain to stdlib loggers and handlers
"""

import logging
from typing import Optional, Union

from ..event import LogEvent
from .base import Filter, FilterResult, evaluate_chain
from .engine import FilterEngine


class ChainFilter(logging.Filter):
    """
    logging.Filter that lets a record through only if the chain accepts it.

    Example:
        handler.addFilter(ChainFilter(Filter.chain(
            StringMatchFilter("heartbeat", accept_on_match=False),
            LogLevelRangeFilter("INFO"),
        )))
    """

    def __init__(self, chain: Union[Filter, FilterEngine, None], name: str = ""):
        super().__init__(name)
        self.chain = chain

    def decide(self, event: LogEvent) -> FilterResult:
        if isinstance(self.chain, FilterEngine):
            return self.chain.decide(event)
        return evaluate_chain(self.chain, event)

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        return self.decide(LogEvent.from_record(record)) is FilterResult.ACCEPT


def attach_chain(
    target: Union[logging.Logger, logging.Handler],
    chain: Union[Filter, FilterEngine, None],
) -> Optional[ChainFilter]:
    """Attach a chain to a logger or handler, returning the installed filter"""
    if chain is None:
        return None
    chain_filter = ChainFilter(chain)
    target.addFilter(chain_filter)
    return chain_filter
