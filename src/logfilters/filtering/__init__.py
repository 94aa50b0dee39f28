"""
Filter chain for accept/deny decisions on log events
"""

from .base import Filter, FilterResult, evaluate_chain
from .config import FilterConfig, create_filter
from .context_filter import MDCMatchFilter, NDCMatchFilter
from .deny_filter import DenyAllFilter
from .engine import FilterEngine
from .function_filter import FunctionFilter
from .handler_filter import ChainFilter, attach_chain
from .level_filter import LogLevelMatchFilter, LogLevelRangeFilter
from .string_filter import StringMatchFilter

__all__ = [
    "FilterResult",
    "Filter",
    "evaluate_chain",
    "DenyAllFilter",
    "LogLevelMatchFilter",
    "LogLevelRangeFilter",
    "StringMatchFilter",
    "FunctionFilter",
    "NDCMatchFilter",
    "MDCMatchFilter",
    "FilterConfig",
    "create_filter",
    "FilterEngine",
    "ChainFilter",
    "attach_chain",
]
