"""
Log Filters

Filter chains deciding whether a log event is accepted or denied, with
level, message, diagnostic context and custom function filters.
"""

__version__ = "0.1.0"

from .async_context import async_diagnostic_context
from .config import LoggerConfig, get_default_config, set_default_config
from .context import (
    clear_mdc,
    clear_ndc,
    get_mdc,
    get_mdc_context,
    get_ndc,
    mdc_context,
    ndc_context,
    pop_ndc,
    push_ndc,
    put_mdc,
    remove_mdc,
)
from .event import LogEvent
from .filtering import (
    ChainFilter,
    DenyAllFilter,
    Filter,
    FilterConfig,
    FilterEngine,
    FilterResult,
    FunctionFilter,
    LogLevelMatchFilter,
    LogLevelRangeFilter,
    MDCMatchFilter,
    NDCMatchFilter,
    StringMatchFilter,
    attach_chain,
    evaluate_chain,
)
from .levels import add_level_name, get_level_name, level_from_string
from .logger import (
    clear_filter_engines,
    get_filter_metrics,
    get_logger,
    reset_filter_metrics,
)

__all__ = [
    # Filters
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
    "FilterEngine",
    "ChainFilter",
    "attach_chain",
    # Events and levels
    "LogEvent",
    "level_from_string",
    "get_level_name",
    "add_level_name",
    # Diagnostic context
    "push_ndc",
    "pop_ndc",
    "get_ndc",
    "clear_ndc",
    "ndc_context",
    "put_mdc",
    "get_mdc",
    "remove_mdc",
    "get_mdc_context",
    "clear_mdc",
    "mdc_context",
    "async_diagnostic_context",
    # Configuration
    "LoggerConfig",
    "get_default_config",
    "set_default_config",
    # Logger
    "get_logger",
    "get_filter_metrics",
    "reset_filter_metrics",
    "clear_filter_engines",
]
