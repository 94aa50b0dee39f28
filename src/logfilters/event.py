"""
Log event as seen by the filter chain
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from . import context


@dataclass(frozen=True)
class LogEvent:
    """
    Read-only view of a single log event.

    ``ndc`` and ``mdc`` pin a diagnostic context snapshot. When left as
    None, lookups read the ambient context of the caller at lookup time.
    """

    logger_name: str
    level: int
    message: str = ""
    ndc: Optional[str] = None
    mdc: Optional[Mapping[str, str]] = None

    def get_ndc(self) -> str:
        if self.ndc is not None:
            return self.ndc
        return context.get_ndc()

    def get_mdc(self, key: str) -> str:
        if self.mdc is not None:
            return self.mdc.get(key, "") or ""
        return context.get_mdc(key)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEvent":
        """Build an event from a stdlib LogRecord"""
        ndc = getattr(record, "ndc", None)
        mdc = getattr(record, "mdc", None)
        return cls(
            logger_name=record.name,
            level=record.levelno,
            message=record.getMessage(),
            ndc=ndc if isinstance(ndc, str) else None,
            mdc=mdc if isinstance(mdc, Mapping) else None,
        )
