"""
Async context management for diagnostic contexts

Provides async-aware context managers on top of the contextvars based
NDC/MDC stores, so every asyncio task sees its own diagnostic state.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from .context import (
    get_mdc,
    get_mdc_context,
    get_ndc,
    mdc_values,
    ndc_stack,
)


@asynccontextmanager
async def async_diagnostic_context(
    ndc: Optional[str] = None, **mdc: str
) -> AsyncGenerator[None, None]:
    """
    Async context manager for task-scoped diagnostic context.

    Args:
        ndc: Optional message pushed onto the NDC stack
        **mdc: MDC values added for the duration of the block

    Example:
        async with async_diagnostic_context("checkout", order_id="42"):
            await handle_order()
    """
    ndc_token = None
    mdc_token = None
    if ndc is not None:
        ndc_token = ndc_stack.set(ndc_stack.get(()) + (ndc,))
    if mdc:
        mdc_token = mdc_values.set({**mdc_values.get({}), **mdc})

    try:
        yield
    finally:
        if mdc_token is not None:
            mdc_values.reset(mdc_token)
        if ndc_token is not None:
            ndc_stack.reset(ndc_token)


async def aget_ndc() -> str:
    """Async version of get_ndc for consistency"""
    return get_ndc()


async def aget_mdc(key: str) -> str:
    """Async version of get_mdc for consistency"""
    return get_mdc(key)


async def aget_mdc_context() -> dict:
    """Async version of get_mdc_context for consistency"""
    return get_mdc_context()
