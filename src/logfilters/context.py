from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Dict, Optional, Tuple

ndc_stack: ContextVar[Tuple[str, ...]] = ContextVar("ndc_stack", default=())
mdc_values: ContextVar[Dict[str, str]] = ContextVar("mdc_values", default={})


def get_ndc() -> str:
    """Get the full nested diagnostic context for the current context"""
    return " ".join(ndc_stack.get(()))


def get_ndc_depth() -> int:
    """Get the number of messages on the NDC stack"""
    return len(ndc_stack.get(()))


def peek_ndc() -> str:
    """Get the innermost NDC message without removing it"""
    stack = ndc_stack.get(())
    return stack[-1] if stack else ""


def push_ndc(message: str) -> None:
    """Push a message onto the NDC stack for the current context"""
    ndc_stack.set(ndc_stack.get(()) + (message,))


def pop_ndc() -> str:
    """Remove and return the innermost NDC message"""
    stack = ndc_stack.get(())
    if not stack:
        return ""
    ndc_stack.set(stack[:-1])
    return stack[-1]


def set_max_ndc_depth(max_depth: int) -> None:
    """Discard the innermost messages beyond max_depth"""
    stack = ndc_stack.get(())
    if len(stack) > max_depth:
        ndc_stack.set(stack[: max(0, max_depth)])


def clear_ndc() -> None:
    """Clear the NDC stack for the current context"""
    ndc_stack.set(())


def get_mdc(key: str) -> str:
    """Get a mapped diagnostic value, empty string if absent"""
    return mdc_values.get({}).get(key, "")


def put_mdc(key: str, value: str) -> None:
    """Set a mapped diagnostic value for the current context"""
    updated = dict(mdc_values.get({}))
    updated[key] = value
    mdc_values.set(updated)


def remove_mdc(key: str) -> None:
    """Remove a mapped diagnostic value if present"""
    current = mdc_values.get({})
    if key in current:
        updated = dict(current)
        del updated[key]
        mdc_values.set(updated)


def get_mdc_context() -> Dict[str, str]:
    """Get a copy of the whole MDC for the current context"""
    return dict(mdc_values.get({}))


def clear_mdc() -> None:
    """Clear the MDC for the current context"""
    mdc_values.set({})


@contextmanager
def ndc_context(message: str) -> Generator[str, None, None]:
    """Context manager pushing an NDC message for the duration of a block"""
    token = ndc_stack.set(ndc_stack.get(()) + (message,))
    try:
        yield get_ndc()
    finally:
        ndc_stack.reset(token)


@contextmanager
def mdc_context(
    values: Optional[Dict[str, str]] = None, **fields: str
) -> Generator[Dict[str, str], None, None]:
    """Context manager adding MDC values for the duration of a block"""
    updated = dict(mdc_values.get({}))
    updated.update(values or {})
    updated.update(fields)
    token = mdc_values.set(updated)
    try:
        yield dict(updated)
    finally:
        mdc_values.reset(token)
