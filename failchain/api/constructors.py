# failchain/api/constructors.py
"""
Error constructors

Every constructor reports the location of ITS caller. Wrappers built on top
of these functions pass additional_stack_skip so the reported location stays
at their own caller.
"""

from __future__ import annotations

from typing import Any, Optional

from failchain.core.errors import ErrWithReason, ExtendedError, capture_stack
from failchain.core.stack import caller, stack_trace_to_string


def new(err: BaseException, additional_stack_skip: int = 0) -> ExtendedError:
    """
    Create an error that captures stack trace and location where it is created
    and keeps the original error.

    Newly created error implements CompositeError, ErrorWithLocation,
    ErrorWithStackTrace, ErrorWrapper and ErrorWithFields.
    """
    return new_with_inner(err, None, additional_stack_skip + 1)


def new_with_inner(
    err: BaseException,
    inner: Optional[BaseException],
    additional_stack_skip: int = 0,
) -> ExtendedError:
    """
    Create an error that captures stack trace and location where it is created,
    keeps the original error and its reason (inner error).

    If err reports a cause of its own, that cause wins over inner.
    """
    return ExtendedError.capture(err, inner, stack_skip=additional_stack_skip + 1)


def new_err_with_reason(message: str, reason: Optional[BaseException]) -> ExtendedError:
    """Create an error with message and reason"""
    return new(ErrWithReason(message, reason), 1)


def news(text: str) -> ExtendedError:
    """Create an error from text"""
    return new(Exception(text), 1)


def newf(format_string: str, *args: Any, **kwargs: Any) -> ExtendedError:
    """
    Create an error from str.format()-style text.

    Without arguments the text is used as is (braces need no escaping).
    """
    text = format_string.format(*args, **kwargs) if args or kwargs else format_string
    return new(Exception(text), 1)


def stack_trace(additional_stack_skip: int = 0) -> str:
    """
    Get current stack trace, starting at the caller.

    additional_stack_skip: how many closest callers to skip
    """
    call = caller(additional_stack_skip + 1)
    return stack_trace_to_string(capture_stack(call))


__all__ = [
    "new",
    "new_with_inner",
    "new_err_with_reason",
    "news",
    "newf",
    "stack_trace",
]
