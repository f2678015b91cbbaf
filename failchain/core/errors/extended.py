# failchain/core/errors/extended.py
"""
Extended error: an arbitrary error decorated with the place it was created.

ExtendedError is transparent about the error it wraps:
- str() is the original error's text
- inner_error() prefers the original error's own cause
- original_error() / fields() see through nested wrappers

Location and stack trace always describe where the ExtendedError itself was
built, never where the wrapped error came from.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from failchain.config import get_config
from failchain.core.stack import (
    Call,
    CallStack,
    caller,
    trace,
    trim_below,
    trim_runtime,
    stack_trace_to_string,
)
from .interfaces import CompositeError, ErrorWrapper, ErrorWithFields


def capture_stack(call: Call) -> CallStack:
    """
    Capture the current stack cut down to start at `call`.

    Runtime frames at the outer end are dropped unless disabled in config.
    """
    config = get_config()
    stack = trim_below(trace(1), call)
    if config.trim_runtime:
        stack = trim_runtime(stack, config.runtime_paths)
    return stack


class ExtendedError(Exception):
    """
    Error that decorates an original error with location and stack trace.

    Implements CompositeError, ErrorWithLocation, ErrorWithStackTrace,
    ErrorWrapper and ErrorWithFields.
    """

    def __init__(
        self,
        original: BaseException,
        inner: Optional[BaseException] = None,
        *,
        call: Call,
        stack: CallStack = (),
    ):
        super().__init__(original)
        self._original = original
        self._inner = inner
        self._call = call
        self._stack = tuple(stack)

        cause = self.inner_error()
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @classmethod
    def capture(
        cls,
        original: BaseException,
        inner: Optional[BaseException] = None,
        stack_skip: int = 0,
    ) -> "ExtendedError":
        """
        Build an ExtendedError located at the caller of capture().

        stack_skip: additional frames to skip above that caller
        """
        call = caller(stack_skip + 1)
        return cls(original, inner, call=call, stack=capture_stack(call))

    def __str__(self) -> str:
        return str(self._original)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._original!r}, location={str(self._call)!r})"

    @property
    def call(self) -> Call:
        return self._call

    @property
    def call_stack(self) -> CallStack:
        return self._stack

    def inner_error(self) -> Optional[BaseException]:
        result = None
        if isinstance(self._original, CompositeError):
            result = self._original.inner_error()

        if result is None:
            result = self._inner

        return result

    def location(self) -> str:
        return str(self._call)

    def stack_trace(self) -> str:
        return stack_trace_to_string(self._stack)

    def original_error(self) -> BaseException:
        original = self._original
        if isinstance(original, ErrorWrapper):
            return original.original_error()
        return original

    def fields(self) -> Optional[Dict[str, Any]]:
        original = self.original_error()
        if isinstance(original, ErrorWithFields):
            return original.fields()
        return None


__all__ = [
    "ExtendedError",
    "capture_stack",
]
