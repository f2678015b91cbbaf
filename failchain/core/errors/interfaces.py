# failchain/core/errors/interfaces.py
"""
Error capability interfaces

Optional behaviours an error may provide. They are structural: any object
with the right method qualifies, whether or not it knows about failchain.
Callers probe them with isinstance() and fall back to a default when the
capability is missing.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class CompositeError(Protocol):
    """Error that can report its cause (inner error)"""

    def inner_error(self) -> Optional[BaseException]:
        ...


@runtime_checkable
class ErrorWithLocation(Protocol):
    """
    Error that knows where in the code it was created.

    location() returns "<file>:<line> (<function>)", where function is the
    qualified name of the code object. No dot is appended after the name:
    "main.py:12 (Loader.load)", not "main.py:12 (Loader.load.)".
    """

    def location(self) -> str:
        ...


@runtime_checkable
class ErrorWithStackTrace(Protocol):
    """
    Error that carries a stack trace.

    stack_trace() returns one "<file>:<line> (<function>)" line per frame,
    most recent call first.
    """

    def stack_trace(self) -> str:
        ...


@runtime_checkable
class ErrorWrapper(Protocol):
    """Object that wraps (decorates) an original error"""

    def original_error(self) -> BaseException:
        ...


@runtime_checkable
class ErrorWithFields(Protocol):
    """Error that provides additional structured information"""

    def fields(self) -> Optional[Dict[str, Any]]:
        ...


__all__ = [
    "CompositeError",
    "ErrorWithLocation",
    "ErrorWithStackTrace",
    "ErrorWrapper",
    "ErrorWithFields",
]
