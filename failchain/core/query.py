# failchain/core/query.py
"""
Error chain queries

Functions that work on any error by probing capability interfaces.

Design principle:
- Pure and total: a missing capability yields a documented default, never an exception
- Type queries see through wrappers (the caller's error type, not the decorator's)
- Cycles are not detected; max_chain_depth in config bounds walks when set
"""

from __future__ import annotations

from typing import Any, Iterator, Optional
import logging

from failchain.config import get_config
from .errors import (
    CompositeError,
    ErrorWithLocation,
    ErrorWithStackTrace,
    ErrorWrapper,
)


DETAILS_INDENT = "    "

logger = logging.getLogger(__name__)


def _depth_reached(nodes: int, what: str) -> bool:
    limit = get_config().max_chain_depth
    if limit > 0 and nodes >= limit:
        logger.warning(f"{what}: error chain reached max_chain_depth={limit}, stopping walk")
        return True
    return False


def get_inner(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Get inner error (cause) of the given error.

    Returns err.inner_error() for a CompositeError, otherwise None.
    """
    if isinstance(err, CompositeError):
        return err.inner_error()
    return None


def get_location(err: Optional[BaseException]) -> str:
    """
    Get code line and function where the error was created.

    Returns err.location() for an ErrorWithLocation, otherwise "".
    """
    if isinstance(err, ErrorWithLocation):
        return err.location()
    return ""


def get_stack_trace(err: Optional[BaseException]) -> str:
    """
    Get stack trace of the given error.

    Returns err.stack_trace() for an ErrorWithStackTrace, otherwise "".
    """
    if isinstance(err, ErrorWithStackTrace):
        return err.stack_trace()
    return ""


def get_original_error(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Get the original error, unwrapping ErrorWrappers down to the first non-wrapper.

    Returns err itself when it is not a wrapper.
    """
    current = err
    nodes = 1
    while isinstance(current, ErrorWrapper):
        if _depth_reached(nodes, "get_original_error"):
            break
        current = current.original_error()
        nodes += 1
    return current


def get_runtime_type(err: Optional[BaseException]) -> Optional[type]:
    """Get type of the original error (wrappers are looked through)"""
    if err is None:
        return None
    return type(get_original_error(err))


# Alias
get_type = get_runtime_type


def type_name(tp: Optional[type]) -> str:
    """Render a type as "<module>.<qualname>" ("builtins." omitted)"""
    if tp is None:
        return "None"
    module = getattr(tp, "__module__", "")
    qualname = getattr(tp, "__qualname__", tp.__name__)
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield err and then each inner error until a node has no cause"""
    current = err
    nodes = 0
    while current is not None:
        yield current
        nodes += 1
        if _depth_reached(nodes, "iter_chain"):
            return
        current = get_inner(current)


def get_full_details(err: Optional[BaseException]) -> str:
    """
    Describe the error and all its inner errors (with stack traces).

    One "<type>: <error text>" line per chain node; a node's stack trace
    follows it, indented by four spaces.
    """
    lines = []
    for node in iter_chain(err):
        lines.append(f"{type_name(get_runtime_type(node))}: {node}")

        if isinstance(node, ErrorWithStackTrace):
            stack_trace = node.stack_trace()
            if stack_trace != "":
                lines.append(DETAILS_INDENT + stack_trace.replace("\n", "\n" + DETAILS_INDENT))

    return "\n".join(lines)


def is_error(where_to_find: Optional[BaseException], err_to_find: Optional[BaseException]) -> bool:
    """
    Check if err_to_find is where_to_find itself or one of its inner errors.

    Comparison is by identity, not by message.
    """
    current = where_to_find
    nodes = 1
    while True:
        if current is err_to_find:
            return True

        if not isinstance(current, CompositeError):
            return False

        if _depth_reached(nodes, "is_error"):
            return False
        current = current.inner_error()
        nodes += 1


def _type_of(value: Any) -> type:
    # A class stands for its instances
    if isinstance(value, type):
        return value
    return type(value)


def are_errors_of_equal_type(err1: Any, err2: Any) -> bool:
    """
    Check if 2 errors are of the same type.

    Either side may be an instance or the class itself.
    Always returns False if one of the arguments is None.
    """
    if err1 is None or err2 is None:
        return False
    return _type_of(err1) is _type_of(err2)


def get_error_by_type(
    where_to_find: Optional[BaseException],
    err_example_to_find: Any,
) -> Optional[BaseException]:
    """
    Get the first error in the chain (root included) of the example's type.

    err_example_to_find may be an error instance or an error class.
    """
    for node in iter_chain(where_to_find):
        if are_errors_of_equal_type(node, err_example_to_find):
            return node
    return None


__all__ = [
    "DETAILS_INDENT",
    "get_inner",
    "get_location",
    "get_stack_trace",
    "get_original_error",
    "get_runtime_type",
    "get_type",
    "type_name",
    "iter_chain",
    "get_full_details",
    "is_error",
    "are_errors_of_equal_type",
    "get_error_by_type",
]
