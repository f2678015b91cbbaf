# failchain/api/__init__.py
"""
failchain user-facing API

Constructors capture the caller's location and stack trace; queries work
on any error, failchain-made or not.
"""

from .constructors import (
    new,
    new_with_inner,
    new_err_with_reason,
    news,
    newf,
    stack_trace,
)
from failchain.core.query import (
    get_inner,
    get_location,
    get_stack_trace,
    get_full_details,
    get_type,
    get_runtime_type,
    get_original_error,
    is_error,
    get_error_by_type,
    are_errors_of_equal_type,
    iter_chain,
)

__all__ = [
    # Constructors
    "new",
    "new_with_inner",
    "new_err_with_reason",
    "news",
    "newf",
    "stack_trace",

    # Queries
    "get_inner",
    "get_location",
    "get_stack_trace",
    "get_full_details",
    "get_type",
    "get_runtime_type",
    "get_original_error",
    "is_error",
    "get_error_by_type",
    "are_errors_of_equal_type",
    "iter_chain",
]
