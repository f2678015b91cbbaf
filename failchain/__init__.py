# failchain/__init__.py
"""
failchain - chained, contextualized errors

Errors made by failchain remember where they were created (location and
stack trace) and what caused them, while keeping the text and type of the
error they wrap. Query functions walk and inspect error chains, including
errors from other libraries that provide the same methods.

Basic usage:
    >>> import failchain
    >>> err = failchain.news("disk full")
    >>> failchain.get_location(err)          # "<file>:<line> (<function>)"
    >>> wrapped = failchain.new_err_with_reason("saving report failed", err)
    >>> str(wrapped)
    'saving report failed: disk full'
    >>> failchain.is_error(wrapped, err)
    True
    >>> print(failchain.get_full_details(wrapped))

Capabilities an error may provide (probed with isinstance):
- CompositeError.inner_error()
- ErrorWithLocation.location()
- ErrorWithStackTrace.stack_trace()
- ErrorWrapper.original_error()
- ErrorWithFields.fields()
"""

__version__ = "0.1.0"

# User-facing API
from .api import (
    new,
    new_with_inner,
    new_err_with_reason,
    news,
    newf,
    stack_trace,
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

# Core types
from .core.errors import (
    CompositeError,
    ErrorWithLocation,
    ErrorWithStackTrace,
    ErrorWrapper,
    ErrorWithFields,
    ErrWithReason,
    ExtendedError,
)
from .core.stack import Call, CallStack, stack_trace_to_string

# Configuration
from .config import FailChainConfig, load_config, get_config, set_config

__all__ = [
    # Version
    "__version__",

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

    # Capabilities
    "CompositeError",
    "ErrorWithLocation",
    "ErrorWithStackTrace",
    "ErrorWrapper",
    "ErrorWithFields",

    # Error types
    "ErrWithReason",
    "ExtendedError",

    # Stack
    "Call",
    "CallStack",
    "stack_trace_to_string",

    # Configuration
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
]
