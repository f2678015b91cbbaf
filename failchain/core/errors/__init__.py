# failchain/core/errors/__init__.py
"""
Core error types for failchain.

This package defines the components responsible for:
- Describing optional error capabilities (cause, location, stack trace, wrapping, fields)
- Representing an error with a reason
- Decorating arbitrary errors with their place of creation

No side effects on import.
"""

from .interfaces import (
    CompositeError,
    ErrorWithLocation,
    ErrorWithStackTrace,
    ErrorWrapper,
    ErrorWithFields,
)
from .reason import ErrWithReason
from .extended import ExtendedError, capture_stack

__all__ = [
    "CompositeError",
    "ErrorWithLocation",
    "ErrorWithStackTrace",
    "ErrorWrapper",
    "ErrorWithFields",
    "ErrWithReason",
    "ExtendedError",
    "capture_stack",
]
