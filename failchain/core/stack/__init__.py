# failchain/core/stack/__init__.py
"""
Call-stack capture for failchain.

No side effects on import.
"""

from .call import (
    Call,
    CallStack,
    caller,
    trace,
    trim_below,
    trim_runtime,
    is_runtime_call,
    stack_trace_to_string,
)

__all__ = [
    "Call",
    "CallStack",
    "caller",
    "trace",
    "trim_below",
    "trim_runtime",
    "is_runtime_call",
    "stack_trace_to_string",
]
