# failchain/core/stack/call.py
"""
Call-site and call-stack capture.

Frames are read directly from the interpreter and reduced to immutable
descriptors, so captured stacks never keep frame objects (and their locals)
alive.

Design principle:
- Descriptors are plain frozen data (file, line, function)
- Most recent call first
- Capture never raises, whatever the skip count
"""

from __future__ import annotations

from dataclasses import dataclass
from types import FrameType
from typing import Iterable, Optional, Tuple
import sys
import sysconfig


@dataclass(frozen=True)
class Call:
    """Single stack frame descriptor"""
    filename: str
    lineno: int
    function: str

    @classmethod
    def from_frame(cls, frame: FrameType) -> "Call":
        code = frame.f_code
        # co_qualname only exists on 3.11+
        function = getattr(code, "co_qualname", code.co_name)
        return cls(filename=code.co_filename, lineno=frame.f_lineno, function=function)

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} ({self.function})"


CallStack = Tuple[Call, ...]

_UNKNOWN_CALL = Call(filename="?", lineno=0, function="?")


def _frame_at(skip: int) -> Optional[FrameType]:
    """
    Walk `skip` frames outwards from the caller of the public capture function.

    Clamped to the outermost frame instead of raising like sys._getframe.
    """
    # 0: _frame_at, 1: caller()/trace(), 2: their caller
    frame = sys._getframe(2)
    for _ in range(max(skip, 0)):
        if frame.f_back is None:
            break
        frame = frame.f_back
    return frame


def caller(skip: int = 0) -> Call:
    """
    Describe the frame `skip` levels above the function calling `caller`.

    caller(0) is the calling function itself, caller(1) is its caller, etc.
    """
    frame = _frame_at(skip)
    if frame is None:
        return _UNKNOWN_CALL
    return Call.from_frame(frame)


def trace(skip: int = 0) -> CallStack:
    """Capture the stack starting at the same frame caller(skip) describes."""
    frame = _frame_at(skip)
    calls = []
    while frame is not None:
        calls.append(Call.from_frame(frame))
        frame = frame.f_back
    return tuple(calls)


def trim_below(stack: CallStack, call: Call) -> CallStack:
    """
    Drop the entries more recent than `call`, so `call` becomes the first entry.

    Returns an empty stack when `call` is not part of `stack`.
    """
    for index, entry in enumerate(stack):
        if entry == call:
            return stack[index:]
    return ()


def _stdlib_paths() -> Tuple[str, ...]:
    paths = sysconfig.get_paths()
    found = []
    for key in ("stdlib", "platstdlib"):
        path = paths.get(key)
        if path and path not in found:
            found.append(path)
    return tuple(found)


_STDLIB_PATHS = _stdlib_paths()


def is_runtime_call(call: Call, extra_paths: Iterable[str] = ()) -> bool:
    """
    Check whether a frame belongs to the interpreter runtime.

    Runtime frames are synthetic ones ("<frozen runpy>", "<string>"), frames
    from the standard library directory (site-packages excluded) and frames
    under any of `extra_paths`.
    """
    filename = call.filename
    if filename.startswith("<"):
        return True

    for path in extra_paths:
        if path and filename.startswith(path):
            return True

    if "site-packages" in filename or "dist-packages" in filename:
        return False

    return any(filename.startswith(path) for path in _STDLIB_PATHS)


def trim_runtime(stack: CallStack, extra_paths: Iterable[str] = ()) -> CallStack:
    """Drop runtime frames from the outer end of the stack."""
    extra = tuple(extra_paths)
    end = len(stack)
    while end > 0 and is_runtime_call(stack[end - 1], extra):
        end -= 1
    return stack[:end]


def stack_trace_to_string(stack: Iterable[Call]) -> str:
    """Render a stack as one "<file>:<line> (<function>)" line per frame."""
    return "\n".join(str(call) for call in stack)


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
