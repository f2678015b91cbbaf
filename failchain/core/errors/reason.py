# failchain/core/errors/reason.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ErrWithReason(Exception):
    """
    Error with a message and a reason (another error).

    Implements CompositeError: inner_error() returns the reason as is.
    """
    message: str
    reason: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        # Native tracebacks show the reason as the direct cause
        if isinstance(self.reason, BaseException):
            self.__cause__ = self.reason

    def __str__(self) -> str:
        return f"{self.message}: {self.reason}"

    def inner_error(self) -> Optional[BaseException]:
        return self.reason


__all__ = ["ErrWithReason"]
