# failchain/utils/log_format.py
"""
Logging helpers for failchain errors.

Python tracebacks show where an exception was raised; failchain errors also
know where they (and each inner error) were created. These helpers put that
into standard library logging output.
"""

from __future__ import annotations

from typing import Optional
import logging

from failchain.core.errors import ErrorWithLocation, ErrorWithStackTrace
from failchain.core.query import get_full_details, get_location


def has_details(err: Optional[BaseException]) -> bool:
    """Check if error carries failchain creation details"""
    return isinstance(err, (ErrorWithLocation, ErrorWithStackTrace))


class FullDetailsFormatter(logging.Formatter):
    """
    Formatter that renders failchain errors with get_full_details().

    Other exceptions keep the regular traceback. Example:

        handler = logging.StreamHandler()
        handler.setFormatter(FullDetailsFormatter("%(levelname)s %(message)s"))
    """

    def formatException(self, ei) -> str:
        err = ei[1] if ei else None
        if has_details(err):
            return get_full_details(err)
        return super().formatException(ei)


def log_full_details(
    logger: logging.Logger,
    err: BaseException,
    msg: Optional[str] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an error chain with locations and stack traces.

    The location of the outer error goes into the record as `failchain_location`.
    """
    if not logger.isEnabledFor(level):
        return

    headline = msg if msg is not None else str(err)
    logger.log(
        level,
        f"{headline}\n{get_full_details(err)}",
        extra={"failchain_location": get_location(err)},
    )


__all__ = [
    "FullDetailsFormatter",
    "has_details",
    "log_full_details",
]
