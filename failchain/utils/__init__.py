# failchain/utils/__init__.py
from .log_format import FullDetailsFormatter, has_details, log_full_details

__all__ = [
    "FullDetailsFormatter",
    "has_details",
    "log_full_details",
]
