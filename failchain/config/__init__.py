# failchain/config/__init__.py
"""
failchain Configuration

Design principles:
1. Code has defaults, YAML is optional input (YAML can be deleted)
2. One frozen config object per process
"""

from .loader import (
    CONFIG_ENV_VAR,
    FailChainConfig,
    load_config,
    get_config,
    set_config,
    reset_config,
)
from .validator import validate_config, ConfigIssue

__all__ = [
    "CONFIG_ENV_VAR",
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "validate_config",
    "ConfigIssue",
]
