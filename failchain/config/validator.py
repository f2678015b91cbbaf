# failchain/config/validator.py
"""
Configuration Validator

Validates configuration values that would silently misbehave.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass

from .loader import FailChainConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "max_chain_depth"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: FailChainConfig) -> List[ConfigIssue]:
    """
    Validate configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(config.max_chain_depth, int) or isinstance(config.max_chain_depth, bool):
        issues.append(ConfigIssue(
            level="error",
            path="max_chain_depth",
            message=f"max_chain_depth must be an integer, got {config.max_chain_depth!r}",
            hint="Use 0 for unlimited chain walks",
        ))
    elif config.max_chain_depth < 0:
        issues.append(ConfigIssue(
            level="error",
            path="max_chain_depth",
            message=f"max_chain_depth={config.max_chain_depth} is negative",
            hint="Use 0 for unlimited chain walks or a positive bound",
        ))

    if not isinstance(config.trim_runtime, bool):
        issues.append(ConfigIssue(
            level="error",
            path="trim_runtime",
            message=f"trim_runtime must be true or false, got {config.trim_runtime!r}",
            hint="Write the value unquoted in YAML",
        ))

    if not isinstance(config.runtime_paths, tuple):
        issues.append(ConfigIssue(
            level="error",
            path="runtime_paths",
            message=f"runtime_paths must be a list of strings, got {config.runtime_paths!r}",
        ))
        return issues

    for index, path in enumerate(config.runtime_paths):
        if not isinstance(path, str):
            issues.append(ConfigIssue(
                level="error",
                path=f"runtime_paths[{index}]",
                message=f"runtime path must be a string, got {path!r}",
            ))
        elif not path:
            issues.append(ConfigIssue(
                level="warn",
                path=f"runtime_paths[{index}]",
                message="empty runtime path has no effect",
            ))

    if config.trim_runtime is False and config.runtime_paths:
        issues.append(ConfigIssue(
            level="warn",
            path="runtime_paths",
            message="runtime_paths has no effect when trim_runtime=false",
            hint="Set trim_runtime=true to drop runtime frames",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
