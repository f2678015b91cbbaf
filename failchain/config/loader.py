# failchain/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
- Loaded once per process, replaceable for tests and embedding apps
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import logging
import os
import threading

import yaml


CONFIG_ENV_VAR = "FAILCHAIN_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".failchain" / "config.yml"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FailChainConfig:
    """
    Unified failchain configuration.

    All fields have code defaults - YAML is optional.
    """

    # Drop interpreter/stdlib frames from the outer end of captured stacks
    trim_runtime: bool = True

    # Extra path prefixes treated as runtime frames (e.g. a framework's install dir)
    runtime_paths: Tuple[str, ...] = ()

    # Bound on every error chain walk; 0 = unlimited (cycles are not detected)
    max_chain_depth: int = 0

    @classmethod
    def default(cls) -> "FailChainConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FailChainConfig":
        """Merge a mapping over code defaults, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}

        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug(f"Ignoring unknown failchain config keys: {', '.join(unknown)}")

        if "runtime_paths" in values:
            paths = values["runtime_paths"]
            if paths is None:
                paths = ()
            elif isinstance(paths, str):
                paths = (paths,)
            elif isinstance(paths, list):
                paths = tuple(paths)
            # Anything else is left for validate() to reject
            values["runtime_paths"] = paths

        return replace(cls.default(), **values)._without_errors()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FailChainConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $FAILCHAIN_CONFIG
                2. ~/.failchain/config.yml

        Returns:
            FailChainConfig instance (always has code defaults as fallback)
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()

        # Accept both a bare mapping and one nested under "failchain:"
        if isinstance(yaml_data.get("failchain"), dict):
            yaml_data = yaml_data["failchain"]

        return cls.from_dict(yaml_data)

    def validate(self) -> list:
        """
        Validate configuration values.

        Returns:
            List of ConfigIssue (warn/error level)
        """
        from .validator import validate_config
        return validate_config(self)

    def _without_errors(self) -> "FailChainConfig":
        """Log issues and put every field with an error-level issue back to its default"""
        issues = self.validate()
        default = self.default()
        reset = {}
        for issue in issues:
            logger.warning(f"Invalid failchain config: {issue}")
            if issue.level == "error":
                name = issue.path.split("[", 1)[0]
                reset[name] = getattr(default, name)

        if reset:
            logger.warning(f"Using defaults for failchain config keys: {', '.join(sorted(reset))}")
            return replace(self, **reset)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "trim_runtime": self.trim_runtime,
            "runtime_paths": list(self.runtime_paths),
            "max_chain_depth": self.max_chain_depth,
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = []
        env_path = os.getenv(CONFIG_ENV_VAR, "").strip()
        if env_path:
            paths.append(Path(env_path))
        paths.append(DEFAULT_CONFIG_PATH)

    for path in paths:
        if not path.exists():
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load failchain config from {path}: {e}")
            return None

        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring failchain config {path}: top level must be a mapping")
            return None

        logger.debug(f"Loaded failchain config from {path}")
        return data

    return None


def load_config(config_path: Optional[Path] = None) -> FailChainConfig:
    """
    Load failchain configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        FailChainConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - System works without YAML (code is truth)
    """
    return FailChainConfig.from_yaml(config_path)


# Process-wide configuration (resolved once, lazily)
_CONFIG: Optional[FailChainConfig] = None
_CONFIG_LOCK = threading.Lock()


def get_config() -> FailChainConfig:
    """Get process-wide configuration, loading it on first use"""
    global _CONFIG
    if _CONFIG is None:
        with _CONFIG_LOCK:
            if _CONFIG is None:
                _CONFIG = load_config()
    return _CONFIG


def set_config(config: FailChainConfig) -> None:
    """Replace process-wide configuration"""
    global _CONFIG
    with _CONFIG_LOCK:
        _CONFIG = config


def reset_config() -> None:
    """Forget process-wide configuration; the next get_config() reloads it"""
    global _CONFIG
    with _CONFIG_LOCK:
        _CONFIG = None


__all__ = [
    "CONFIG_ENV_VAR",
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
]
