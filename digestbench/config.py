"""Configuration loading and lookup for digestbench."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .core.exceptions import ConfigValidationError
from .core.models.config import DigestBenchConfig
from .core.settings import find_config_file, load_settings

# Keys shown by `digestbench config`
CONFIGURABLE_KEYS: dict[str, dict[str, Any]] = {
    "dispatch.debounce_ms": {
        "type": int,
        "default": 120,
        "description": "Quiet window (ms) before a burst of input changes is digested",
    },
    "dispatch.timeout_seconds": {
        "type": float,
        "default": None,
        "description": "Per-algorithm timeout in seconds (unset = wait forever)",
    },
    "output.color": {
        "type": bool,
        "default": True,
        "description": "Use ANSI colors when writing to a terminal",
    },
    "output.show_timing": {
        "type": bool,
        "default": True,
        "description": "Show per-algorithm compute time",
    },
    "text.encoding": {
        "type": str,
        "default": "utf-8",
        "description": "Encoding used to turn input text into bytes",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to ~/.digestbench/digestbench.log",
    },
}


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> DigestBenchConfig:
    """Load the effective configuration (defaults, TOML, environment)."""
    return load_settings(config_path=config_path, start_dir=start_dir).to_config()


def config_get(key: str, start_dir: str | None = None) -> Any:
    """
    Get a configuration value by dotted key.

    Raises:
        ConfigValidationError: If the key is not a known configuration key
    """
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(f"Unknown config key: {key}", key=key)
    return load_config(start_dir=start_dir).get(key)


__all__ = [
    "CONFIGURABLE_KEYS",
    "config_get",
    "find_config_file",
    "load_config",
]
