"""
Core infrastructure for digestbench.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for engines, presenters and logging
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    ClipboardUnavailableError,
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
    DigestBenchException,
    DigestTimeoutError,
    EngineError,
    EngineUnavailableError,
    UnknownAlgorithmError,
)

__all__ = [
    "ClipboardUnavailableError",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "DigestBenchException",
    "DigestTimeoutError",
    "EngineError",
    "EngineUnavailableError",
    "ServiceContainer",
    "UnknownAlgorithmError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve",
    "try_resolve",
]
