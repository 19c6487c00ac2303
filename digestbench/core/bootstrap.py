"""
Application bootstrap for digestbench.

Initializes the DI container with the logger and the algorithm registry.
This module should be called once at application startup.
"""

from __future__ import annotations

from .container import ServiceContainer, get_container
from .interfaces.engine import TextDigestOptions
from .interfaces.logger import ILogger
from .models.config import DigestBenchConfig

_initialized = False


def bootstrap(config: DigestBenchConfig | None = None) -> ServiceContainer:
    """
    Bootstrap the digestbench application.

    Args:
        config: Effective configuration (defaults to model defaults)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, config or DigestBenchConfig())

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, config: DigestBenchConfig) -> None:
    """Register core application services."""
    from ..hashing.registry import AlgorithmRegistry, build_default_registry
    from ..services.logging import DigestBenchLogger

    def create_logger() -> ILogger:
        return DigestBenchLogger(
            level=config.logging.level,
            console_enabled=config.logging.console,
            file_enabled=config.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    options = TextDigestOptions(encoding=config.text.encoding)
    container.register_singleton(
        AlgorithmRegistry,
        factory=lambda: build_default_registry(options=options),
    )


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized


def reset() -> None:
    """Reset bootstrap state (for testing)."""
    global _initialized
    _initialized = False
    ServiceContainer.reset()
