"""
Click context extension for digestbench CLI.

Provides DigestBenchContext dataclass that holds the effective
configuration and service accessors passed through the Click command
chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.container import resolve
from ..core.exceptions import ConfigFileError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.models.config import DigestBenchConfig
from ..core.settings import load_settings
from ..hashing.registry import AlgorithmRegistry
from ..presenters.console import ConsolePresenter
from ..presenters.json_output import JsonPresenter
from ..services.dispatch import DispatchService


@dataclass
class DigestBenchContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup and passed to commands via Click's
    ctx.obj mechanism.

    Attributes:
        cwd: Current working directory
        config: Effective configuration
        config_file: Config file that was loaded, if any
    """

    cwd: Path
    config: DigestBenchConfig
    config_file: str | None = None

    @classmethod
    def create(cls, cwd: Path | None = None) -> DigestBenchContext:
        """Load configuration and bootstrap services.

        Args:
            cwd: Working directory override (defaults to Path.cwd())

        Raises:
            ConfigFileError: If a config file exists but cannot be read
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        if settings.config_error:
            raise ConfigFileError(settings.config_error, file_path=settings.config_file)

        config = settings.to_config()
        bootstrap(config)
        return cls(cwd=cwd, config=config, config_file=settings.config_file)

    @property
    def registry(self) -> AlgorithmRegistry:
        return resolve(AlgorithmRegistry)

    @property
    def logger(self) -> ILogger:
        return resolve(ILogger)  # type: ignore[type-abstract]

    def dispatch_service(self, registry: AlgorithmRegistry | None = None) -> DispatchService:
        """Dispatch service over the given registry (defaults to all algorithms)."""
        return DispatchService(
            registry or self.registry,
            logger=self.logger,
            timeout_seconds=self.config.dispatch.timeout_seconds,
        )

    def presenter(self, registry: AlgorithmRegistry | None = None, as_json: bool = False) -> IPresenter:
        """Presenter with one cell per algorithm of the registry."""
        if as_json:
            return JsonPresenter()
        return ConsolePresenter(
            (registry or self.registry).names,
            use_color=self.config.output.color,
            show_timing=self.config.output.show_timing,
        )
