"""
Diagnostic logging for digestbench.

Engine failures, timeouts and dispatch timing go here, never to the
result table. Output is off unless the [logging] config section enables
stderr or the rotating log file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DigestBenchLogger(ILogger):
    """
    ILogger backed by a stdlib logger with its own handlers.

    The underlying logger does not propagate, so digestbench diagnostics
    never leak into a host application's root logger.
    """

    LOG_FILE_PATH = Path.home() / ".digestbench" / "digestbench.log"
    MAX_FILE_SIZE = 1024 * 1024  # 1MB
    BACKUP_COUNT = 2

    def __init__(
        self,
        name: str = "digestbench",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Minimum level written (debug, info, warning, error)
            console_enabled: Write to stderr
            file_enabled: Write to the rotating log file
            log_file: Log file location (defaults to LOG_FILE_PATH)
        """
        threshold = logging.getLevelName(level.upper())
        if not isinstance(threshold, int):
            threshold = logging.WARNING

        self._logger = logging.getLogger(name)
        self._logger.setLevel(threshold)
        self._logger.propagate = False
        self._logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in self._build_handlers(console_enabled, file_enabled, log_file or self.LOG_FILE_PATH):
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def _build_handlers(self, console: bool, to_file: bool, log_file: Path) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if to_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(RotatingFileHandler(log_file, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT))
        return handlers

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)


class NullLogger(ILogger):
    """Discards everything; used when no logger is bootstrapped."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass
