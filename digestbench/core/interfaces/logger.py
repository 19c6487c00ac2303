"""
Logger interface for internal diagnostic output.

Separate from IPresenter which handles user-facing output.
Use ILogger for engine failures and dispatch timing that should be
configurable and optionally written to a log file.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Interface for internal logging.

    Used for debug/diagnostic output - NOT for digest results.
    Results and self-test records go through IPresenter.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        pass
