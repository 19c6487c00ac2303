"""
Custom exception hierarchy for digestbench.

Provides a structured exception hierarchy so that engine failures,
configuration problems and platform gaps can be reported per algorithm
or per command instead of being silently logged.
"""

from __future__ import annotations


class DigestBenchException(Exception):
    """
    Base exception for all digestbench errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, engine, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(DigestBenchException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(ConfigError, ValueError):
    """
    Invalid or unknown configuration value.

    Inherits from ValueError so callers validating user input can
    catch it alongside other value errors.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Engine Errors
# =============================================================================


class EngineError(DigestBenchException):
    """Base class for digest engine errors."""

    pass


class EngineUnavailableError(EngineError):
    """
    A digest engine cannot compute the requested algorithm.

    Raised when the backing library is not installed or the platform
    does not provide the algorithm. Only the affected algorithm fails;
    concurrent computations continue.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        engine: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if engine:
            ctx["engine"] = engine
        super().__init__(message, context=ctx, cause=cause)


class DigestTimeoutError(EngineError):
    """A single digest computation exceeded the configured timeout."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        timeout: float | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if timeout is not None:
            ctx["timeout"] = timeout
        super().__init__(message, context=ctx, cause=cause)


class UnknownAlgorithmError(DigestBenchException, KeyError):
    """Requested algorithm is not in the registry."""

    exit_code = 2

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)

    # KeyError.__str__ would repr() the message
    __str__ = DigestBenchException.__str__


# =============================================================================
# Platform Errors
# =============================================================================


class ClipboardUnavailableError(DigestBenchException):
    """
    No clipboard utility is available on this system.

    Raised when none of pbcopy, wl-copy, xclip, xsel or clip can be found.
    """
