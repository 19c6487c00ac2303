"""
Digest engine interfaces.

Two kinds of engines back the algorithm registry: a native engine that
digests bytes asynchronously and returns raw digest bytes, and a library
engine that digests text synchronously and returns hex directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TextDigestOptions:
    """Options passed to a text digest engine."""

    encoding: str = "utf-8"


class IBinaryDigestEngine(ABC):
    """Asynchronous engine: bytes in, raw digest bytes out."""

    name: str = "native"

    @property
    @abstractmethod
    def algorithms(self) -> frozenset[str]:
        """Algorithm identifiers this engine claims to support."""
        pass

    @abstractmethod
    async def digest(self, algorithm: str, data: bytes) -> bytes:
        """
        Compute the raw digest of data.

        Args:
            algorithm: Identifier such as 'SHA-256'
            data: Bytes to digest

        Returns:
            Raw digest bytes; the caller hex-encodes.

        Raises:
            EngineUnavailableError: If the algorithm cannot be computed
        """
        pass


class ITextDigestEngine(ABC):
    """Synchronous engine: text in, lowercase hex digest out."""

    name: str = "library"

    @property
    @abstractmethod
    def algorithms(self) -> frozenset[str]:
        """Algorithm identifiers this engine claims to support."""
        pass

    @abstractmethod
    def digest(self, algorithm: str, text: str, options: TextDigestOptions) -> str:
        """
        Compute the hex digest of text.

        Args:
            algorithm: Identifier such as 'SHA3-256'
            text: Text to digest
            options: Encoding and other engine options

        Returns:
            Hex digest string

        Raises:
            EngineUnavailableError: If the algorithm cannot be computed
        """
        pass
