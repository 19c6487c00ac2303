"""
Digest engine implementations.

NativeDigestEngine wraps hashlib and runs each digest in a worker thread so
the event loop is never blocked. LibraryDigestEngine wraps pycryptodome's
Crypto.Hash modules and answers synchronously with a hex string.
"""

from __future__ import annotations

import asyncio
import hashlib
from typing import Any

from ..core.exceptions import EngineUnavailableError
from ..core.interfaces.engine import (
    IBinaryDigestEngine,
    ITextDigestEngine,
    TextDigestOptions,
)

try:
    from Crypto.Hash import MD5, SHA3_224, SHA3_256, SHA3_384, SHA3_512, SHA224

    crypto_hash: dict[str, Any] | None = {
        "MD5": MD5,
        "SHA-224": SHA224,
        "SHA3-224": SHA3_224,
        "SHA3-256": SHA3_256,
        "SHA3-384": SHA3_384,
        "SHA3-512": SHA3_512,
    }
except ImportError:
    crypto_hash = None


class NativeDigestEngine(IBinaryDigestEngine):
    """SHA-1 and SHA-2 digests from the interpreter's hashlib."""

    name = "native"

    HASHLIB_NAMES: dict[str, str] = {
        "SHA-1": "sha1",
        "SHA-256": "sha256",
        "SHA-384": "sha384",
        "SHA-512": "sha512",
    }

    @property
    def algorithms(self) -> frozenset[str]:
        return frozenset(self.HASHLIB_NAMES)

    async def digest(self, algorithm: str, data: bytes) -> bytes:
        hashlib_name = self.HASHLIB_NAMES.get(algorithm)
        if hashlib_name is None:
            raise EngineUnavailableError(
                "Algorithm not provided by native engine",
                algorithm=algorithm,
                engine=self.name,
            )
        return await asyncio.to_thread(self._digest, algorithm, hashlib_name, data)

    def _digest(self, algorithm: str, hashlib_name: str, data: bytes) -> bytes:
        try:
            hasher = hashlib.new(hashlib_name)
        except ValueError as e:
            # FIPS builds and stripped OpenSSL can lack an algorithm
            raise EngineUnavailableError(
                "hashlib cannot construct digest",
                algorithm=algorithm,
                engine=self.name,
                cause=e,
            ) from e
        hasher.update(data)
        return hasher.digest()


class LibraryDigestEngine(ITextDigestEngine):
    """MD5, SHA-224 and SHA3 digests from pycryptodome."""

    name = "library"

    def __init__(self, modules: dict[str, Any] | None = None) -> None:
        """
        Initialize the engine.

        Args:
            modules: Algorithm name to Crypto.Hash module mapping
                (defaults to the pycryptodome modules, None if not installed)
        """
        self._modules = modules if modules is not None else crypto_hash

    @property
    def algorithms(self) -> frozenset[str]:
        return frozenset(self._modules or ())

    @property
    def available(self) -> bool:
        return self._modules is not None

    def digest(self, algorithm: str, text: str, options: TextDigestOptions) -> str:
        if self._modules is None:
            raise EngineUnavailableError(
                "pycryptodome package not installed",
                algorithm=algorithm,
                engine=self.name,
            )
        module = self._modules.get(algorithm)
        if module is None:
            raise EngineUnavailableError(
                "Algorithm not provided by library engine",
                algorithm=algorithm,
                engine=self.name,
            )
        hasher = module.new(data=text.encode(options.encoding))
        return hasher.hexdigest().lower()
