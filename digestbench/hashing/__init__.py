"""
Digest engines and the algorithm registry.

Engines compute digests; the registry binds algorithm names to engines
behind one asynchronous compute signature, so new algorithms can be
added without touching the dispatch core.
"""

from .engines import LibraryDigestEngine, NativeDigestEngine
from .registry import (
    DEFAULT_ALGORITHMS,
    AlgorithmRegistry,
    AlgorithmSpec,
    build_default_registry,
    library_spec,
    native_spec,
)

__all__ = [
    "DEFAULT_ALGORITHMS",
    "AlgorithmRegistry",
    "AlgorithmSpec",
    "LibraryDigestEngine",
    "NativeDigestEngine",
    "build_default_registry",
    "library_spec",
    "native_spec",
]
