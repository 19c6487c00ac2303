"""
Algorithm registry.

Binds each supported algorithm name to the engine that computes it and
the adapter that normalizes the engine's output to lowercase hex. Every
registered algorithm exposes the same asynchronous ``compute`` signature,
whatever the nature of its engine.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass

from ..core.exceptions import UnknownAlgorithmError
from ..core.interfaces.engine import (
    IBinaryDigestEngine,
    ITextDigestEngine,
    TextDigestOptions,
)
from .engines import LibraryDigestEngine, NativeDigestEngine

ComputeFn = Callable[[str], Awaitable[str]]

# (name, engine, hex length) in display order
DEFAULT_ALGORITHMS: tuple[tuple[str, str, int], ...] = (
    ("MD5", "library", 32),
    ("SHA-1", "native", 40),
    ("SHA-224", "library", 56),
    ("SHA-256", "native", 64),
    ("SHA-384", "native", 96),
    ("SHA-512", "native", 128),
    ("SHA3-224", "library", 56),
    ("SHA3-256", "library", 64),
    ("SHA3-384", "library", 96),
    ("SHA3-512", "library", 128),
)


@dataclass(frozen=True)
class AlgorithmSpec:
    """One registered algorithm.

    Attributes:
        name: Unique display name (e.g., 'SHA-256')
        compute: Async callable mapping text to a lowercase hex digest
        engine: Label of the engine backing the algorithm
        hex_length: Expected length of the hex digest
    """

    name: str
    compute: ComputeFn
    engine: str = ""
    hex_length: int = 0


def _lookup_key(name: str) -> str:
    return name.upper().replace("-", "").replace("_", "")


def well_formed(text: str) -> str:
    """Replace lone surrogates, as left by undecodable argv bytes, with U+FFFD."""
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def native_spec(
    name: str,
    engine: IBinaryDigestEngine,
    hex_length: int,
    options: TextDigestOptions,
) -> AlgorithmSpec:
    """Adapt a binary engine: encode text, await raw bytes, hex-encode."""

    async def compute(text: str) -> str:
        raw = await engine.digest(name, well_formed(text).encode(options.encoding))
        return raw.hex()

    return AlgorithmSpec(name=name, compute=compute, engine=engine.name, hex_length=hex_length)


def library_spec(
    name: str,
    engine: ITextDigestEngine,
    hex_length: int,
    options: TextDigestOptions,
) -> AlgorithmSpec:
    """Adapt a text engine: its immediate hex result becomes an awaitable."""

    async def compute(text: str) -> str:
        return engine.digest(name, well_formed(text), options)

    return AlgorithmSpec(name=name, compute=compute, engine=engine.name, hex_length=hex_length)


class AlgorithmRegistry:
    """
    Ordered registry of algorithm specs.

    Iteration order is registration order and never changes after
    construction, so results can always be reported in the same order.

    Example:
        registry = build_default_registry()
        digest = await registry.compute("SHA-256", "abc")

        # Custom registry for tests
        registry = AlgorithmRegistry()
        registry.register(AlgorithmSpec("FAKE", fake_compute, hex_length=8))
    """

    def __init__(self, specs: list[AlgorithmSpec] | None = None) -> None:
        self._specs: dict[str, AlgorithmSpec] = {}
        self._keys: dict[str, str] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: AlgorithmSpec) -> None:
        """
        Register an algorithm spec at the end of the order.

        Raises:
            ValueError: If an algorithm with the same name is registered
        """
        key = _lookup_key(spec.name)
        if key in self._keys:
            raise ValueError(f"Algorithm already registered: {spec.name}")
        self._specs[spec.name] = spec
        self._keys[key] = spec.name

    def get(self, name: str) -> AlgorithmSpec | None:
        """
        Get spec by name.

        Lookup ignores case, hyphens and underscores, so 'sha3_256'
        finds 'SHA3-256'.
        """
        canonical = self._keys.get(_lookup_key(name))
        return self._specs.get(canonical) if canonical else None

    def require(self, name: str) -> AlgorithmSpec:
        """
        Get spec by name.

        Raises:
            UnknownAlgorithmError: If the algorithm is not registered
        """
        spec = self.get(name)
        if spec is None:
            raise UnknownAlgorithmError(
                f"Unknown algorithm: {name}",
                algorithm=name,
                context={"available": ", ".join(self.names)},
            )
        return spec

    async def compute(self, name: str, text: str) -> str:
        """Compute the hex digest of text with one algorithm."""
        return await self.require(name).compute(text)

    def subset(self, names: list[str]) -> AlgorithmRegistry:
        """New registry holding only the named algorithms, in registry order."""
        wanted = {self.require(n).name for n in names}
        return AlgorithmRegistry([s for s in self._specs.values() if s.name in wanted])

    @property
    def specs(self) -> tuple[AlgorithmSpec, ...]:
        return tuple(self._specs.values())

    @property
    def names(self) -> list[str]:
        return list(self._specs)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[AlgorithmSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self._specs)


def build_default_registry(
    native: IBinaryDigestEngine | None = None,
    library: ITextDigestEngine | None = None,
    options: TextDigestOptions | None = None,
) -> AlgorithmRegistry:
    """
    Build the ten-algorithm registry.

    Args:
        native: Binary engine for SHA-1/SHA-2 (defaults to hashlib)
        library: Text engine for MD5, SHA-224 and SHA3 (defaults to pycryptodome)
        options: Text options shared by both adapters

    Returns:
        Registry ordered MD5, SHA-1, SHA-224, SHA-256, SHA-384, SHA-512,
        SHA3-224, SHA3-256, SHA3-384, SHA3-512
    """
    native = native or NativeDigestEngine()
    library = library or LibraryDigestEngine()
    options = options or TextDigestOptions()

    registry = AlgorithmRegistry()
    for name, engine, hex_length in DEFAULT_ALGORITHMS:
        if engine == "native":
            registry.register(native_spec(name, native, hex_length, options))
        else:
            registry.register(library_spec(name, library, hex_length, options))
    return registry
