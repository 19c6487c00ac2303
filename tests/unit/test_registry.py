"""
Unit tests for the algorithm registry.

Tests verify:
- Default registry order and hex lengths
- Uniform async compute over both engines
- Name lookup, subsets and duplicate registration
"""

import pytest

from digestbench.core.exceptions import UnknownAlgorithmError
from digestbench.hashing.registry import (
    DEFAULT_ALGORITHMS,
    AlgorithmRegistry,
    AlgorithmSpec,
    build_default_registry,
    well_formed,
)

EXPECTED_ORDER = [
    "MD5",
    "SHA-1",
    "SHA-224",
    "SHA-256",
    "SHA-384",
    "SHA-512",
    "SHA3-224",
    "SHA3-256",
    "SHA3-384",
    "SHA3-512",
]

EXPECTED_LENGTHS = {
    "MD5": 32,
    "SHA-1": 40,
    "SHA-224": 56,
    "SHA-256": 64,
    "SHA-384": 96,
    "SHA-512": 128,
    "SHA3-224": 56,
    "SHA3-256": 64,
    "SHA3-384": 96,
    "SHA3-512": 128,
}


class TestDefaultRegistry:
    """Tests for build_default_registry()."""

    def test_has_ten_algorithms_in_fixed_order(self, registry):
        assert registry.names == EXPECTED_ORDER
        assert len(registry) == 10

    def test_order_is_stable_across_builds(self):
        assert build_default_registry().names == build_default_registry().names

    def test_declared_hex_lengths(self, registry):
        assert {spec.name: spec.hex_length for spec in registry} == EXPECTED_LENGTHS

    def test_engine_assignment(self, registry):
        native = {spec.name for spec in registry if spec.engine == "native"}
        assert native == {"SHA-1", "SHA-256", "SHA-384", "SHA-512"}

    def test_default_table_matches_registry(self, registry):
        assert [name for name, _, _ in DEFAULT_ALGORITHMS] == registry.names

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["a", "abc", "héllo wörld", "x" * 1000])
    async def test_hex_length_for_any_input(self, registry, text):
        """Every algorithm produces its fixed-length lowercase hex."""
        for spec in registry:
            digest = await spec.compute(text)
            assert len(digest) == EXPECTED_LENGTHS[spec.name], spec.name
            assert digest == digest.lower()
            int(digest, 16)

    @pytest.mark.asyncio
    async def test_compute_by_name(self, registry):
        digest = await registry.compute("SHA-256", "abc")
        assert digest == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    @pytest.mark.asyncio
    async def test_sha3_256_differs_from_sha256(self, registry):
        sha3 = await registry.compute("SHA3-256", "abc")
        sha2 = await registry.compute("SHA-256", "abc")
        assert len(sha3) == 64
        assert sha3 != sha2


class TestLookup:
    """Tests for name lookup and subsets."""

    @pytest.mark.parametrize(
        "alias,name",
        [("sha256", "SHA-256"), ("SHA-256", "SHA-256"), ("sha3_512", "SHA3-512"), ("md5", "MD5")],
    )
    def test_get_is_lenient(self, registry, alias, name):
        assert registry.get(alias).name == name
        assert alias in registry

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("blake3") is None
        assert "blake3" not in registry

    def test_require_unknown_raises(self, registry):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            registry.require("whirlpool")
        assert "whirlpool" in str(exc_info.value)
        assert isinstance(exc_info.value, KeyError)

    def test_subset_keeps_registry_order(self, registry):
        subset = registry.subset(["sha3-256", "md5", "sha1"])
        assert subset.names == ["MD5", "SHA-1", "SHA3-256"]

    def test_subset_unknown_raises(self, registry):
        with pytest.raises(UnknownAlgorithmError):
            registry.subset(["md5", "crc32"])


class TestCustomRegistry:
    """Tests for registering custom specs."""

    def test_register_appends(self, make_spec):
        registry = AlgorithmRegistry()
        registry.register(make_spec("B"))
        registry.register(make_spec("A"))
        assert registry.names == ["B", "A"]

    def test_duplicate_name_rejected(self, make_spec):
        registry = AlgorithmRegistry([make_spec("FAKE-1")])
        with pytest.raises(ValueError, match="already registered"):
            registry.register(make_spec("fake_1"))

    def test_specs_are_immutable(self, make_spec):
        spec = make_spec("FAKE")
        with pytest.raises(AttributeError):
            spec.name = "OTHER"  # type: ignore[misc]

    def test_spec_positional_construction(self):
        async def compute(text: str) -> str:
            return "00"

        spec = AlgorithmSpec("ZERO", compute, hex_length=2)
        assert spec.name == "ZERO"
        assert spec.engine == ""


class TestWellFormed:
    """Tests for text normalization before encoding."""

    def test_lone_surrogates_replaced(self):
        assert well_formed("a\ud800b\udcff") == "a\ufffdb\ufffd"

    def test_valid_text_unchanged(self):
        assert well_formed("abc é \U0001f600") == "abc é \U0001f600"
