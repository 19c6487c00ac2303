"""
Unit tests for DispatchService.

Tests verify:
- Empty input is "no input", not the digest of an empty string
- Results follow registry order whatever the completion order
- Per-algorithm failures and timeouts stay local
- Determinism and timing semantics
"""

import asyncio

import pytest

from digestbench.hashing.registry import AlgorithmRegistry, build_default_registry
from digestbench.services.dispatch import DispatchService
from digestbench.services.logging import NullLogger


class TestEmptyInput:
    """Tests for the no-input branch."""

    @pytest.mark.asyncio
    async def test_all_results_empty(self, registry):
        results = await DispatchService(registry).dispatch("")

        assert [r.algorithm_name for r in results] == registry.names
        for result in results:
            assert result.hex_digest == ""
            assert result.elapsed_seconds == 0.0
            assert result.error is None
            assert result.enabled is False
            assert result.formatted_elapsed == ""

    @pytest.mark.asyncio
    async def test_engines_not_invoked(self, make_spec):
        calls: list[str] = []
        registry = AlgorithmRegistry([make_spec("A", calls=calls), make_spec("B", calls=calls)])

        await DispatchService(registry).dispatch("")

        assert calls == []

    @pytest.mark.asyncio
    async def test_whitespace_is_real_input(self, registry):
        results = await DispatchService(registry).dispatch(" ")
        assert all(r.hex_digest for r in results)


class TestOrdering:
    """Tests for fan-out/fan-in ordering."""

    @pytest.mark.asyncio
    async def test_results_in_registry_order_despite_latency(self, make_spec):
        """Slowest-first registry still returns registry order."""
        completed: list[str] = []
        specs = []
        for name, delay in [("SLOW", 0.06), ("MID", 0.03), ("FAST", 0.0)]:
            spec = make_spec(name, delay=delay)
            original = spec.compute

            async def compute(text, _original=original, _name=name):
                digest = await _original(text)
                completed.append(_name)
                return digest

            specs.append(spec.__class__(name=name, compute=compute, engine="fake", hex_length=8))
        registry = AlgorithmRegistry(specs)

        results = await DispatchService(registry).dispatch("abc")

        assert completed == ["FAST", "MID", "SLOW"]
        assert [r.algorithm_name for r in results] == ["SLOW", "MID", "FAST"]

    @pytest.mark.asyncio
    async def test_computes_run_concurrently(self, make_spec):
        registry = AlgorithmRegistry([make_spec(f"A{i}", delay=0.1) for i in range(5)])
        loop = asyncio.get_running_loop()

        started = loop.time()
        await DispatchService(registry).dispatch("abc")
        elapsed = loop.time() - started

        assert elapsed < 0.4

    @pytest.mark.asyncio
    async def test_default_registry_order(self, registry):
        results = await DispatchService(registry).dispatch("abc")
        assert [r.algorithm_name for r in results] == registry.names


class TestDeterminism:
    """Tests for repeated dispatches."""

    @pytest.mark.asyncio
    async def test_back_to_back_dispatches_match(self, registry):
        service = DispatchService(registry)
        first = await service.dispatch("abc")
        second = await service.dispatch("abc")
        assert [r.hex_digest for r in first] == [r.hex_digest for r in second]

    @pytest.mark.asyncio
    async def test_known_digests(self, registry):
        results = {r.algorithm_name: r for r in await DispatchService(registry).dispatch("abc")}
        assert results["MD5"].hex_digest == "900150983cd24fb0d6963f7d28e17f72"
        assert results["SHA-256"].hex_digest == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )
        assert len(results["SHA3-256"].hex_digest) == 64
        assert results["SHA3-256"].hex_digest != results["SHA-256"].hex_digest

    @pytest.mark.asyncio
    async def test_lone_surrogate_digests_as_replacement_char(self, registry):
        service = DispatchService(registry)

        results = await service.dispatch("a\ud800b")
        replaced = await service.dispatch("a\ufffdb")

        assert all(r.enabled and r.error is None for r in results)
        assert [r.hex_digest for r in results] == [r.hex_digest for r in replaced]


class TestTiming:
    """Tests for elapsed-time capture."""

    @pytest.mark.asyncio
    async def test_elapsed_covers_compute(self, make_spec):
        registry = AlgorithmRegistry([make_spec("SLOW", delay=0.05), make_spec("FAST")])

        slow, fast = await DispatchService(registry).dispatch("abc")

        assert slow.elapsed_seconds >= 0.04
        assert 0.0 <= fast.elapsed_seconds < slow.elapsed_seconds

    @pytest.mark.asyncio
    async def test_formatted_elapsed_has_three_decimals(self, make_spec):
        registry = AlgorithmRegistry([make_spec("SLOW", delay=0.01)])
        (result,) = await DispatchService(registry).dispatch("abc")
        seconds, unit = result.formatted_elapsed.split(" ")
        assert unit == "s"
        assert len(seconds.split(".")[1]) == 3


class TestFailures:
    """Tests for per-algorithm error isolation."""

    @pytest.mark.asyncio
    async def test_engine_unavailable_is_local(self, make_spec):
        registry = AlgorithmRegistry(
            [make_spec("OK-1"), make_spec("DOWN", fail=True), make_spec("OK-2", delay=0.01)]
        )

        results = await DispatchService(registry, logger=NullLogger()).dispatch("abc")

        assert [r.algorithm_name for r in results] == ["OK-1", "DOWN", "OK-2"]
        assert results[0].enabled and results[2].enabled
        assert results[1].hex_digest == ""
        assert results[1].enabled is False
        assert results[1].error == "engine offline"

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_local(self, make_spec):
        async def broken(text: str) -> str:
            raise RuntimeError("boom")

        spec = make_spec("BROKEN")
        registry = AlgorithmRegistry([spec.__class__(name="BROKEN", compute=broken), make_spec("OK")])

        broken_result, ok_result = await DispatchService(registry).dispatch("abc")

        assert broken_result.error == "boom"
        assert ok_result.enabled

    @pytest.mark.asyncio
    async def test_non_hex_output_is_failure(self, make_spec):
        registry = AlgorithmRegistry([make_spec("BAD", digest="not-hex!")])
        (result,) = await DispatchService(registry).dispatch("abc")
        assert result.hex_digest == ""
        assert "non-hex" in result.error

    @pytest.mark.asyncio
    async def test_uppercase_output_is_normalized(self, make_spec):
        registry = AlgorithmRegistry([make_spec("UPPER", digest="ABCDEF01")])
        (result,) = await DispatchService(registry).dispatch("abc")
        assert result.hex_digest == "abcdef01"

    @pytest.mark.asyncio
    async def test_timeout_marks_only_stalled_algorithm(self, make_spec):
        registry = AlgorithmRegistry([make_spec("STALLED", delay=5), make_spec("OK")])

        stalled, ok = await DispatchService(registry, timeout_seconds=0.05).dispatch("abc")

        assert stalled.hex_digest == ""
        assert "Timed out" in stalled.error
        assert ok.enabled

    @pytest.mark.asyncio
    async def test_missing_library_engine(self, monkeypatch):
        from digestbench.hashing import engines

        monkeypatch.setattr(engines, "crypto_hash", None)
        registry = build_default_registry()

        results = {r.algorithm_name: r for r in await DispatchService(registry).dispatch("abc")}

        for name in ("MD5", "SHA-224", "SHA3-224", "SHA3-256", "SHA3-384", "SHA3-512"):
            assert results[name].enabled is False
            assert "pycryptodome" in results[name].error
        for name in ("SHA-1", "SHA-256", "SHA-384", "SHA-512"):
            assert results[name].enabled
