"""
Shared pytest fixtures for digestbench tests.

This module provides:
- reset_services: Clears the DI container and bootstrap state around each test
- registry: The default ten-algorithm registry
- make_spec: Builds fake algorithm specs with controllable latency and failure
- runner: Click CLI test runner
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest
from click.testing import CliRunner

from digestbench.core import reset
from digestbench.core.exceptions import EngineUnavailableError
from digestbench.hashing.registry import AlgorithmRegistry, AlgorithmSpec, build_default_registry


@pytest.fixture(autouse=True)
def reset_services():
    """Each test starts with an empty service container."""
    reset()
    yield
    reset()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and DIGESTBENCH_* variables out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("DIGESTBENCH_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def registry() -> AlgorithmRegistry:
    """The default registry backed by hashlib and pycryptodome."""
    return build_default_registry()


@pytest.fixture
def make_spec() -> Callable[..., AlgorithmSpec]:
    """
    Factory for fake algorithm specs.

    Returns:
        make_spec(name, delay=0.0, digest=None, fail=False, calls=None).
        The fake digest defaults to a fixed-width hex of the input length;
        calls, when given, records every input seen.
    """

    def _make(
        name: str,
        delay: float = 0.0,
        digest: str | None = None,
        fail: bool = False,
        calls: list[str] | None = None,
    ) -> AlgorithmSpec:
        async def compute(text: str) -> str:
            if calls is not None:
                calls.append(text)
            await asyncio.sleep(delay)
            if fail:
                raise EngineUnavailableError("engine offline", algorithm=name, engine="fake")
            return digest if digest is not None else f"{len(text):08x}"

        return AlgorithmSpec(name=name, compute=compute, engine="fake", hex_length=8)

    return _make


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()
