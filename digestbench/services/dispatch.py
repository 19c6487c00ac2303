"""
Digest dispatch service.

Fans one input string out to every registered algorithm concurrently,
times each computation, and fans the results back in registry order.
"""

from __future__ import annotations

import asyncio
import time

from pydantic import ValidationError

from ..core.di import resolve_or_default
from ..core.exceptions import DigestTimeoutError, EngineError
from ..core.interfaces.logger import ILogger
from ..core.models.digest import DigestResult
from ..hashing.registry import AlgorithmRegistry, AlgorithmSpec
from .logging import NullLogger

# Sentinel for the "nothing typed" state. An empty string here means no
# input, not a request for the digest of zero bytes.
NO_INPUT = ""


class DispatchService:
    """
    Runs every registered algorithm over one input.

    Each compute is timed from issue to completion with a monotonic clock.
    A failing algorithm yields a failed DigestResult carrying the error
    message; the remaining algorithms are unaffected.
    """

    def __init__(
        self,
        registry: AlgorithmRegistry,
        logger: ILogger | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize dispatch service.

        Args:
            registry: Algorithms to run, in result order
            logger: Diagnostic logger (defaults to container logger)
            timeout_seconds: Optional per-algorithm timeout; None waits forever
        """
        self._registry = registry
        self._logger = logger or resolve_or_default(ILogger, NullLogger)
        self._timeout = timeout_seconds

    @property
    def registry(self) -> AlgorithmRegistry:
        return self._registry

    async def dispatch(self, text: str) -> list[DigestResult]:
        """
        Digest text with every registered algorithm.

        Args:
            text: Input text; empty means "no input"

        Returns:
            One result per algorithm, in registry order. For empty input
            every result has an empty digest and zero timing, and no
            engine is invoked.
        """
        specs = self._registry.specs
        if text == NO_INPUT:
            return [DigestResult.empty(spec.name) for spec in specs]

        started = time.perf_counter()
        results = await asyncio.gather(*(self._run_one(spec, text) for spec in specs))
        self._logger.debug(
            "Dispatched %d algorithms over %d chars in %.3fs",
            len(specs),
            len(text),
            time.perf_counter() - started,
        )
        return list(results)

    async def _run_one(self, spec: AlgorithmSpec, text: str) -> DigestResult:
        t0 = time.perf_counter()
        try:
            if self._timeout is None:
                hex_digest = await spec.compute(text)
            else:
                hex_digest = await asyncio.wait_for(spec.compute(text), self._timeout)
        except TimeoutError as e:
            error = DigestTimeoutError(
                f"Timed out after {self._timeout}s",
                algorithm=spec.name,
                timeout=self._timeout,
                cause=e,
            )
            self._logger.warning("%s: %s", spec.name, error)
            return DigestResult.failed(spec.name, error.message, time.perf_counter() - t0)
        except EngineError as e:
            self._logger.warning("%s: %s", spec.name, e)
            return DigestResult.failed(spec.name, e.message, time.perf_counter() - t0)
        except Exception as e:
            self._logger.error("%s: unexpected engine failure: %r", spec.name, e)
            return DigestResult.failed(spec.name, str(e) or type(e).__name__, time.perf_counter() - t0)
        elapsed = time.perf_counter() - t0

        if isinstance(hex_digest, str):
            hex_digest = hex_digest.lower()
        try:
            return DigestResult(
                algorithm_name=spec.name,
                hex_digest=hex_digest,
                elapsed_seconds=elapsed,
            )
        except ValidationError:
            self._logger.error("%s: engine returned non-hex output", spec.name)
            return DigestResult.failed(spec.name, "Engine returned non-hex output", elapsed)
