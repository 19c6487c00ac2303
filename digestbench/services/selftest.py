"""
Known-answer self-test.

Runs a fixed checklist against the algorithm registry: exact vectors for
MD5, SHA-1 and SHA-256, output-length checks for everything else. Every
check runs regardless of earlier failures.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.di import resolve_or_default
from ..core.exceptions import DigestBenchException
from ..core.interfaces.logger import ILogger
from ..core.models.digest import TestRecord
from ..hashing.registry import AlgorithmRegistry
from .logging import NullLogger

KNOWN_VECTORS: dict[tuple[str, str], str] = {
    ("MD5", ""): "d41d8cd98f00b204e9800998ecf8427e",
    ("MD5", "abc"): "900150983cd24fb0d6963f7d28e17f72",
    ("SHA-1", ""): "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    ("SHA-1", "abc"): "a9993e364706816aba3e25717850c26c9cd0d89d",
    ("SHA-256", ""): "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    ("SHA-256", "abc"): "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
}

LENGTH_CHECKS: tuple[tuple[str, int], ...] = (
    ("SHA-224", 56),
    ("SHA-384", 96),
    ("SHA-512", 128),
    ("SHA3-224", 56),
    ("SHA3-256", 64),
    ("SHA3-384", 96),
    ("SHA3-512", 128),
)


@dataclass(frozen=True)
class Check:
    """One checklist entry: either an exact vector or a length."""

    description: str
    algorithm: str
    text: str
    expected: str | None = None
    expected_length: int | None = None

    @property
    def detail(self) -> str | None:
        if self.expected_length is None:
            return None
        return f"expect {self.expected_length} hex chars"


def default_checklist() -> list[Check]:
    """Vector checks in table order, then empty-input length checks."""
    checks = [
        Check(f'{algorithm}("{text}")', algorithm, text, expected=digest)
        for (algorithm, text), digest in KNOWN_VECTORS.items()
    ]
    checks.extend(
        Check(f"{algorithm} length (empty)", algorithm, "", expected_length=length)
        for algorithm, length in LENGTH_CHECKS
    )
    return checks


class SelfTestRunner:
    """Runs the known-answer checklist on demand."""

    def __init__(
        self,
        registry: AlgorithmRegistry,
        checklist: list[Check] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._registry = registry
        self._checklist = checklist if checklist is not None else default_checklist()
        self._logger = logger or resolve_or_default(ILogger, NullLogger)

    async def run_tests(self) -> list[TestRecord]:
        """
        Run every check in order.

        Returns:
            One TestRecord per check. Mismatches and engine errors are
            recorded as failures, never raised.
        """
        records = []
        for check in self._checklist:
            records.append(await self._run_check(check))
        failed = sum(1 for r in records if not r.passed)
        if failed:
            self._logger.warning("Self-test: %d of %d checks failed", failed, len(records))
        else:
            self._logger.info("Self-test: all %d checks passed", len(records))
        return records

    async def _run_check(self, check: Check) -> TestRecord:
        # Digest the literal input; the dispatch no-input branch does not apply here
        try:
            actual = await self._registry.compute(check.algorithm, check.text)
        except DigestBenchException as e:
            self._logger.warning("Self-test %s errored: %s", check.description, e)
            return TestRecord(description=check.description, passed=False, detail=e.message)
        except Exception as e:
            self._logger.error("Self-test %s raised: %r", check.description, e)
            return TestRecord(description=check.description, passed=False, detail=str(e) or type(e).__name__)

        if check.expected is not None:
            passed = actual == check.expected
        else:
            passed = len(actual) == check.expected_length
        return TestRecord(description=check.description, passed=passed, detail=check.detail)
