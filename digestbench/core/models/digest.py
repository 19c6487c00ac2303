"""
Digest result models.

DigestResult is produced once per algorithm per dispatch, TestRecord once
per self-test check. Both are immutable and discarded after presentation.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, computed_field

from .base import ImmutableModel

HexDigest = Annotated[str, Field(pattern=r"^[0-9a-f]*$")]


class DigestResult(ImmutableModel):
    """Outcome of one algorithm for one dispatched input."""

    algorithm_name: str
    hex_digest: HexDigest = ""
    elapsed_seconds: Annotated[float, Field(ge=0.0)] = 0.0
    error: str | None = None

    @classmethod
    def empty(cls, algorithm_name: str) -> DigestResult:
        """Result for the "nothing typed" state: no digest, no timing."""
        return cls(algorithm_name=algorithm_name)

    @classmethod
    def failed(cls, algorithm_name: str, error: str, elapsed_seconds: float = 0.0) -> DigestResult:
        """Result for an algorithm whose engine raised."""
        return cls(
            algorithm_name=algorithm_name,
            elapsed_seconds=max(elapsed_seconds, 0.0),
            error=error,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def enabled(self) -> bool:
        """Whether the digest can be copied (non-empty digest)."""
        return bool(self.hex_digest)

    @property
    def formatted_elapsed(self) -> str:
        """Elapsed seconds with millisecond resolution, or '' with no digest."""
        if not self.hex_digest:
            return ""
        return f"{self.elapsed_seconds:.3f} s"


class TestRecord(ImmutableModel):
    """Outcome of one self-test check."""

    __test__ = False  # not a pytest test class

    description: str
    passed: bool
    detail: str | None = None

    @property
    def marker(self) -> str:
        return "[OK]" if self.passed else "[FAILED]"

    @property
    def line(self) -> str:
        """Human-readable line, e.g. '[OK] MD5("abc")'."""
        text = f"{self.marker} {self.description}"
        if self.detail:
            text += f" - {self.detail}"
        return text
