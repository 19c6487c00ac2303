"""
Pydantic models for digestbench.

Results, self-test records and configuration sections.
"""

from .base import DigestBenchBaseModel, ImmutableModel
from .config import (
    DigestBenchConfig,
    DispatchConfig,
    LoggingConfig,
    OutputConfig,
    TextConfig,
)
from .digest import DigestResult, TestRecord

__all__ = [
    "DigestBenchBaseModel",
    "DigestBenchConfig",
    "DigestResult",
    "DispatchConfig",
    "ImmutableModel",
    "LoggingConfig",
    "OutputConfig",
    "TestRecord",
    "TextConfig",
]
