"""
Services for digestbench.

Dispatch, debouncing, interactive sessions, the self-test runner and
diagnostic logging.
"""

from .debounce import DEFAULT_DEBOUNCE_MS, Debouncer
from .dispatch import NO_INPUT, DispatchService
from .logging import DigestBenchLogger, NullLogger
from .selftest import KNOWN_VECTORS, Check, SelfTestRunner, default_checklist
from .session import DigestSession

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "KNOWN_VECTORS",
    "NO_INPUT",
    "Check",
    "Debouncer",
    "DigestBenchLogger",
    "DigestSession",
    "DispatchService",
    "NullLogger",
    "SelfTestRunner",
    "default_checklist",
]
