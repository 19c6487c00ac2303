"""
digestbench: multi-algorithm text digests.

Library entry points:

    from digestbench import DispatchService, build_default_registry

    service = DispatchService(build_default_registry())
    results = await service.dispatch("abc")
"""

from .core.models.digest import DigestResult, TestRecord
from .hashing.registry import AlgorithmRegistry, AlgorithmSpec, build_default_registry
from .services.dispatch import DispatchService
from .services.selftest import SelfTestRunner

__all__ = [
    "AlgorithmRegistry",
    "AlgorithmSpec",
    "DigestResult",
    "DispatchService",
    "SelfTestRunner",
    "TestRecord",
    "build_default_registry",
]
