"""
Interface definitions for digestbench services.

Abstract base classes for the collaborators the dispatch core depends on:
digest engines, the presentation sink and the diagnostic logger.
"""

from .engine import IBinaryDigestEngine, ITextDigestEngine, TextDigestOptions
from .logger import ILogger
from .presenter import IPresenter

__all__ = [
    "IBinaryDigestEngine",
    "ILogger",
    "IPresenter",
    "ITextDigestEngine",
    "TextDigestOptions",
]
