"""
Click command implementations for digestbench CLI.

Each module corresponds to a digestbench command (e.g., hash.py
implements 'digestbench hash'). Commands are registered with the main
CLI group via register_commands() in digestbench.cli.
"""

from .algorithms import algorithms
from .config import config
from .copy import copy
from .hash import hash_text
from .selftest import selftest
from .watch import watch

COMMANDS = [
    algorithms,
    config,
    copy,
    hash_text,
    selftest,
    watch,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "copy",
    "hash_text",
    "selftest",
    "watch",
]
