"""
Output presenters for digestbench CLI.

Implements different output formats (console, JSON)
following the Strategy pattern.
"""

from .console import ConsolePresenter, DigestCell
from .json_output import JsonPresenter

__all__ = ["ConsolePresenter", "DigestCell", "JsonPresenter"]
