"""
Presenter interface definitions for output formatting.

The presenter is the sink for dispatch results and self-test records.
It owns a mapping from algorithm name to an opaque cell handle so that
the dispatch core never touches presentation state directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ..models.digest import DigestResult, TestRecord


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations handle formatting and displaying output
    to the user in various formats (console, JSON, etc.).
    """

    @abstractmethod
    def cell(self, algorithm_name: str) -> Any:
        """
        Return the presentation handle for one algorithm.

        Raises:
            KeyError: If the presenter has no cell for the algorithm
        """
        pass

    @abstractmethod
    def show_results(self, results: Sequence[DigestResult]) -> None:
        """
        Render one dispatch's results.

        Each cell is enabled iff its result carries a non-empty digest.

        Args:
            results: Results in registry order
        """
        pass

    @abstractmethod
    def show_test_records(self, records: Sequence[TestRecord]) -> None:
        """
        Render self-test records.

        Args:
            records: Records in checklist order
        """
        pass
