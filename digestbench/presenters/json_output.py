"""
JSON presenter for machine-readable output.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any

from ..core.interfaces.presenter import IPresenter
from ..core.models.digest import DigestResult, TestRecord


class JsonPresenter(IPresenter):
    """Writes each result set or record list as one JSON document."""

    def __init__(self, file=None) -> None:
        self._file = file or sys.stdout
        self._cells: dict[str, dict[str, Any]] = {}

    def cell(self, algorithm_name: str) -> dict[str, Any]:
        return self._cells[algorithm_name]

    def show_results(self, results: Sequence[DigestResult]) -> None:
        payload = []
        for result in results:
            entry = result.model_dump()
            self._cells[result.algorithm_name] = entry
            payload.append(entry)
        print(json.dumps(payload, indent=2), file=self._file)

    def show_test_records(self, records: Sequence[TestRecord]) -> None:
        payload = [r.model_dump() for r in records]
        print(json.dumps(payload, indent=2), file=self._file)
