"""
Console presenter for terminal output.

Renders dispatch results as a table of algorithm, digest and time, and
self-test records as marked lines.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from ..core.interfaces.presenter import IPresenter
from ..core.models.digest import DigestResult, TestRecord


@dataclass
class DigestCell:
    """Presentation state for one algorithm.

    Attributes:
        algorithm_name: Algorithm shown in this cell
        output: Digest text currently displayed
        timing: Time text currently displayed
        enabled: Whether the digest can be copied
        error: Error text for a failed computation
    """

    algorithm_name: str
    output: str = ""
    timing: str = ""
    enabled: bool = False
    error: str | None = None

    def update(self, result: DigestResult) -> None:
        self.output = result.hex_digest
        self.timing = result.formatted_elapsed
        self.enabled = result.enabled
        self.error = result.error


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Keeps one DigestCell per algorithm, all disabled until a dispatch
    delivers a digest for them.
    """

    def __init__(
        self,
        algorithm_names: Sequence[str] = (),
        use_color: bool = True,
        show_timing: bool = True,
        file=None,
    ) -> None:
        """
        Initialize console presenter.

        Args:
            algorithm_names: Algorithms to create cells for, in display order
            use_color: Whether to use ANSI color codes
            show_timing: Whether to print the time column
            file: Output file (defaults to sys.stdout)
        """
        self._file = file or sys.stdout
        self._use_color = use_color and hasattr(self._file, "isatty") and self._file.isatty()
        self._show_timing = show_timing
        self._cells: dict[str, DigestCell] = {name: DigestCell(name) for name in algorithm_names}

    def cell(self, algorithm_name: str) -> DigestCell:
        return self._cells[algorithm_name]

    def show_results(self, results: Sequence[DigestResult]) -> None:
        """Update cells and print them as a table in result order."""
        for result in results:
            cell = self._cells.setdefault(result.algorithm_name, DigestCell(result.algorithm_name))
            cell.update(result)

        headers = ["Algorithm", "Digest"]
        if self._show_timing:
            headers.append("Time")
        rows = []
        for result in results:
            cell = self._cells[result.algorithm_name]
            output = cell.output if cell.error is None else f"<error: {cell.error}>"
            row = [f"{cell.algorithm_name}:", output]
            if self._show_timing:
                row.append(cell.timing)
            rows.append(row)
        self.print_table(headers, rows)

    def show_test_records(self, records: Sequence[TestRecord]) -> None:
        """Print one line per self-test record."""
        for record in records:
            if self._use_color:
                color = "\033[92m" if record.passed else "\033[91m"
                print(f"{color}{record.line}\033[0m", file=self._file)
            else:
                print(record.line, file=self._file)
        passed = sum(1 for r in records if r.passed)
        print(f"\n{passed}/{len(records)} checks passed", file=self._file)

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a formatted table.

        Args:
            headers: Column headers
            rows: Table rows
        """
        if not rows:
            return

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = "  ".join(str(h).ljust(widths[i]) for i, h in enumerate(headers))
        if self._use_color:
            print(f"\033[1m{header_line}\033[0m", file=self._file)
        else:
            print(header_line, file=self._file)

        print("-" * len(header_line), file=self._file)

        for row in rows:
            row_line = "  ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            )
            print(row_line.rstrip(), file=self._file)
