"""src/canonpath/ui/cli/display/report.py
What: Render the per-path table and summary for the ``check`` subcommand.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from canonpath.ui.cli.models import CheckResult

from .summary import render_check_summary


@final
class CheckDisplay:
    """Handles check result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(
        self,
        results: Sequence[CheckResult],
        *,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        """Display check results.

        Args:
            results: One result per checked path.
            verbose: Also print the error kind column.
            quiet: Suppress everything but the failures.
        """
        if quiet:
            for result in results:
                if not result.success:
                    self.console.print(Text(f"{result.source}: {result.error}", style="red"))
            return

        self.console.print(self._build_table(results, verbose=verbose))
        render_check_summary(
            console=self.console,
            results=results,
            header_label="Check Summary",
            total_label="Total paths checked",
            success_label="Valid",
            failure_label="Invalid",
        )

    def _build_table(self, results: Sequence[CheckResult], *, verbose: bool) -> Table:
        table = Table(
            title="Path Check",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Input", style="bold")
        table.add_column("Canonical")
        table.add_column("Status")
        if verbose:
            table.add_column("Kind", style="dim")

        for result in results:
            cells = [Text(result.source), self._format_canonical(result), self._format_status(result)]
            if verbose:
                cells.append(Text(result.error.kind.value if result.error is not None else ""))
            table.add_row(*cells)

        return table

    @staticmethod
    def _format_canonical(result: CheckResult) -> Text:
        if result.canonical is None:
            return Text("N/A", style="dim")
        if result.canonical.as_str() == result.source:
            return Text(result.canonical.as_str(), style="green")
        return Text(result.canonical.as_str(), style="cyan")

    @staticmethod
    def _format_status(result: CheckResult) -> Text:
        if result.error is None:
            return Text("valid", style="green")
        return Text(str(result.error), style="red")


__all__ = ["CheckDisplay"]
