"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from canonpath.ui.cli.models import CheckResult


def render_check_summary(
    console: Console,
    results: Sequence[CheckResult],
    header_label: str,
    total_label: str,
    success_label: str,
    failure_label: str,
) -> None:
    """Render a formatted summary of check outcomes.

    Args:
        console: Rich console instance used to render output.
        results: Sequence of check results to summarize.
        header_label: Label rendered in the summary header.
        total_label: Label describing the total count of checked paths.
        success_label: Label describing the count of valid paths.
        failure_label: Label describing the count of invalid paths.
    """
    success_count = sum(1 for result in results if result.success)
    failure_results = [result for result in results if not result.success]
    total_count = len(results)

    console.print(f"\n[bold]{header_label}:[/bold]")
    console.print(f"{total_label}: {total_count}")
    console.print(f"[green]{success_label}: {success_count}[/green]")

    if not failure_results:
        return

    console.print(f"[red]{failure_label}: {len(failure_results)}[/red]")
    for failed_result in failure_results:
        console.print(
            f"[red]  • {escape(failed_result.source)}: {escape(str(failed_result.error))}[/red]"
        )
