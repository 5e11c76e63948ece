"""src/canonpath/ui/cli/commands/check.py
What: Validate every path given on the command line.
Why: Keep per-path failures from aborting the remaining checks.
"""

from __future__ import annotations

from typing import final

from canonpath.features.path import FilePathError, validate_and_canonicalize
from canonpath.ui.cli.args.options import CheckArgs
from canonpath.ui.cli.display.report import CheckDisplay
from canonpath.ui.cli.models import CheckResult


@final
class CheckCommand:
    """Run the ``check`` subcommand."""

    def __init__(self, args: CheckArgs, *, display: CheckDisplay | None = None) -> None:
        self._args = args
        self._display = display or CheckDisplay()

    def execute(self) -> list[CheckResult]:
        """Validate each path and render the report.

        Returns:
            list[CheckResult]: One result per input path, in input order.
        """
        results = [self._check(path) for path in self._args.paths]
        self._display.show_results(results, verbose=self._args.verbose, quiet=self._args.quiet)
        return results

    def _check(self, path: str) -> CheckResult:
        try:
            canonical = validate_and_canonicalize(
                path, current_dir_policy=self._args.current_dir_policy
            )
        except FilePathError as e:
            return CheckResult(source=path, error=e)
        return CheckResult(source=path, canonical=canonical)


__all__ = ["CheckCommand"]
