"""src/canonpath/ui/cli/commands/init_config.py
What: Write a commented configuration file with default values.
Why: Give users a starting point for the settings the CLI and library read.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console

from canonpath.config.config import Config
from canonpath.config.paths import default_config_path, default_log_file
from canonpath.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Run the ``init-config`` subcommand."""

    def __init__(self, args: InitConfigArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> Path | None:
        """Write the file unless one exists and ``--force`` was not given.

        Returns:
            Path | None: The written file, or ``None`` if nothing was written.
        """
        target = self._args.path or default_config_path()
        if target.exists() and not self._args.force:
            self._console.print(
                f"[yellow]Configuration already exists at {target} (use --force to overwrite)[/yellow]"
            )
            return None

        written = Config(log_file=default_log_file()).save(target)
        self._console.print(f"[green]Configuration written to {written}[/green]")
        return written


__all__ = ["InitConfigCommand"]
