"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from canonpath.shared.policies import CurrentDirPolicy


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for the ``check`` subcommand."""

    command: Literal["check"]
    paths: list[str]
    current_dir_policy: CurrentDirPolicy
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    path: Path | None
    force: bool


CLIArgs = CheckArgs | InitConfigArgs

__all__ = ["CLIArgs", "CheckArgs", "InitConfigArgs"]
