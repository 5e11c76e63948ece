"""Command execution package for CLI."""

from canonpath.ui.cli.commands.check import CheckCommand
from canonpath.ui.cli.commands.init_config import InitConfigCommand

__all__ = ["CheckCommand", "InitConfigCommand"]
