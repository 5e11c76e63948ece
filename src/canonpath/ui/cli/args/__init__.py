"""Command line argument handling package."""

from canonpath.ui.cli.args.parser import ArgumentParser
from canonpath.ui.cli.args.options import CheckArgs, CLIArgs, InitConfigArgs

__all__ = ["ArgumentParser", "CheckArgs", "CLIArgs", "InitConfigArgs"]
