"""Command line interface for canonpath."""

import sys
from typing import final

from canonpath.platform.logging import logger
from canonpath.ui.cli.args import ArgumentParser
from canonpath.ui.cli.args.options import CheckArgs, CLIArgs, InitConfigArgs
from canonpath.ui.cli.commands import CheckCommand, InitConfigCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CheckArgs):
                results = CheckCommand(args).execute()
                if any(not r.success for r in results):
                    sys.exit(1)
                return

            assert isinstance(args, InitConfigArgs)
            _ = InitConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
