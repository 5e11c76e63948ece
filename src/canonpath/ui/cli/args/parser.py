"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from canonpath.config.config import Config
from canonpath.config.settings import resolve_current_dir_policy
from canonpath.platform.logging import logger, setup_logger
from canonpath.shared.policies import CurrentDirPolicy
from canonpath.ui.cli.args.options import CheckArgs, CLIArgs, InitConfigArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="canonpath",
            description="canonpath - Validate relative file paths and print their canonical form.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        check_parser = subparsers.add_parser(
            "check",
            help="Validate paths and show their canonical form",
        )
        _ = check_parser.add_argument(
            "paths",
            type=str,
            nargs="+",
            help="Relative paths to validate",
            metavar="PATH",
        )
        _ = check_parser.add_argument(
            "--elide-current-dir",
            action="store_true",
            help="Drop '.' components after the first instead of rejecting them",
        )
        _ = check_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed validation information",
        )
        _ = check_parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = check_parser.add_argument(
            "--log-file",
            type=str,
            help="Also write logs to this file",
            metavar="FILE",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a configuration file with default values",
        )
        _ = init_parser.add_argument(
            "--path",
            type=str,
            help="Destination file (defaults to the configured location)",
            metavar="FILE",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments cannot be parsed.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.log_level_number

        log_file_arg: str | None = getattr(parsed_args, "log_file", None)
        log_file_path = Path(log_file_arg) if log_file_arg else configuration.log_file
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "check":
            return ArgumentParser._process_check(parsed_args)

        if command == "init-config":
            return ArgumentParser._process_init_config(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_check(parsed_args: argparse.Namespace) -> CheckArgs:
        override = CurrentDirPolicy.ELIDE if parsed_args.elide_current_dir else None
        policy = resolve_current_dir_policy(override)
        return CheckArgs(
            command="check",
            paths=list(parsed_args.paths),
            current_dir_policy=policy,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_init_config(parsed_args: argparse.Namespace) -> InitConfigArgs:
        return InitConfigArgs(
            command="init-config",
            path=Path(parsed_args.path) if parsed_args.path else None,
            force=parsed_args.force,
        )


__all__ = ["ArgumentParser"]
