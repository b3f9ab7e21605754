"""CLI runner orchestration.

This module handles command dispatch and execution for the gitai CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Dict, Iterable, Optional

from gitai.cli.arguments import build_parser
from gitai.cli.commands import Command
from gitai.cli.commands.analyze import AnalyzeCommand
from gitai.cli.commands.fmt import FmtCommand
from gitai.cli.commands.init import InitCommand
from gitai.cli.commands.plugins import PluginsCommand
from gitai.cli.commands.validate import ValidateCommand
from gitai.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from gitai.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get gitai version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("gitai")
    except PackageNotFoundError:
        # Running from a source checkout without installed metadata.
        from gitai import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self._version = get_version()
        commands = [
            InitCommand(),
            AnalyzeCommand(),
            FmtCommand(),
            ValidateCommand(),
            PluginsCommand(),
        ]
        self.commands: Dict[str, Command] = {cmd.name: cmd for cmd in commands}

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None
        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits 0 after --help and 2 on usage errors
            return EXIT_SUCCESS if e.code in (0, None) else EXIT_INVALID_USAGE

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = self.commands.get(getattr(args, "command", None) or "")
        if command is None:
            # No command specified - show help
            self.parser.print_help()
            return EXIT_SUCCESS

        LOGGER.debug(f"Running command {command.name}")
        return command.execute(args)
