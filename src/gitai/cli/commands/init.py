"""Init command implementation.

Writes a default .gitai.yml into the project directory.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

import questionary
from questionary import Style

from gitai.cli.commands import Command
from gitai.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from gitai.config.loader import find_project_config, write_default_config
from gitai.core.logging import get_logger

LOGGER = get_logger(__name__)

STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
])


class InitCommand(Command):
    """Creates the project configuration file."""

    @property
    def name(self) -> str:
        return "init"

    def execute(self, args: Namespace) -> int:
        """Execute the init command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.
        """
        project_root = Path(args.path).resolve()

        if not project_root.is_dir():
            print(f"Error: {project_root} is not a directory")
            return EXIT_INVALID_USAGE

        existing = find_project_config(project_root)
        if existing is not None and not args.force:
            if args.non_interactive:
                print(f"Error: {existing} already exists. Use --force to overwrite.")
                return EXIT_INVALID_USAGE

            overwrite = questionary.confirm(
                f"{existing.name} already exists. Overwrite?",
                default=False,
                style=STYLE,
            ).ask()

            if not overwrite:
                print("Aborted.")
                return EXIT_SUCCESS

        config_path = write_default_config(project_root)
        print(f"Created {config_path.relative_to(project_root)}")
        print("\nNext steps:")
        print("  1. Add analyzers under 'plugins' and formatters under 'formatters'")
        print("  2. Run 'gitai analyze' to check your code")
        return EXIT_SUCCESS
