"""Argument parser construction for the gitai CLI.

Subcommands:
- gitai init     - Create .gitai.yml
- gitai analyze  - Run analyzer plugins
- gitai fmt      - Run formatter plugins
- gitai validate - Check .gitai.yml
- gitai plugins  - List plugins registered by name
"""

from __future__ import annotations

import argparse
from pathlib import Path

from gitai.core.models import Severity
from gitai.plugins.reporters import list_available_reporters


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show gitai version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .gitai.yml in the current directory).",
    )


def _build_init_parser(subparsers: argparse._SubParsersAction) -> None:
    init_parser = subparsers.add_parser(
        "init",
        help="Create a .gitai.yml in your repo.",
        description="Write a default .gitai.yml configuration file.",
    )
    init_parser.add_argument(
        "--non-interactive", "-y",
        action="store_true",
        help="Never prompt; fail if the file already exists.",
    )
    init_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite an existing configuration file.",
    )
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory to initialize (default: current directory).",
    )


def _build_analyze_parser(subparsers: argparse._SubParsersAction) -> None:
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Run the configured analyzer plugins.",
        description="Run every analyzer from .gitai.yml over a file or directory.",
    )
    analyze_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="File or directory to analyze (default: current directory).",
    )
    analyze_parser.add_argument(
        "--output",
        choices=list_available_reporters(),
        default="text",
        help="Output format (default: text).",
    )
    analyze_parser.add_argument(
        "--fail-on",
        choices=[s.value for s in Severity],
        default=Severity.INFO.value,
        help="Exit with code 1 if findings at or above this severity exist (default: info).",
    )
    _add_config_option(analyze_parser)


def _build_fmt_parser(subparsers: argparse._SubParsersAction) -> None:
    fmt_parser = subparsers.add_parser(
        "fmt",
        help="Run the configured formatter plugins.",
        description=(
            "Run every formatter from .gitai.yml, in order, over a file or "
            "directory. With no path, formatDir is used when configured."
        ),
    )
    fmt_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="File or directory to format (default: formatDir or current directory).",
    )
    fmt_parser.add_argument(
        "--output",
        choices=list_available_reporters(),
        default="text",
        help="Output format (default: text).",
    )
    _add_config_option(fmt_parser)


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate the configuration file.",
        description="Check .gitai.yml for errors and likely mistakes.",
    )
    _add_config_option(validate_parser)


def _build_plugins_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "plugins",
        help="List plugins that can be referenced by name.",
        description="List analyzers and formatters registered through entry points.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the gitai CLI."""
    parser = argparse.ArgumentParser(
        prog="gitai",
        description="gitai - pluggable code-quality orchestration.",
        epilog=(
            "Examples:\n"
            "  gitai init                 # Create .gitai.yml\n"
            "  gitai analyze src          # Analyze a directory\n"
            "  gitai analyze --output json\n"
            "  gitai fmt                  # Format formatDir or the project\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands:",
        metavar="COMMAND",
    )

    _build_init_parser(subparsers)
    _build_analyze_parser(subparsers)
    _build_fmt_parser(subparsers)
    _build_validate_parser(subparsers)
    _build_plugins_parser(subparsers)

    return parser
