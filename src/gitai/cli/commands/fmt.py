"""Fmt command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from gitai.cli.commands import Command
from gitai.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_PLUGIN_ERROR, EXIT_SUCCESS
from gitai.config.loader import load_config
from gitai.core.errors import ConfigError, PluginError
from gitai.core.logging import get_logger
from gitai.pipeline.executor import fmt
from gitai.plugins.reporters import get_reporter

LOGGER = get_logger(__name__)


class FmtCommand(Command):
    """Runs the configured formatters in order."""

    @property
    def name(self) -> str:
        return "fmt"

    def execute(self, args: Namespace) -> int:
        project_root = Path.cwd().resolve()

        try:
            config = load_config(project_root, getattr(args, "config", None))
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        try:
            result = fmt(args.path, config, root=project_root)
        except PluginError as e:
            # Formatters that ran before the failure may have changed files
            LOGGER.error(str(e))
            return EXIT_PLUGIN_ERROR

        reporter = get_reporter(getattr(args, "output", "text"))
        if reporter is None:
            LOGGER.error(f"Unknown output format: {args.output}")
            return EXIT_INVALID_USAGE
        reporter.report_format(result, sys.stdout, project_root)
        return EXIT_SUCCESS
