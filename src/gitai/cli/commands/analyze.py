"""Analyze command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from gitai.cli.commands import Command
from gitai.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_ISSUES_FOUND,
    EXIT_PLUGIN_ERROR,
    EXIT_SUCCESS,
)
from gitai.config.loader import load_config
from gitai.core.errors import ConfigError, PluginError
from gitai.core.logging import get_logger
from gitai.core.models import Severity
from gitai.pipeline.executor import analyze
from gitai.plugins.reporters import get_reporter

LOGGER = get_logger(__name__)


class AnalyzeCommand(Command):
    """Runs the configured analyzers and reports their findings."""

    @property
    def name(self) -> str:
        return "analyze"

    def execute(self, args: Namespace) -> int:
        """Execute the analyze command.

        Returns:
            Exit code: 0 = clean, 1 = findings at or above ``--fail-on``,
            2 = a plugin failed, 3 = configuration problem.
        """
        project_root = Path.cwd().resolve()

        try:
            config = load_config(project_root, getattr(args, "config", None))
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        try:
            findings = analyze(args.path, config, root=project_root)
        except PluginError as e:
            LOGGER.error(str(e))
            return EXIT_PLUGIN_ERROR

        reporter = get_reporter(getattr(args, "output", "text"))
        if reporter is None:
            LOGGER.error(f"Unknown output format: {args.output}")
            return EXIT_INVALID_USAGE
        reporter.report_findings(findings, sys.stdout, project_root)

        threshold = Severity.parse(getattr(args, "fail_on", Severity.INFO.value))
        if any(f.severity >= threshold for f in findings):
            return EXIT_ISSUES_FOUND
        return EXIT_SUCCESS
