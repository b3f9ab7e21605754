"""Validate command implementation.

Checks a .gitai.yml without loading any plugin, reports problems under the
section they belong to and summarizes the configured plugin chain.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, List

from gitai.cli.commands import Command
from gitai.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_ISSUES_FOUND, EXIT_SUCCESS
from gitai.config.loader import PROJECT_CONFIG_NAMES, find_project_config, load_yaml_file
from gitai.config.validation import (
    ConfigValidationIssue,
    ValidationSeverity,
    validate_config_file,
)
from gitai.core.models import PluginReference

# Section headings, in document order; anything else is listed under "general"
SECTIONS = ("plugins", "formatters", "formatDir", "include", "ignore", "lint", "analyze")


def section_of(issue: ConfigValidationIssue) -> str:
    """Top-level key an issue belongs to: ``plugins[1].path`` -> ``plugins``."""
    if not issue.key:
        return "general"
    head = issue.key.split("[", 1)[0].split(".", 1)[0]
    return head if head in SECTIONS else "general"


class ValidateCommand(Command):
    """Validates .gitai.yml configuration files."""

    @property
    def name(self) -> str:
        return "validate"

    def execute(self, args: Namespace) -> int:
        """Execute the validate command.

        Returns:
            Exit code: 0 = valid, 1 = has errors, 3 = file not found.
        """
        config_path = getattr(args, "config", None)
        if config_path:
            config_path = Path(config_path)
        else:
            config_path = find_project_config(Path.cwd())

        if config_path is None:
            print("No configuration file found.")
            print(f"Looked for: {', '.join(PROJECT_CONFIG_NAMES)} (run `gitai init` to create one)")
            return EXIT_INVALID_USAGE

        if not config_path.exists():
            print(f"Configuration file not found: {config_path}")
            return EXIT_INVALID_USAGE

        is_valid, issues = validate_config_file(config_path)
        print(f"{config_path}:")

        grouped: Dict[str, List[ConfigValidationIssue]] = {}
        for issue in issues:
            grouped.setdefault(section_of(issue), []).append(issue)
        for section in ("general",) + SECTIONS:
            if section in grouped:
                print(f"  [{section}]")
            for issue in grouped.get(section, []):
                print(f"    {self._format_issue(issue)}")

        errors = sum(1 for i in issues if i.severity == ValidationSeverity.ERROR)
        warnings = len(issues) - errors

        if not is_valid:
            print(f"\nInvalid: {errors} error(s), {warnings} warning(s).")
            return EXIT_ISSUES_FOUND

        self._print_plugin_chain(load_yaml_file(config_path))
        print(f"\nValid ({warnings} warning(s)).")
        return EXIT_SUCCESS

    def _format_issue(self, issue: ConfigValidationIssue) -> str:
        return f"{issue.severity.value:<7} {issue}"

    def _print_plugin_chain(self, data: Dict[str, Any]) -> None:
        """List analyzers and formatters in the order they will run."""
        for title, key in (("Analyzers", "plugins"), ("Formatters", "formatters")):
            references = [PluginReference.parse(e) for e in data.get(key) or []]
            if not references:
                print(f"  {title}: (none)")
                continue
            print(f"  {title}:")
            for i, ref in enumerate(references, start=1):
                options = f" (options: {', '.join(sorted(ref.options))})" if ref.options else ""
                kind = "file" if ref.is_relative else "name"
                print(f"    {i}. {ref.path} [{kind}]{options}")

        format_dir = data.get("formatDir")
        if format_dir:
            print(f"  formatDir: {format_dir}")
