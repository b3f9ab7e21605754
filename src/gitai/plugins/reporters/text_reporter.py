"""Plain-text reporter: findings grouped by file."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Dict, List, Sequence

from gitai.core.models import Finding, FormatResult
from gitai.plugins.reporters.base import Reporter, display_path, plugin_display_name


class TextReporter(Reporter):
    """Human-readable output for terminals.

    Findings are grouped by file in the order the engine returned them;
    within a file they keep plugin order.
    """

    @property
    def name(self) -> str:
        return "text"

    def report_findings(self, findings: Sequence[Finding], output: IO[str], root: Path) -> None:
        if not findings:
            output.write("No issues found.\n")
            return

        by_file: Dict[Path, List[Finding]] = {}
        for finding in findings:
            by_file.setdefault(finding.file, []).append(finding)

        for file, items in by_file.items():
            output.write(f"{display_path(file, root)}\n")
            for finding in items:
                output.write(
                    f"  {finding.severity.value} {plugin_display_name(finding.plugin)}:"
                    f"{finding.line} - {finding.message}\n"
                )

        counts = {sev: 0 for sev in ("error", "warning", "info")}
        for finding in findings:
            counts[finding.severity.value] += 1
        output.write(
            f"\n{len(findings)} problems "
            f"({counts['error']} errors, {counts['warning']} warnings, {counts['info']} info)\n"
        )

    def report_format(self, result: FormatResult, output: IO[str], root: Path) -> None:
        for plugin, paths in result.by_plugin.items():
            label = plugin_display_name(plugin)
            if paths:
                output.write(f"{label} changed {len(paths)} file(s):\n")
                for path in paths:
                    output.write(f"  * {display_path(path, root)}\n")
            else:
                output.write(f"{label}: no changes needed.\n")

        if not result.by_plugin:
            output.write("No formatters configured.\n")
        elif result.modified:
            output.write(f"\n{len(result.modified)} file(s) formatted.\n")
