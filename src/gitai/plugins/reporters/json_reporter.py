"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import IO, Any, Dict, Sequence

from gitai import __version__
from gitai.core.models import Finding, FormatResult
from gitai.plugins.reporters.base import Reporter

SCHEMA_VERSION = "1"


class JSONReporter(Reporter):
    """Reporter that writes results as a JSON document.

    Paths are absolute, as produced by the engine.
    """

    @property
    def name(self) -> str:
        return "json"

    def report_findings(self, findings: Sequence[Finding], output: IO[str], root: Path) -> None:
        document: Dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "gitai_version": __version__,
            "root": str(root),
            "findings": [self._finding_to_dict(f) for f in findings],
        }
        json.dump(document, output, indent=2)
        output.write("\n")

    def report_format(self, result: FormatResult, output: IO[str], root: Path) -> None:
        document: Dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "gitai_version": __version__,
            "root": str(root),
            "modified": [str(p) for p in result.modified],
            "by_plugin": {
                plugin: [str(p) for p in paths]
                for plugin, paths in result.by_plugin.items()
            },
        }
        json.dump(document, output, indent=2)
        output.write("\n")

    def _finding_to_dict(self, finding: Finding) -> Dict[str, Any]:
        return {
            "file": str(finding.file),
            "line": finding.line,
            "severity": finding.severity.value,
            "message": finding.message,
            "plugin": finding.plugin,
        }
