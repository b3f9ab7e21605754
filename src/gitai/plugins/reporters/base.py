"""Base class for reporters."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Sequence

from gitai.core.models import Finding, FormatResult


def display_path(path: Path, root: Path) -> str:
    """Path relative to ``root`` when possible, for display."""
    try:
        return os.path.relpath(path, root)
    except ValueError:
        return str(path)


def plugin_display_name(plugin: str) -> str:
    """Short plugin label: ``./rules/no_todo.py`` -> ``no_todo``."""
    return Path(plugin).stem or plugin


class Reporter(ABC):
    """Renders engine results for the presentation layer.

    Each reporter implements one output format.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Reporter identifier (e.g., 'text', 'json')."""

    @abstractmethod
    def report_findings(self, findings: Sequence[Finding], output: IO[str], root: Path) -> None:
        """Write the findings of an analysis run.

        Args:
            findings: Findings, in engine order.
            output: Output stream to write to.
            root: Project root, for relative path display.
        """

    @abstractmethod
    def report_format(self, result: FormatResult, output: IO[str], root: Path) -> None:
        """Write the change summary of a format run."""
