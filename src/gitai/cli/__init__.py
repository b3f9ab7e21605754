"""Command-line interface for gitai."""

from __future__ import annotations

from typing import Iterable, Optional

from gitai.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use with ``sys.exit``.
    """
    runner = CLIRunner()
    return runner.run(argv)


__all__ = ["main", "CLIRunner"]
