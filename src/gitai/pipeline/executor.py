"""Engine entry points: one orchestration run per call.

Each run loads the configured plugins, resolves the target to files, runs
the plugins and returns the aggregate. Every error propagates to the
caller; there is no partial result.
"""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import List, Optional, Union

from gitai.config.ignore import load_ignore_patterns
from gitai.config.models import GitaiConfig
from gitai.core.logging import get_logger
from gitai.core.models import Capability, Finding, FormatResult
from gitai.pipeline.analysis import run_analysis
from gitai.pipeline.formatting import run_format
from gitai.pipeline.resolver import resolve
from gitai.plugins.registry import load_plugins

LOGGER = get_logger(__name__)

# Target meaning "the project", replaced by formatDir when configured
DEFAULT_TARGET = "."


def analyze(
    target: Union[str, Path],
    config: GitaiConfig,
    root: Optional[Path] = None,
) -> List[Finding]:
    """Run the configured analyzers over a file or directory.

    Args:
        target: File or directory, relative to ``root``.
        config: Project configuration.
        root: Project root (defaults to the current directory).

    Returns:
        Findings grouped by file, then by plugin registration order.
    """
    root = Path(os.path.abspath(root or Path.cwd()))
    start = time.monotonic()

    plugins = load_plugins(config.plugins, root, Capability.ANALYZE)
    files = resolve(
        target,
        root=root,
        include=config.include,
        ignore=load_ignore_patterns(root, config.ignore),
    )
    LOGGER.info(f"Analyzing {len(files)} files with {len(plugins)} plugins")

    findings = run_analysis(files, plugins, config=config.data, root=root)

    duration_ms = int((time.monotonic() - start) * 1000)
    LOGGER.info(f"Analysis finished in {duration_ms} ms: {len(findings)} findings")
    return findings


def fmt(
    target: Union[str, Path],
    config: GitaiConfig,
    root: Optional[Path] = None,
) -> FormatResult:
    """Run the configured formatters over a file or directory.

    When ``target`` is ``"."`` and ``formatDir`` is configured, the format
    directory is used instead.

    Args:
        target: File or directory, relative to ``root``.
        config: Project configuration.
        root: Project root (defaults to the current directory).

    Returns:
        FormatResult with every modified path listed once.
    """
    root = Path(os.path.abspath(root or Path.cwd()))
    start = time.monotonic()

    formatters = load_plugins(config.formatters, root, Capability.FORMAT)
    if str(target) == DEFAULT_TARGET and config.format_dir:
        LOGGER.debug(f"Using formatDir {config.format_dir}")
        target = config.format_dir

    files = resolve(
        target,
        root=root,
        include=config.include,
        ignore=load_ignore_patterns(root, config.ignore),
    )
    LOGGER.info(f"Formatting {len(files)} files with {len(formatters)} formatters")

    result = run_format(files, formatters, config=config.data, root=root)

    duration_ms = int((time.monotonic() - start) * 1000)
    LOGGER.info(f"Formatting finished in {duration_ms} ms: {len(result)} files changed")
    return result
