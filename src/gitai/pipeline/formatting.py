"""Format runner: applies formatter plugins to the whole file set."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from gitai.core.errors import PluginInvocationError
from gitai.core.logging import get_logger
from gitai.core.models import Capability, FormatInvocation, FormatResult, PluginHandle
from gitai.pipeline.analysis import is_result_sequence

LOGGER = get_logger(__name__)


def run_format(
    files: Sequence[Path],
    plugins: Sequence[PluginHandle],
    config: Optional[Mapping[str, Any]] = None,
    root: Optional[Path] = None,
) -> FormatResult:
    """Run every formatter, in order, over the full file set.

    Formatters rewrite files on disk, so each one sees what the previous
    ones wrote. Each returns the paths it actually changed; the union is
    reported once per path.

    Args:
        files: Resolved files.
        plugins: Loaded formatter handles.
        config: Global configuration passed to every formatter.
        root: Project root; relative paths returned by formatters are
            resolved against it.

    Returns:
        FormatResult with the modified paths.

    Raises:
        PluginInvocationError: If a formatter raises or returns malformed
            data. Remaining formatters are skipped; earlier changes stay on
            disk.
    """
    config = config if config is not None else {}
    root = root or Path.cwd()
    result = FormatResult()

    if not files:
        LOGGER.debug("No files to format")
        return result

    for plugin in plugins:
        invocation = FormatInvocation(
            files=list(files),
            config=config,
            options=plugin.options,
            root=root,
        )
        LOGGER.debug(f"Running {plugin.name} on {len(files)} files")
        try:
            returned = plugin.function(invocation)
            items = list(returned) if is_result_sequence(returned) else None
        except Exception as e:
            raise PluginInvocationError(
                plugin.name, Capability.FORMAT.value, str(e) or type(e).__name__
            ) from e

        if items is None:
            raise PluginInvocationError(
                plugin.name,
                Capability.FORMAT.value,
                f"expected a list of paths, got {type(returned).__name__}",
            )

        changed = _normalize_paths(items, plugin, root)
        LOGGER.debug(f"{plugin.name}: {len(changed)} files changed")
        result.add(plugin.name, changed)

    return result


def _normalize_paths(items: List[Any], plugin: PluginHandle, root: Path) -> List[Path]:
    paths: List[Path] = []
    for item in items:
        if not isinstance(item, (str, Path)):
            raise PluginInvocationError(
                plugin.name,
                Capability.FORMAT.value,
                f"expected a path, got {type(item).__name__}",
            )
        paths.append(Path(os.path.abspath(root / item)))
    return paths
