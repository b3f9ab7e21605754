"""Analysis runner: applies analyzer plugins file by file."""

from __future__ import annotations

from collections.abc import Iterable as IterableABC
from collections.abc import Mapping as MappingABC
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from gitai.core.errors import PluginInvocationError
from gitai.core.logging import get_logger
from gitai.core.models import (
    WHOLE_FILE,
    AnalyzeInvocation,
    Capability,
    Finding,
    PartialFinding,
    PluginHandle,
    Severity,
)

LOGGER = get_logger(__name__)


def run_analysis(
    files: Sequence[Path],
    plugins: Sequence[PluginHandle],
    config: Optional[Mapping[str, Any]] = None,
    root: Optional[Path] = None,
) -> List[Finding]:
    """Run every analyzer over every file.

    Each file is read once, as UTF-8 with undecodable bytes replaced by
    U+FFFD; analyzers are then called one at a time in registration order.
    Findings come back grouped by file, then by plugin, then in the order
    the plugin reported them.

    Args:
        files: Resolved files, in discovery order.
        plugins: Loaded analyzer handles.
        config: Global configuration passed to every analyzer.
        root: Project root passed to every analyzer.

    Returns:
        All findings, attributed to their plugin and file.

    Raises:
        PluginInvocationError: If any analyzer raises or returns malformed
            data. No partial results are returned.
    """
    config = config if config is not None else {}
    root = root or Path.cwd()
    findings: List[Finding] = []

    for file in files:
        source = file.read_text(encoding="utf-8", errors="replace")
        for plugin in plugins:
            invocation = AnalyzeInvocation(
                file=file,
                source=source,
                config=config,
                options=plugin.options,
                root=root,
            )
            LOGGER.debug(f"Running {plugin.name} on {file}")
            try:
                result = plugin.function(invocation)
                items = list(result) if is_result_sequence(result) else None
            except Exception as e:
                raise PluginInvocationError(
                    plugin.name, Capability.ANALYZE.value, str(e) or type(e).__name__, file=file
                ) from e

            if items is None:
                raise PluginInvocationError(
                    plugin.name,
                    Capability.ANALYZE.value,
                    f"expected a list of findings, got {type(result).__name__}",
                    file=file,
                )
            findings.extend(_attribute(items, plugin, file))

    return findings


def is_result_sequence(result: Any) -> bool:
    """Whether a plugin return value is an iterable of items (not a string)."""
    return (
        result is not None
        and not isinstance(result, (str, bytes, MappingABC))
        and isinstance(result, IterableABC)
    )


def _attribute(items: List[Any], plugin: PluginHandle, file: Path) -> List[Finding]:
    """Stamp file and plugin onto an analyzer's partial findings."""
    findings: List[Finding] = []
    for item in items:
        try:
            line, severity, message = _unpack(item)
        except (TypeError, ValueError) as e:
            raise PluginInvocationError(
                plugin.name, Capability.ANALYZE.value, f"malformed finding: {e}", file=file
            ) from e
        findings.append(Finding(
            file=file,
            line=line,
            severity=severity,
            message=message,
            plugin=plugin.name,
        ))
    return findings


def _unpack(item: Any) -> Tuple[int, Severity, str]:
    """Read line, severity and message from a PartialFinding or mapping."""
    if isinstance(item, PartialFinding):
        line, severity, message = item.line, item.severity, item.message
    elif isinstance(item, MappingABC):
        line = item.get("line")
        severity = item.get("severity", Severity.WARNING)
        message = item.get("message")
    else:
        raise TypeError(f"expected a mapping, got {type(item).__name__}")

    if not isinstance(message, str) or not message:
        raise ValueError("missing 'message'")

    if line is None:
        line = WHOLE_FILE
    elif isinstance(line, bool) or not isinstance(line, int) or line < 0:
        raise ValueError(f"invalid line {line!r}")

    return line, Severity.parse(severity), message
