from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from gitai.core.errors import InvalidPluginReferenceError

# Line number used when a plugin reports a finding for the whole file.
WHOLE_FILE = 0


class Capability(str, Enum):
    """Plugin capabilities, named after the function a plugin must expose."""

    ANALYZE = "analyze"
    FORMAT = "format"


class Severity(str, Enum):
    """Finding severity, ordered INFO < WARNING < ERROR."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Convert a plugin-supplied severity to a Severity.

        Accepts Severity members, case-insensitive names and the ESLint
        integer convention (0=off/info, 1=warning, 2=error).

        Raises:
            ValueError: If the value cannot be interpreted.
        """
        if isinstance(value, Severity):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            if value in _ESLINT_SEVERITIES:
                return _ESLINT_SEVERITIES[value]
            raise ValueError(f"Invalid severity: {value!r}")
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _SEVERITY_ALIASES:
                return _SEVERITY_ALIASES[key]
        raise ValueError(f"Invalid severity: {value!r}")


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}

_ESLINT_SEVERITIES = {
    0: Severity.INFO,
    1: Severity.WARNING,
    2: Severity.ERROR,
}

_SEVERITY_ALIASES = {
    "info": Severity.INFO,
    "informational": Severity.INFO,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "error": Severity.ERROR,
}


@dataclass(frozen=True)
class PluginReference:
    """A plugin entry from configuration.

    Either a bare identifier (``"eslint"``, ``"./rules/no_todo.py"``) or a
    ``{path, options}`` mapping.
    """

    path: str
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_relative(self) -> bool:
        """Whether the path is resolved against the project root."""
        return self.path.startswith(".")

    @classmethod
    def parse(cls, entry: Any) -> "PluginReference":
        """Normalize a raw configuration entry.

        Raises:
            InvalidPluginReferenceError: If the entry is neither a non-empty
                string nor a mapping with a non-empty ``path``.
        """
        if isinstance(entry, str):
            if not entry.strip():
                raise InvalidPluginReferenceError(f"Invalid plugin entry: {entry!r}")
            return cls(path=entry)

        if isinstance(entry, Mapping):
            path = entry.get("path")
            if not isinstance(path, str) or not path.strip():
                raise InvalidPluginReferenceError(f"Invalid plugin entry: {dict(entry)!r}")
            options = entry.get("options")
            if options is None:
                options = {}
            if not isinstance(options, Mapping):
                raise InvalidPluginReferenceError(
                    f"Plugin options must be a mapping: {dict(entry)!r}", plugin=path
                )
            return cls(path=path, options=dict(options))

        raise InvalidPluginReferenceError(f"Invalid plugin entry: {entry!r}")


@dataclass(frozen=True)
class PluginHandle:
    """A loaded plugin, ready to be invoked.

    ``name`` is the reference path exactly as written in configuration and
    is what findings are attributed to.
    """

    name: str
    capability: Capability
    function: Callable[[Any], Any]
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalyzeInvocation:
    """Argument passed to a plugin's ``analyze()`` function."""

    file: Path
    source: str
    config: Mapping[str, Any]
    options: Mapping[str, Any]
    root: Path


@dataclass(frozen=True)
class FormatInvocation:
    """Argument passed to a plugin's ``format()`` function."""

    files: List[Path]
    config: Mapping[str, Any]
    options: Mapping[str, Any]
    root: Path


@dataclass(frozen=True)
class PartialFinding:
    """A finding as reported by an analyzer, before attribution."""

    message: str
    severity: Union[Severity, str, int] = Severity.WARNING
    line: Optional[int] = None


@dataclass(frozen=True)
class Finding:
    """A single attributed issue."""

    file: Path
    line: int
    severity: Severity
    message: str
    plugin: str

    @property
    def whole_file(self) -> bool:
        return self.line == WHOLE_FILE


@dataclass
class FormatResult:
    """Files modified by the formatters of one run.

    ``modified`` is duplicate-free, in first-reported order. ``by_plugin``
    keeps what each formatter reported, in registration order.
    """

    modified: List[Path] = field(default_factory=list)
    by_plugin: Dict[str, List[Path]] = field(default_factory=dict)

    def add(self, plugin: str, paths: List[Path]) -> None:
        self.by_plugin.setdefault(plugin, []).extend(paths)
        seen = set(self.modified)
        for path in paths:
            if path not in seen:
                self.modified.append(path)
                seen.add(path)

    def __len__(self) -> int:
        return len(self.modified)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.modified)

    def __contains__(self, item: object) -> bool:
        return item in self.modified
