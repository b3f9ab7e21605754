"""Typed view of a parsed .gitai.yml document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gitai.core.errors import ConfigError

DEFAULT_CONFIG_VERSION = 1

# Source-file patterns used when the config does not set ``include``.
DEFAULT_INCLUDE_PATTERNS = ["**/*.js", "**/*.ts"]


@dataclass
class GitaiConfig:
    """Configuration consumed read-only by the engine.

    ``data`` is the full parsed document; it is what plugins receive as
    their ``config`` argument.
    """

    version: int = DEFAULT_CONFIG_VERSION
    plugins: List[Any] = field(default_factory=list)
    formatters: List[Any] = field(default_factory=list)
    format_dir: Optional[str] = None
    lint: Dict[str, Any] = field(default_factory=dict)
    analyze: Dict[str, Any] = field(default_factory=dict)
    include: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE_PATTERNS))
    ignore: List[str] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "GitaiConfig":
        """Build a config from an already-parsed mapping.

        ``plugins`` and ``formatters`` default to empty lists when absent.

        Raises:
            ConfigError: If a list-valued key holds something else.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        plugins = _list_value(data, "plugins", source)
        formatters = _list_value(data, "formatters", source)
        include = _list_value(data, "include", source) or list(DEFAULT_INCLUDE_PATTERNS)
        ignore = _list_value(data, "ignore", source)

        format_dir = data.get("formatDir")
        if format_dir is not None and not isinstance(format_dir, str):
            raise ConfigError(_where(source) + "'formatDir' must be a string")

        return cls(
            version=data.get("version", DEFAULT_CONFIG_VERSION),
            plugins=plugins,
            formatters=formatters,
            format_dir=format_dir,
            lint=data.get("lint") or {},
            analyze=data.get("analyze") or {},
            include=[str(p) for p in include],
            ignore=[str(p) for p in ignore],
            data=data,
            source=source,
        )


def default_config_dict() -> Dict[str, Any]:
    """Return the document written by ``gitai init``."""
    return {
        "version": DEFAULT_CONFIG_VERSION,
        "plugins": [],
        "formatters": [],
        "lint": {},
        "analyze": {"ast": True, "dataflow": True},
    }


def _list_value(data: Dict[str, Any], key: str, source: Optional[str]) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(
            _where(source) + f"'{key}' must be a list, got {type(value).__name__}"
        )
    return list(value)


def _where(source: Optional[str]) -> str:
    return f"{source}: " if source else ""
