"""Exception hierarchy for gitai.

The engine never recovers from these internally: every error propagates to
the caller (usually the CLI), which decides how to report it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class GitaiError(Exception):
    """Base class for all gitai errors."""


class ConfigError(GitaiError):
    """Configuration loading or parsing error."""


class ConfigurationMissingError(ConfigError):
    """No configuration file was found in the project root."""

    def __init__(self, project_root: Path) -> None:
        self.project_root = project_root
        super().__init__(
            f".gitai.yml not found in {project_root} - run `gitai init` first"
        )


class PluginError(GitaiError):
    """Base class for plugin loading and invocation errors.

    Attributes:
        plugin: Reference path of the offending plugin, when known.
    """

    def __init__(self, message: str, plugin: Optional[str] = None) -> None:
        self.plugin = plugin
        super().__init__(message)


class InvalidPluginReferenceError(PluginError):
    """A plugin entry is neither a string nor a ``{path, options}`` mapping."""


class PluginResolutionError(PluginError):
    """A plugin module could not be located or imported."""


class MissingCapabilityError(PluginError):
    """A plugin module does not expose the required function."""

    def __init__(self, plugin: str, capability: str) -> None:
        self.capability = capability
        super().__init__(f"{plugin} has no {capability}() function", plugin=plugin)


class PluginInvocationError(PluginError):
    """A plugin raised, or returned malformed data, while being invoked.

    The plugin's own exception is available as ``__cause__``.
    """

    def __init__(
        self,
        plugin: str,
        capability: str,
        reason: str,
        file: Optional[Path] = None,
    ) -> None:
        self.capability = capability
        self.file = file
        location = f" on {file}" if file is not None else ""
        super().__init__(f"{plugin} failed during {capability}(){location}: {reason}", plugin=plugin)
