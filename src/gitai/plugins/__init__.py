"""Plugin infrastructure for gitai.

- Registry: loads configured plugins into PluginHandles
- Discovery: entry point groups for plugins referenced by name
- Built-in plugins: ESLint analyzer, ESLint --fix and Prettier formatters
- Reporters: text and JSON rendering of findings
"""

from gitai.plugins.discovery import (
    ANALYZER_ENTRY_POINT_GROUP,
    FORMATTER_ENTRY_POINT_GROUP,
    find_entry_point,
    get_all_available_plugins,
    list_available_plugins,
)
from gitai.plugins.registry import load_plugins, resolve_plugin_module

__all__ = [
    "ANALYZER_ENTRY_POINT_GROUP",
    "FORMATTER_ENTRY_POINT_GROUP",
    "find_entry_point",
    "get_all_available_plugins",
    "list_available_plugins",
    "load_plugins",
    "resolve_plugin_module",
]
