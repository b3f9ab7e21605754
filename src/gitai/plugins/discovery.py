"""Plugin discovery via Python entry points.

Bare plugin identifiers in ``.gitai.yml`` (``eslint``, ``prettier``) are
looked up by name in these groups before falling back to a plain import:
- Analyzer plugins: gitai.analyzers
- Formatter plugins: gitai.formatters
"""

from __future__ import annotations

from importlib.metadata import EntryPoint, entry_points
from typing import Dict, List, Optional

from gitai.core.logging import get_logger
from gitai.core.models import Capability

LOGGER = get_logger(__name__)

ANALYZER_ENTRY_POINT_GROUP = "gitai.analyzers"
FORMATTER_ENTRY_POINT_GROUP = "gitai.formatters"

ENTRY_POINT_GROUPS: Dict[Capability, str] = {
    Capability.ANALYZE: ANALYZER_ENTRY_POINT_GROUP,
    Capability.FORMAT: FORMATTER_ENTRY_POINT_GROUP,
}


def _group_entry_points(group: str) -> List[EntryPoint]:
    return list(entry_points(group=group))


def find_entry_point(capability: Capability, name: str) -> Optional[EntryPoint]:
    """Return the entry point registered under ``name`` for a capability.

    Plugins register themselves in their pyproject.toml:

        [project.entry-points."gitai.formatters"]
        prettier = "gitai.plugins.formatters.prettier"

    The value may name a module or a module attribute; either way the
    loaded object must expose the capability function.
    """
    group = ENTRY_POINT_GROUPS[capability]
    for ep in _group_entry_points(group):
        if ep.name == name:
            LOGGER.debug(f"Found entry point for {name} in {group}: {ep.value}")
            return ep
    return None


def list_available_plugins(capability: Capability) -> List[str]:
    """List names registered for a capability, sorted."""
    return sorted({ep.name for ep in _group_entry_points(ENTRY_POINT_GROUPS[capability])})


def get_all_available_plugins() -> Dict[str, List[str]]:
    """Get all registered plugin names keyed by kind."""
    return {
        "analyzers": list_available_plugins(Capability.ANALYZE),
        "formatters": list_available_plugins(Capability.FORMAT),
    }
