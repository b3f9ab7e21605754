"""Helpers for built-in plugins that wrap Node.js tools."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Mapping, Optional

from gitai.core.subprocess_runner import DEFAULT_TIMEOUT

# npm package providing each wrapped binary
NPM_PACKAGES = {
    "eslint": "eslint",
    "prettier": "prettier",
}


def find_node_binary(tool: str, project_root: Optional[Path] = None) -> Path:
    """Locate a Node.js tool binary.

    Checks for the tool in:
    1. Project's node_modules/.bin/<tool>
    2. System PATH (globally installed)

    Raises:
        FileNotFoundError: If the tool is not installed.
    """
    if project_root:
        local = project_root / "node_modules" / ".bin" / tool
        if local.exists():
            return local

    found = shutil.which(tool)
    if found:
        return Path(found)

    package = NPM_PACKAGES.get(tool, tool)
    raise FileNotFoundError(
        f"{tool} is not installed. Install it with:\n"
        f"  npm install {package} --save-dev\n"
        f"  OR\n"
        f"  npm install -g {package}"
    )


def get_timeout(options: Mapping[str, Any]) -> Optional[float]:
    """Subprocess timeout from plugin options (``timeout: null`` disables it)."""
    if "timeout" in options:
        return options["timeout"]
    return DEFAULT_TIMEOUT
