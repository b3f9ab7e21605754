"""Prettier formatter plugin.

Pipes each file through ``prettier --stdin-filepath`` so Prettier resolves
the project's own configuration for it, and writes the file back only when
the output differs.

Options are passed as Prettier flags: ``singleQuote: true`` becomes
``--single-quote``, ``semi: false`` becomes ``--no-semi`` and other values
become ``--print-width=100``. ``timeout`` sets the per-file process
timeout instead.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Mapping, Optional

from gitai.core.logging import get_logger
from gitai.core.models import FormatInvocation
from gitai.core.subprocess_runner import run_tool
from gitai.plugins.node import find_node_binary, get_timeout

LOGGER = get_logger(__name__)

# Options consumed by the plugin, not passed to Prettier
RESERVED_OPTIONS = frozenset({"timeout"})


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


def prettier_flags(options: Mapping[str, Any]) -> List[str]:
    """Translate plugin options to Prettier command-line flags."""
    flags: List[str] = []
    for key, value in options.items():
        if key in RESERVED_OPTIONS:
            continue
        flag = _kebab(key)
        if value is True:
            flags.append(f"--{flag}")
        elif value is False:
            flags.append(f"--no-{flag}")
        elif value is not None:
            flags.append(f"--{flag}={value}")
    return flags


def format(invocation: FormatInvocation) -> List[Path]:
    """Format files in place, returning those whose content changed."""
    if not invocation.files:
        return []

    binary = find_node_binary("prettier", invocation.root)
    flags = prettier_flags(invocation.options)
    timeout = get_timeout(invocation.options)

    changed: List[Path] = []
    for file in invocation.files:
        source = _read_source(file)
        if source is None:
            continue
        result = run_tool(
            [str(binary), "--stdin-filepath", str(file), *flags],
            cwd=invocation.root,
            tool_name="prettier",
            timeout=timeout,
            input_text=source,
            keep_newlines=True,
        )
        if result.returncode != 0:
            raise RuntimeError(
                f"Prettier failed on {file} (exit {result.returncode}): {result.stderr.strip()}"
            )

        formatted = result.stdout
        if formatted != source:
            with open(file, "w", encoding="utf-8", newline="") as f:
                f.write(formatted)
            changed.append(file)

    LOGGER.debug(f"Prettier formatted {len(changed)} files")
    return changed


def _read_source(file: Path) -> Optional[str]:
    """Read a file with its line endings intact, or None if it is not UTF-8."""
    try:
        with open(file, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError:
        # Rewriting would replace the undecodable bytes
        LOGGER.warning(f"Skipping {file}: not valid UTF-8")
        return None
