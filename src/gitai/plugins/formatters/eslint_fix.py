"""ESLint auto-fix formatter plugin.

Runs ``eslint --fix`` once over the whole batch and reports the files
ESLint rewrote. Accepts the same options as the ``eslint`` analyzer.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from gitai.core.logging import get_logger
from gitai.core.models import FormatInvocation
from gitai.plugins.analyzers.eslint import run_eslint

LOGGER = get_logger(__name__)


def format(invocation: FormatInvocation) -> List[Path]:
    """Apply ESLint fixes in place."""
    if not invocation.files:
        return []

    results = run_eslint(invocation.root, invocation.files, invocation.options, fix=True)

    # ESLint only sets "output" on results it actually fixed
    changed = [
        Path(r["filePath"])
        for r in results
        if isinstance(r.get("output"), str) and r.get("filePath")
    ]
    LOGGER.debug(f"ESLint fixed {len(changed)} files")
    return changed
