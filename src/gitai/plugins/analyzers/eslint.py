"""ESLint analyzer plugin.

ESLint is a pluggable linting utility for JavaScript and TypeScript.
https://eslint.org/

Options:
    config: path to an ESLint config file (``--config``)
    args: extra command-line arguments
    timeout: seconds before the ESLint process is killed (default 120)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from gitai.core.logging import get_logger
from gitai.core.models import AnalyzeInvocation
from gitai.core.subprocess_runner import run_tool
from gitai.plugins.node import find_node_binary, get_timeout

LOGGER = get_logger(__name__)

# ESLint exit codes: 0 = clean, 1 = problems found, 2 = fatal error
ESLINT_OK_EXIT_CODES = (0, 1)


def build_eslint_args(options: Mapping[str, Any]) -> List[str]:
    """Translate plugin options to ESLint command-line arguments."""
    args: List[str] = []
    if options.get("config"):
        args.extend(["--config", str(options["config"])])
    extra = options.get("args") or []
    args.extend(str(a) for a in extra)
    return args


def run_eslint(
    project_root: Path,
    files: Sequence[Path],
    options: Mapping[str, Any],
    fix: bool = False,
) -> List[Dict[str, Any]]:
    """Run ESLint with JSON output and return its per-file results.

    Raises:
        FileNotFoundError: If ESLint is not installed.
        RuntimeError: If ESLint exits with a fatal error.
        ValueError: If the output is not valid JSON.
    """
    binary = find_node_binary("eslint", project_root)
    cmd = [str(binary)]
    if fix:
        cmd.append("--fix")
    cmd.extend(["--format", "json"])
    cmd.extend(build_eslint_args(options))
    cmd.extend(str(f) for f in files)

    result = run_tool(
        cmd,
        cwd=project_root,
        tool_name="eslint-fix" if fix else "eslint",
        timeout=get_timeout(options),
    )
    if result.returncode not in ESLINT_OK_EXIT_CODES:
        raise RuntimeError(
            f"ESLint exited with code {result.returncode}: {result.stderr.strip()}"
        )

    if not result.stdout.strip():
        return []

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse ESLint output as JSON: {e}") from e


def analyze(invocation: AnalyzeInvocation) -> List[Dict[str, Any]]:
    """Lint a single file with ESLint."""
    results = run_eslint(invocation.root, [invocation.file], invocation.options)

    findings: List[Dict[str, Any]] = []
    for file_result in results:
        for message in file_result.get("messages", []):
            rule_id = message.get("ruleId")
            text = message.get("message", "")
            findings.append({
                "line": message.get("line") or 0,
                "severity": message.get("severity", 2),
                "message": f"[{rule_id}] {text}" if rule_id else text,
            })

    LOGGER.debug(f"ESLint found {len(findings)} issues in {invocation.file}")
    return findings
