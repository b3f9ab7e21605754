"""Subprocess helper for plugins that wrap external tools."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from gitai.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT = 120


def run_tool(
    cmd: List[str],
    cwd: Union[str, Path],
    tool_name: str,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    input_text: Optional[str] = None,
    keep_newlines: bool = False,
) -> subprocess.CompletedProcess:
    """Run an external tool and capture its output.

    Args:
        cmd: Command and arguments to run.
        cwd: Working directory for the command.
        tool_name: Name of the tool (used in log and error messages).
        timeout: Timeout in seconds, or None to wait indefinitely.
        input_text: Optional text written to the tool's stdin.
        keep_newlines: Exchange stdin/stdout as UTF-8 bytes so ``\\r\\n``
            survives in both directions. Text mode translates it to ``\\n``.

    Returns:
        CompletedProcess with stdout/stderr captured as text.

    Raises:
        subprocess.TimeoutExpired: If the command times out.
        subprocess.SubprocessError: If the command fails to start.
    """
    LOGGER.debug(f"Running {tool_name}: {' '.join(cmd)}")
    try:
        if keep_newlines:
            result = subprocess.run(
                cmd,
                input=input_text.encode("utf-8") if input_text is not None else None,
                capture_output=True,
                cwd=str(cwd),
                timeout=timeout,
            )
            return subprocess.CompletedProcess(
                args=result.args,
                returncode=result.returncode,
                stdout=result.stdout.decode("utf-8", errors="replace"),
                stderr=result.stderr.decode("utf-8", errors="replace"),
            )

        return subprocess.run(
            cmd,
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=str(cwd),
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        LOGGER.warning(f"{tool_name} timed out after {timeout} seconds")
        raise
    except OSError as e:
        raise subprocess.SubprocessError(f"Failed to run {tool_name}: {e}") from e
