"""File resolution: turns a target path into the files plugins run on."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from gitai.config.ignore import PathPatterns
from gitai.config.models import DEFAULT_INCLUDE_PATTERNS
from gitai.core.logging import get_logger

LOGGER = get_logger(__name__)

# Dependency/vendor directories never descended into
EXCLUDED_DIR_NAMES = frozenset({"node_modules", ".git"})


def resolve(
    target: Union[str, Path],
    root: Optional[Path] = None,
    include: Optional[Iterable[str]] = None,
    ignore: Optional[PathPatterns] = None,
) -> List[Path]:
    """Resolve a file or directory target to absolute source file paths.

    An existing regular file is returned as-is, without include or ignore
    filtering. Anything else is treated as a directory walked recursively;
    a missing directory simply yields no files.

    Args:
        target: File or directory, relative to ``root`` unless absolute.
        root: Project root (defaults to the current directory). Ignore
            patterns are matched relative to it.
        include: Gitignore-style source file patterns, relative to the
            target directory. Defaults to JavaScript and TypeScript files.
        ignore: Patterns of paths to skip.

    Returns:
        Absolute paths in walk order. Entries are visited sorted, so an
        unchanged tree always yields the same sequence.
    """
    # Normalized but not symlink-resolved, so paths name what the user referenced
    root = Path(os.path.abspath(root or Path.cwd()))
    target_path = Path(os.path.abspath(root / target))

    if target_path.is_file():
        LOGGER.debug(f"Resolved single file {target_path}")
        return [target_path]

    if not target_path.is_dir():
        LOGGER.debug(f"Target {target_path} does not exist, no files to process")
        return []

    include_patterns = PathPatterns(
        list(include) if include is not None else DEFAULT_INCLUDE_PATTERNS,
        source="include",
    )

    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(target_path):
        current = Path(dirpath)
        dirnames[:] = sorted(
            d for d in dirnames
            if d not in EXCLUDED_DIR_NAMES
            and not (ignore and ignore.matches(current / d, root, is_dir=True))
        )
        for filename in sorted(filenames):
            path = current / filename
            if not include_patterns.matches(path, target_path):
                continue
            if ignore and ignore.matches(path, root):
                continue
            files.append(path)

    LOGGER.debug(f"Resolved {len(files)} files under {target_path}")
    return files
