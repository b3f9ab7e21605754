"""Gitignore-style path matching for file resolution.

Patterns come from two places:
- the ``.gitaiignore`` file in the project root
- the ``ignore`` list in ``.gitai.yml``

The same matcher is used for the ``include`` patterns. pathspec gives full
gitignore semantics (``**`` globbing, ``!`` negation, ``#`` comments).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from gitai.core.logging import get_logger

LOGGER = get_logger(__name__)

GITAIIGNORE_NAME = ".gitaiignore"


class PathPatterns:
    """A compiled set of gitignore-style patterns."""

    def __init__(self, patterns: Iterable[str], source: str = "config") -> None:
        self._source = source
        self._raw_patterns = list(patterns)

        clean_patterns = [
            p for p in self._raw_patterns if p.strip() and not p.strip().startswith("#")
        ]
        self._spec = pathspec.PathSpec.from_lines(
            pathspec.patterns.GitWildMatchPattern,
            clean_patterns,
        )

        if clean_patterns:
            LOGGER.debug(f"Loaded {len(clean_patterns)} patterns from {source}")

    @property
    def patterns(self) -> List[str]:
        return list(self._raw_patterns)

    def __bool__(self) -> bool:
        return any(p.strip() and not p.strip().startswith("#") for p in self._raw_patterns)

    def matches(self, path: Path, root: Path, is_dir: bool = False) -> bool:
        """Check whether ``path`` matches, relative to ``root``.

        Paths outside ``root`` are matched as given. Directories must be
        flagged so that patterns like ``dist/`` apply to them.
        """
        try:
            rel_path = path.relative_to(root)
        except ValueError:
            rel_path = path

        # pathspec expects forward-slash paths
        rel_str = rel_path.as_posix()
        if is_dir:
            rel_str += "/"
        return self._spec.match_file(rel_str)

    @classmethod
    def from_file(cls, file_path: Path) -> Optional["PathPatterns"]:
        """Load patterns from a file, or return None if it does not exist."""
        if not file_path.is_file():
            return None

        content = file_path.read_text(encoding="utf-8")
        return cls(content.splitlines(), source=str(file_path))

    @classmethod
    def merge(cls, *pattern_sets: Optional["PathPatterns"]) -> "PathPatterns":
        """Combine several pattern sets, skipping None."""
        all_patterns: List[str] = []
        sources: List[str] = []

        for ps in pattern_sets:
            if ps is not None:
                all_patterns.extend(ps._raw_patterns)
                sources.append(ps._source)

        return cls(all_patterns, source="+".join(sources) if sources else "empty")


def load_ignore_patterns(project_root: Path, config_patterns: Iterable[str]) -> PathPatterns:
    """Merge ``.gitaiignore`` (first) with the config ``ignore`` list."""
    file_patterns = PathPatterns.from_file(project_root / GITAIIGNORE_NAME)
    config_patterns = list(config_patterns)
    config_ignore = PathPatterns(config_patterns, source="config.ignore") if config_patterns else None
    return PathPatterns.merge(file_patterns, config_ignore)
