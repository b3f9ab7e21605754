"""Unit tests for gitignore-style path patterns."""

from __future__ import annotations

from pathlib import Path

from gitai.config.ignore import GITAIIGNORE_NAME, PathPatterns, load_ignore_patterns


class TestPathPatterns:
    """Tests for PathPatterns."""

    def test_matches_relative_to_root(self) -> None:
        patterns = PathPatterns(["dist/", "*.min.js"])
        root = Path("/repo")
        assert patterns.matches(Path("/repo/dist"), root, is_dir=True)
        assert patterns.matches(Path("/repo/src/app.min.js"), root)
        assert not patterns.matches(Path("/repo/src/app.js"), root)

    def test_double_star(self) -> None:
        patterns = PathPatterns(["**/*.ts"])
        root = Path("/repo")
        assert patterns.matches(Path("/repo/index.ts"), root)
        assert patterns.matches(Path("/repo/a/b/c.ts"), root)
        assert not patterns.matches(Path("/repo/a/b/c.js"), root)

    def test_negation(self) -> None:
        patterns = PathPatterns(["*.js", "!keep.js"])
        root = Path("/repo")
        assert patterns.matches(Path("/repo/drop.js"), root)
        assert not patterns.matches(Path("/repo/keep.js"), root)

    def test_comments_and_blanks_ignored(self) -> None:
        patterns = PathPatterns(["# comment", "", "   "])
        assert not patterns
        assert patterns.patterns == ["# comment", "", "   "]

    def test_bool(self) -> None:
        assert PathPatterns(["build/"])
        assert not PathPatterns([])

    def test_merge_skips_none(self) -> None:
        merged = PathPatterns.merge(None, PathPatterns(["a/"]), PathPatterns(["b/"]))
        assert merged.patterns == ["a/", "b/"]

    def test_from_file_missing(self, tmp_path: Path) -> None:
        assert PathPatterns.from_file(tmp_path / GITAIIGNORE_NAME) is None


class TestLoadIgnorePatterns:
    """Tests for load_ignore_patterns."""

    def test_combines_file_and_config(self, tmp_path: Path) -> None:
        (tmp_path / GITAIIGNORE_NAME).write_text("# generated\nbuild/\n")
        patterns = load_ignore_patterns(tmp_path, ["vendor/"])

        assert patterns.matches(tmp_path / "build", tmp_path, is_dir=True)
        assert patterns.matches(tmp_path / "vendor", tmp_path, is_dir=True)
        assert not patterns.matches(tmp_path / "src", tmp_path, is_dir=True)

    def test_empty_when_nothing_configured(self, tmp_path: Path) -> None:
        assert not load_ignore_patterns(tmp_path, [])
