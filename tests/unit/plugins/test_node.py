"""Unit tests for Node.js tool helpers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from gitai.core.subprocess_runner import DEFAULT_TIMEOUT
from gitai.plugins.node import find_node_binary, get_timeout


class TestFindNodeBinary:
    """Tests for find_node_binary."""

    def test_prefers_project_binary(self, tmp_path: Path) -> None:
        local = tmp_path / "node_modules" / ".bin" / "eslint"
        local.parent.mkdir(parents=True)
        local.write_text("#!/bin/sh\n")

        with patch("shutil.which", return_value="/usr/bin/eslint"):
            assert find_node_binary("eslint", tmp_path) == local

    def test_falls_back_to_path(self, tmp_path: Path) -> None:
        with patch("shutil.which", return_value="/usr/local/bin/prettier"):
            assert find_node_binary("prettier", tmp_path) == Path("/usr/local/bin/prettier")

    def test_not_installed(self, tmp_path: Path) -> None:
        with patch("shutil.which", return_value=None):
            with pytest.raises(FileNotFoundError, match="npm install prettier --save-dev"):
                find_node_binary("prettier", tmp_path)


class TestGetTimeout:
    """Tests for get_timeout."""

    def test_default(self) -> None:
        assert get_timeout({}) == DEFAULT_TIMEOUT

    def test_override(self) -> None:
        assert get_timeout({"timeout": 30}) == 30

    def test_disabled(self) -> None:
        assert get_timeout({"timeout": None}) is None
