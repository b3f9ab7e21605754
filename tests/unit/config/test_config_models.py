"""Unit tests for GitaiConfig."""

from __future__ import annotations

import pytest

from gitai.config.models import (
    DEFAULT_INCLUDE_PATTERNS,
    GitaiConfig,
    default_config_dict,
)
from gitai.core.errors import ConfigError


class TestFromDict:
    """Tests for GitaiConfig.from_dict."""

    def test_defaults_for_empty_document(self) -> None:
        config = GitaiConfig.from_dict({})
        assert config.plugins == []
        assert config.formatters == []
        assert config.format_dir is None
        assert config.include == DEFAULT_INCLUDE_PATTERNS
        assert config.ignore == []
        assert config.data == {}

    def test_reads_known_keys(self) -> None:
        data = {
            "version": 1,
            "plugins": ["eslint", {"path": "./rules.py", "options": {"max": 3}}],
            "formatters": ["prettier"],
            "formatDir": "src",
            "lint": {"strict": True},
            "include": ["**/*.js"],
            "ignore": ["dist/"],
        }
        config = GitaiConfig.from_dict(data, source=".gitai.yml")

        assert config.plugins == data["plugins"]
        assert config.formatters == ["prettier"]
        assert config.format_dir == "src"
        assert config.lint == {"strict": True}
        assert config.include == ["**/*.js"]
        assert config.ignore == ["dist/"]
        assert config.source == ".gitai.yml"

    def test_keeps_full_document_for_plugins(self) -> None:
        """Test unknown keys remain visible to plugins through data."""
        data = {"plugins": [], "custom": {"threshold": 5}}
        config = GitaiConfig.from_dict(data)
        assert config.data["custom"] == {"threshold": 5}

    def test_null_lists_are_empty(self) -> None:
        config = GitaiConfig.from_dict({"plugins": None, "formatters": None})
        assert config.plugins == []
        assert config.formatters == []

    def test_plugins_must_be_list(self) -> None:
        with pytest.raises(ConfigError, match="'plugins' must be a list"):
            GitaiConfig.from_dict({"plugins": "eslint"}, source=".gitai.yml")

    def test_format_dir_must_be_string(self) -> None:
        with pytest.raises(ConfigError, match="formatDir"):
            GitaiConfig.from_dict({"formatDir": ["src"]})

    def test_document_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError):
            GitaiConfig.from_dict(["plugins"])  # type: ignore[arg-type]


class TestDefaultConfigDict:
    """Tests for the init template."""

    def test_template(self) -> None:
        data = default_config_dict()
        assert data["version"] == 1
        assert data["plugins"] == []
        assert data["formatters"] == []
        assert data["analyze"] == {"ast": True, "dataflow": True}

    def test_returns_fresh_copy(self) -> None:
        first = default_config_dict()
        first["plugins"].append("eslint")
        assert default_config_dict()["plugins"] == []
