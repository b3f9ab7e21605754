"""Unit tests for configuration validation."""

from __future__ import annotations

from pathlib import Path

from gitai.config.validation import (
    ValidationSeverity,
    has_errors,
    validate_config,
    validate_config_file,
)


def _errors(issues):
    return [i for i in issues if i.severity == ValidationSeverity.ERROR]


def _warnings(issues):
    return [i for i in issues if i.severity == ValidationSeverity.WARNING]


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_config(self) -> None:
        data = {
            "version": 1,
            "plugins": ["eslint", {"path": "./rules.py", "options": {"max": 2}}],
            "formatters": ["prettier"],
            "formatDir": "src",
            "lint": {},
            "analyze": {"ast": True},
            "include": ["**/*.js"],
            "ignore": ["dist/"],
        }
        assert validate_config(data, source="test") == []

    def test_unknown_key_with_suggestion(self) -> None:
        issues = validate_config({"formaters": []}, source="test")
        assert len(issues) == 1
        assert issues[0].severity == ValidationSeverity.WARNING
        assert issues[0].key == "formaters"
        assert issues[0].suggestion == "formatters"
        assert "did you mean 'formatters'" in str(issues[0])

    def test_unknown_key_without_suggestion(self) -> None:
        issues = validate_config({"zzzzzz": 1}, source="test")
        assert issues[0].suggestion is None

    def test_non_mapping(self) -> None:
        issues = validate_config(["eslint"], source="test")
        assert len(_errors(issues)) == 1

    def test_version_must_be_int(self) -> None:
        issues = validate_config({"version": "1"}, source="test")
        assert _errors(issues)[0].key == "version"

    def test_plugins_not_list(self) -> None:
        issues = validate_config({"plugins": "eslint"}, source="test")
        assert _errors(issues)[0].key == "plugins"

    def test_invalid_plugin_entries(self) -> None:
        data = {"plugins": ["", 5, {"options": {}}, {"path": "x", "options": []}]}
        keys = [i.key for i in _errors(validate_config(data, source="test"))]
        assert keys == [
            "plugins[0]",
            "plugins[1]",
            "plugins[2].path",
            "plugins[3].options",
        ]

    def test_unknown_plugin_entry_key(self) -> None:
        data = {"formatters": [{"path": "prettier", "option": {}}]}
        issues = validate_config(data, source="test")
        assert _errors(issues) == []
        warning = _warnings(issues)[0]
        assert warning.key == "formatters[0].option"
        assert warning.suggestion == "options"

    def test_include_entries_must_be_strings(self) -> None:
        issues = validate_config({"include": ["**/*.js", 3]}, source="test")
        assert _errors(issues)[0].key == "include"

    def test_format_dir_must_be_string(self) -> None:
        issues = validate_config({"formatDir": 1}, source="test")
        assert _errors(issues)[0].key == "formatDir"

    def test_passthrough_sections_must_be_mappings(self) -> None:
        issues = validate_config({"lint": ["x"], "analyze": True}, source="test")
        assert [i.key for i in _errors(issues)] == ["lint", "analyze"]

    def test_has_errors(self) -> None:
        assert has_errors(validate_config({"plugins": 1}, source="test"))
        assert not has_errors(validate_config({"pluginz": []}, source="test"))


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".gitai.yml"
        path.write_text("plugins:\n  - eslint\n")
        assert validate_config_file(path) == (True, [])

    def test_missing_file(self, tmp_path: Path) -> None:
        is_valid, issues = validate_config_file(tmp_path / "missing.yml")
        assert is_valid is False
        assert "not found" in issues[0].message

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / ".gitai.yml"
        path.write_text("plugins: [\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is False
        assert "Invalid YAML" in issues[0].message

    def test_empty_file_is_valid_with_warning(self, tmp_path: Path) -> None:
        path = tmp_path / ".gitai.yml"
        path.write_text("")
        is_valid, issues = validate_config_file(path)
        assert is_valid is True
        assert issues[0].severity == ValidationSeverity.WARNING
