"""Configuration validation for gitai.

Validates the keys gitai itself reads and warns on unknown keys. Plugin
options and the ``lint``/``analyze`` sections are passed through to plugins
without validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

import yaml

from gitai.core.logging import get_logger

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config will fail at runtime
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        text = self.message
        if self.suggestion:
            text += f" (did you mean '{self.suggestion}'?)"
        return text


VALID_TOP_LEVEL_KEYS: Set[str] = {
    "version",
    "plugins",
    "formatters",
    "formatDir",
    "lint",
    "analyze",
    "include",
    "ignore",
}

VALID_PLUGIN_ENTRY_KEYS: Set[str] = {
    "path",
    "options",
}

# Sections handed to plugins verbatim
PASSTHROUGH_SECTIONS = ("lint", "analyze")


def validate_config(data: Any, source: str) -> List[ConfigValidationIssue]:
    """Validate a parsed configuration document.

    Does not raise; returns the issues found, errors first-class alongside
    warnings.

    Args:
        data: Parsed YAML document.
        source: Source file path for messages.

    Returns:
        List of validation issues.
    """
    issues: List[ConfigValidationIssue] = []

    if not isinstance(data, dict):
        issues.append(_error(f"Config must be a mapping, got {type(data).__name__}", source))
        return issues

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            issues.append(_warning(
                f"Unknown top-level key '{key}'",
                source,
                key=str(key),
                suggestion=_suggest_key(str(key), VALID_TOP_LEVEL_KEYS),
            ))

    version = data.get("version")
    if version is not None and (not isinstance(version, int) or isinstance(version, bool)):
        issues.append(_error("'version' must be an integer", source, key="version"))

    for section in ("plugins", "formatters"):
        issues.extend(_validate_plugin_list(data.get(section), section, source))

    for section in ("include", "ignore"):
        value = data.get(section)
        if value is None:
            continue
        if not isinstance(value, list):
            issues.append(_error(
                f"'{section}' must be a list, got {type(value).__name__}", source, key=section
            ))
        elif not all(isinstance(p, str) for p in value):
            issues.append(_error(f"'{section}' entries must be strings", source, key=section))

    format_dir = data.get("formatDir")
    if format_dir is not None and not isinstance(format_dir, str):
        issues.append(_error("'formatDir' must be a string", source, key="formatDir"))

    for section in PASSTHROUGH_SECTIONS:
        value = data.get(section)
        if value is not None and not isinstance(value, dict):
            issues.append(_error(
                f"'{section}' must be a mapping, got {type(value).__name__}", source, key=section
            ))

    for issue in issues:
        _log_issue(issue)

    return issues


def _validate_plugin_list(
    entries: Any,
    section: str,
    source: str,
) -> List[ConfigValidationIssue]:
    """Check every entry of ``plugins`` or ``formatters``."""
    issues: List[ConfigValidationIssue] = []
    if entries is None:
        return issues

    if not isinstance(entries, list):
        issues.append(_error(
            f"'{section}' must be a list, got {type(entries).__name__}", source, key=section
        ))
        return issues

    for i, entry in enumerate(entries):
        key = f"{section}[{i}]"
        if isinstance(entry, str):
            if not entry.strip():
                issues.append(_error(f"'{key}' must not be empty", source, key=key))
            continue

        if not isinstance(entry, dict):
            issues.append(_error(
                f"'{key}' must be a string or a mapping with 'path'", source, key=key
            ))
            continue

        path = entry.get("path")
        if not isinstance(path, str) or not path.strip():
            issues.append(_error(f"'{key}' must have a non-empty 'path' field", source, key=f"{key}.path"))

        options = entry.get("options")
        if options is not None and not isinstance(options, dict):
            issues.append(_error(f"'{key}.options' must be a mapping", source, key=f"{key}.options"))

        for entry_key in entry.keys():
            if entry_key not in VALID_PLUGIN_ENTRY_KEYS:
                issues.append(_warning(
                    f"Unknown key '{key}.{entry_key}'",
                    source,
                    key=f"{key}.{entry_key}",
                    suggestion=_suggest_key(str(entry_key), VALID_PLUGIN_ENTRY_KEYS),
                ))

    return issues


def _error(message: str, source: str, key: Optional[str] = None) -> ConfigValidationIssue:
    return ConfigValidationIssue(message, source, ValidationSeverity.ERROR, key=key)


def _warning(
    message: str,
    source: str,
    key: Optional[str] = None,
    suggestion: Optional[str] = None,
) -> ConfigValidationIssue:
    return ConfigValidationIssue(
        message, source, ValidationSeverity.WARNING, key=key, suggestion=suggestion
    )


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_issue(issue: ConfigValidationIssue) -> None:
    LOGGER.debug(f"{issue.severity.value}: {issue} in {issue.source}")


def has_errors(issues: List[ConfigValidationIssue]) -> bool:
    return any(issue.severity == ValidationSeverity.ERROR for issue in issues)


def validate_config_file(config_path: Path) -> Tuple[bool, List[ConfigValidationIssue]]:
    """Validate a configuration file from disk.

    Checks file existence, YAML syntax, and configuration semantics.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Tuple of (is_valid, issues) where is_valid is False if any errors exist.
    """
    issues: List[ConfigValidationIssue] = []
    source = str(config_path)

    if not config_path.exists():
        issues.append(_error(f"Configuration file not found: {config_path}", source))
        return False, issues

    try:
        with open(config_path, encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f)
    except yaml.YAMLError as e:
        issues.append(_error(f"Invalid YAML syntax: {e}", source))
        return False, issues

    if data is None:
        issues.append(_warning("Configuration file is empty", source))
        return True, issues

    issues.extend(validate_config(data, source))
    return not has_errors(issues), issues
