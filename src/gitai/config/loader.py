"""Configuration file loading.

Handles loading ``.gitai.yml`` from the project root with:
- Environment variable expansion (${VAR} and ${VAR:-default})
- Validation warnings logged for unknown keys
- Default document generation for ``gitai init``
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gitai.config.models import GitaiConfig, default_config_dict
from gitai.config.validation import ValidationSeverity, validate_config
from gitai.core.errors import ConfigError, ConfigurationMissingError
from gitai.core.logging import get_logger

LOGGER = get_logger(__name__)

# Config file names, in lookup order
PROJECT_CONFIG_NAMES = [".gitai.yml", ".gitai.yaml"]

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def load_config(project_root: Path, config_path: Optional[Path] = None) -> GitaiConfig:
    """Load the project configuration.

    Args:
        project_root: Directory searched for ``.gitai.yml``.
        config_path: Explicit config file (``--config``), used instead of
            the project lookup.

    Returns:
        Parsed GitaiConfig.

    Raises:
        ConfigurationMissingError: If no config file exists.
        ConfigError: If the file is not valid YAML or not a valid document.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        path = config_path
    else:
        found = find_project_config(project_root)
        if found is None:
            raise ConfigurationMissingError(project_root)
        path = found

    try:
        data = load_yaml_file(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    for issue in validate_config(data, source=str(path)):
        if issue.severity == ValidationSeverity.WARNING:
            LOGGER.warning(f"{issue} in {issue.source}")

    config = GitaiConfig.from_dict(data, source=str(path))
    LOGGER.debug(f"Loaded config from {path}")
    return config


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find the config file in the project root.

    Args:
        project_root: Directory to search in.

    Returns:
        Path to config file if found, None otherwise.
    """
    for name in PROJECT_CONFIG_NAMES:
        candidate = project_root / name
        if candidate.is_file():
            return candidate
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def write_default_config(project_root: Path) -> Path:
    """Write the default ``.gitai.yml`` to ``project_root``.

    Overwrites any existing file; callers decide whether that is allowed.

    Returns:
        Path of the written file.
    """
    path = project_root / PROJECT_CONFIG_NAMES[0]
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(default_config_dict(), f, sort_keys=False)
    LOGGER.info(f"Wrote default config to {path}")
    return path
