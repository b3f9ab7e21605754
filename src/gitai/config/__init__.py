"""Configuration loading for gitai.

The engine consumes configuration read-only; this package locates, parses
and validates ``.gitai.yml``.
"""

from gitai.config.loader import (
    find_project_config,
    load_config,
    write_default_config,
)
from gitai.config.models import (
    DEFAULT_INCLUDE_PATTERNS,
    GitaiConfig,
    default_config_dict,
)

__all__ = [
    "DEFAULT_INCLUDE_PATTERNS",
    "GitaiConfig",
    "default_config_dict",
    "find_project_config",
    "load_config",
    "write_default_config",
]
