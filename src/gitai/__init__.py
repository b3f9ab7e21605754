"""gitai - pluggable code-quality orchestration.

Loads the analyzer and formatter plugins declared in ``.gitai.yml``, runs
them over a resolved set of source files and aggregates their results.
"""

from __future__ import annotations

__version__ = "0.1.0"

from gitai.config import GitaiConfig, load_config
from gitai.core.models import Finding, FormatResult, Severity
from gitai.pipeline.executor import analyze, fmt

__all__ = [
    "__version__",
    "GitaiConfig",
    "load_config",
    "Finding",
    "FormatResult",
    "Severity",
    "analyze",
    "fmt",
]
