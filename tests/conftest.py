"""Shared fixtures for gitai tests."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from gitai.core.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_gitai_logger():
    """Remove handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_gitai_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A resolved temporary project directory."""
    return tmp_path.resolve()


@pytest.fixture
def write_file(project_root: Path) -> Callable[..., Path]:
    """Write a (dedented) file under the project root and return its path."""

    def _write(rel_path: str, content: str = "") -> Path:
        path = project_root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(project_root: Path) -> Callable[[Dict[str, Any]], Path]:
    """Write a .gitai.yml with the given document."""

    def _write(data: Dict[str, Any]) -> Path:
        path = project_root / ".gitai.yml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
