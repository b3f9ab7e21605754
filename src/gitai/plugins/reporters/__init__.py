"""Reporters for gitai output formatting."""

from typing import Dict, List, Optional, Type

from gitai.plugins.reporters.base import Reporter
from gitai.plugins.reporters.json_reporter import JSONReporter
from gitai.plugins.reporters.text_reporter import TextReporter

REPORTERS: Dict[str, Type[Reporter]] = {
    "text": TextReporter,
    "json": JSONReporter,
}


def get_reporter(name: str) -> Optional[Reporter]:
    """Get an instantiated reporter by name, or None if unknown."""
    reporter_class = REPORTERS.get(name)
    return reporter_class() if reporter_class else None


def list_available_reporters() -> List[str]:
    return sorted(REPORTERS)


__all__ = [
    "Reporter",
    "JSONReporter",
    "TextReporter",
    "REPORTERS",
    "get_reporter",
    "list_available_reporters",
]
