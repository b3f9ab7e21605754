"""Unit tests for entry point discovery."""

from __future__ import annotations

from importlib.metadata import EntryPoint

import pytest

from gitai.core.models import Capability
from gitai.plugins.discovery import (
    ANALYZER_ENTRY_POINT_GROUP,
    FORMATTER_ENTRY_POINT_GROUP,
    find_entry_point,
    get_all_available_plugins,
    list_available_plugins,
)

FAKE_ENTRY_POINTS = {
    ANALYZER_ENTRY_POINT_GROUP: [
        EntryPoint(name="eslint", value="gitai.plugins.analyzers.eslint", group=ANALYZER_ENTRY_POINT_GROUP),
    ],
    FORMATTER_ENTRY_POINT_GROUP: [
        EntryPoint(name="prettier", value="gitai.plugins.formatters.prettier", group=FORMATTER_ENTRY_POINT_GROUP),
        EntryPoint(name="eslint-fix", value="gitai.plugins.formatters.eslint_fix", group=FORMATTER_ENTRY_POINT_GROUP),
    ],
}


@pytest.fixture
def fake_entry_points(monkeypatch) -> None:
    monkeypatch.setattr(
        "gitai.plugins.discovery._group_entry_points",
        lambda group: list(FAKE_ENTRY_POINTS.get(group, [])),
    )


class TestFindEntryPoint:
    """Tests for find_entry_point."""

    def test_finds_by_name(self, fake_entry_points) -> None:
        ep = find_entry_point(Capability.FORMAT, "prettier")
        assert ep is not None
        assert ep.value == "gitai.plugins.formatters.prettier"

    def test_groups_are_separate(self, fake_entry_points) -> None:
        """Test a formatter name is not found as an analyzer."""
        assert find_entry_point(Capability.ANALYZE, "prettier") is None

    def test_unknown_name(self, fake_entry_points) -> None:
        assert find_entry_point(Capability.ANALYZE, "unknown") is None


class TestListAvailablePlugins:
    """Tests for plugin listing."""

    def test_sorted(self, fake_entry_points) -> None:
        assert list_available_plugins(Capability.FORMAT) == ["eslint-fix", "prettier"]

    def test_all(self, fake_entry_points) -> None:
        assert get_all_available_plugins() == {
            "analyzers": ["eslint"],
            "formatters": ["eslint-fix", "prettier"],
        }
