"""Plugins command implementation.

Lists plugins that can be referenced by name in .gitai.yml.
"""

from __future__ import annotations

from argparse import Namespace

from gitai.cli.commands import Command
from gitai.cli.exit_codes import EXIT_SUCCESS
from gitai.plugins.discovery import get_all_available_plugins
from gitai.plugins.reporters import list_available_reporters


class PluginsCommand(Command):
    """Lists installed analyzers, formatters and reporters."""

    @property
    def name(self) -> str:
        return "plugins"

    def execute(self, args: Namespace) -> int:
        available = get_all_available_plugins()

        for title, key in (("Analyzers", "analyzers"), ("Formatters", "formatters")):
            print(f"{title}:")
            names = available.get(key, [])
            if names:
                for name in names:
                    print(f"  - {name}")
            else:
                print("  (none)")

        print("Reporters:")
        for name in list_available_reporters():
            print(f"  - {name}")

        print("\nLocal plugins are referenced by a path starting with '.', e.g. ./tools/my_plugin.py")
        return EXIT_SUCCESS
