"""Plugin registry: turns configuration entries into loaded plugin handles.

A plugin is any module exposing a function named after the capability it
provides (``analyze`` or ``format``). Entries are resolved as follows:

- ``./rules/no_todo.py`` (starts with ``.``): a file or package path
  relative to the project root, executed afresh on every load and not
  left registered in ``sys.modules``.
- ``eslint``: a name registered in the capability's entry point group.
- ``my_company.lint_rules``: any importable module.

Loading is all-or-nothing: every entry is normalized first, then every
module is loaded and checked, and the first failure aborts the whole load.
No plugin function is called here.
"""

from __future__ import annotations

import importlib
import importlib.util
import itertools
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Iterable, List, Union

from gitai.core.errors import (
    MissingCapabilityError,
    PluginResolutionError,
)
from gitai.core.logging import get_logger
from gitai.core.models import Capability, PluginHandle, PluginReference
from gitai.plugins.discovery import find_entry_point

LOGGER = get_logger(__name__)

# Prefix for modules loaded from project-relative paths
FILE_MODULE_PREFIX = "_gitai_plugin"

_module_counter = itertools.count(1)


def load_plugins(
    entries: Iterable[Any],
    root: Path,
    capability: Union[Capability, str],
) -> List[PluginHandle]:
    """Load every configured plugin for one capability.

    Args:
        entries: Raw ``plugins`` or ``formatters`` entries from configuration.
        root: Project root that relative references are resolved against.
        capability: ``analyze`` or ``format``.

    Returns:
        One PluginHandle per entry, in input order.

    Raises:
        InvalidPluginReferenceError: If any entry is malformed.
        PluginResolutionError: If any module cannot be located or imported.
        MissingCapabilityError: If any module lacks the capability function.
    """
    capability = Capability(capability)
    references = [PluginReference.parse(entry) for entry in entries]

    handles: List[PluginHandle] = []
    for reference in references:
        module = resolve_plugin_module(reference, root, capability)
        function = getattr(module, capability.value, None)
        if reference.is_relative:
            _release_file_module(module)
        if not callable(function):
            raise MissingCapabilityError(reference.path, capability.value)

        handles.append(PluginHandle(
            name=reference.path,
            capability=capability,
            function=function,
            options=reference.options,
        ))
        LOGGER.debug(f"Loaded {capability.value} plugin: {reference.path}")

    return handles


def resolve_plugin_module(
    reference: PluginReference,
    root: Path,
    capability: Capability,
) -> Any:
    """Locate and load the object providing a plugin's capability.

    Usually a module; an entry point may also point at any object exposing
    the capability function.

    Raises:
        PluginResolutionError: If the plugin cannot be located or loaded.
    """
    if reference.is_relative:
        return _load_file_module(reference.path, root)

    ep = find_entry_point(capability, reference.path)
    if ep is not None:
        try:
            return ep.load()
        except Exception as e:
            raise PluginResolutionError(
                f"Failed to load plugin '{reference.path}' from entry point {ep.value}: {e}",
                plugin=reference.path,
            ) from e

    try:
        return importlib.import_module(reference.path)
    except Exception as e:
        raise PluginResolutionError(
            f"Cannot import plugin '{reference.path}': {e}",
            plugin=reference.path,
        ) from e


def _resolve_file_path(plugin_path: str, root: Path) -> Path:
    """Find the source file for a project-relative plugin reference."""
    full_path = (root / plugin_path).resolve()

    if full_path.is_file():
        return full_path

    with_suffix = full_path.with_name(full_path.name + ".py")
    if with_suffix.is_file():
        return with_suffix

    package_init = full_path / "__init__.py"
    if package_init.is_file():
        return package_init

    raise PluginResolutionError(
        f"Cannot find plugin '{plugin_path}' (looked for {full_path})",
        plugin=plugin_path,
    )


def _load_file_module(plugin_path: str, root: Path) -> ModuleType:
    """Execute a plugin source file as a new module."""
    file_path = _resolve_file_path(plugin_path, root)
    stem = file_path.parent.name if file_path.name == "__init__.py" else file_path.stem
    module_name = f"{FILE_MODULE_PREFIX}_{next(_module_counter)}_{re.sub(r'[^0-9A-Za-z_]', '_', stem)}"

    if file_path.name == "__init__.py":
        spec = importlib.util.spec_from_file_location(
            module_name, file_path, submodule_search_locations=[str(file_path.parent)]
        )
    else:
        spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        raise PluginResolutionError(
            f"Unable to load plugin '{plugin_path}' from {file_path}",
            plugin=plugin_path,
        )

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        _release_file_module(module)
        raise PluginResolutionError(
            f"Error importing plugin '{plugin_path}': {e}",
            plugin=plugin_path,
        ) from e

    LOGGER.debug(f"Imported {file_path} as {module_name}")
    return module


def _release_file_module(module: ModuleType) -> None:
    """Drop a file plugin and its submodules from ``sys.modules``.

    The handle keeps the function (and through it the module globals)
    alive; the registration is only needed while the module executes.
    Relative imports deferred to call time will not resolve afterwards.
    """
    name = module.__name__
    for key in [k for k in sys.modules if k == name or k.startswith(name + ".")]:
        del sys.modules[key]
    LOGGER.debug(f"Released {name}")
