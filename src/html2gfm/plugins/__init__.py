#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/plugins/__init__.py
"""Converter plugins and plugin lookup by name.

A plugin is a callable ``plugin(converter)`` that may register hooks or
keep/remove tags on the converter and returns the rules to add (or ``None``).
Plugins are applied with :meth:`html2gfm.converter.Converter.use`, either
directly or by name.

Third-party packages can publish named plugins through the
``html2gfm.plugins`` entry point group:

.. code-block:: toml

    [project.entry-points."html2gfm.plugins"]
    footnotes = "my_package.plugins:footnotes_plugin"

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Callable

from html2gfm.constants import PLUGIN_ENTRY_POINT_GROUP
from html2gfm.exceptions import PluginNotFoundError
from html2gfm.plugins.gfm import gfm_plugin, gfm_rules
from html2gfm.plugins.table import table_plugin, table_rules

logger = logging.getLogger(__name__)

BUILTIN_PLUGINS: dict[str, Callable] = {
    "table": table_plugin,
    "gfm": gfm_plugin,
}


def _entry_points() -> importlib.metadata.EntryPoints:
    return importlib.metadata.entry_points().select(group=PLUGIN_ENTRY_POINT_GROUP)


def list_plugins() -> list[str]:
    """Return the names of all built-in and installed plugins."""
    names = set(BUILTIN_PLUGINS)
    names.update(ep.name for ep in _entry_points())
    return sorted(names)


def get_plugin(name: str) -> Callable:
    """Resolve a plugin by name.

    Built-in plugins take precedence over entry points with the same name.

    Parameters
    ----------
    name : str
        Plugin name, e.g. ``"gfm"``

    Returns
    -------
    callable
        The plugin

    Raises
    ------
    PluginNotFoundError
        If no built-in plugin or loadable entry point has this name

    """
    if name in BUILTIN_PLUGINS:
        return BUILTIN_PLUGINS[name]

    for ep in _entry_points():
        if ep.name != name:
            continue
        try:
            plugin = ep.load()
        except Exception as e:
            logger.warning(f"Failed to load plugin entry point '{ep.name}': {e}")
            continue
        if not callable(plugin):
            logger.warning(f"Entry point '{ep.name}' did not return a callable plugin, skipping")
            continue
        logger.debug(f"Loaded plugin from entry point: {ep.name}")
        return plugin

    raise PluginNotFoundError(name, available=list_plugins())


__all__ = [
    "BUILTIN_PLUGINS",
    "get_plugin",
    "gfm_plugin",
    "gfm_rules",
    "list_plugins",
    "table_plugin",
    "table_rules",
]
