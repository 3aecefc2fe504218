# cannot/core/extensions/plugins.py
"""
Plugin System: Load external extensions via entry_points.

Third-party packages can ship extensions that are discovered through
Python's entry_points mechanism and installed with use().

Design principles:
- Plugins are optional (no hard dependencies)
- A plugin is an extension function taking the error type
- Plugins are isolated (a failing plugin is logged and skipped)

Entry point group: "cannot.extensions"

Example plugin pyproject.toml:
```toml
[project.entry-points."cannot.extensions"]
http_status = "my_plugin:http_status_extension"
```
"""

from __future__ import annotations

from typing import List, Optional
import importlib.metadata
import logging

from .registry import ExtensionFn, ExtensionRegistry, get_global_registry

# Entry point group for extensions
EXTENSION_ENTRY_POINT_GROUP = "cannot.extensions"

logger = logging.getLogger(__name__)


def discover_plugin_extensions() -> List[ExtensionFn]:
    """
    Discover plugin extensions via entry_points.

    Returns:
        List of extension functions from plugins

    Note:
        Plugins that fail to load are logged and skipped.
    """
    extensions = []

    for ep in importlib.metadata.entry_points(group=EXTENSION_ENTRY_POINT_GROUP):
        try:
            extension = ep.load()
        except Exception as e:
            logger.warning(
                f"Failed to load plugin extension '{ep.name}' from '{ep.value}': {e}",
                exc_info=True,
            )
            continue

        if not callable(extension):
            logger.warning(
                f"Plugin extension '{ep.name}' from '{ep.value}' is not callable. Skipping."
            )
            continue

        extensions.append(extension)
        logger.info(f"Loaded plugin extension: {ep.name} from {ep.value}")

    return extensions


def load_plugins(registry: Optional[ExtensionRegistry] = None) -> int:
    """
    Discover and install plugin extensions.

    Args:
        registry: Registry to install plugins into (if None, uses global registry)

    Returns:
        Number of plugins newly installed
    """
    if registry is None:
        registry = get_global_registry()

    installed = 0
    for extension in discover_plugin_extensions():
        try:
            if registry.use(extension):
                installed += 1
        except Exception as e:
            # A plugin may conflict with a built-in capability
            logger.warning(f"Failed to install plugin extension {extension!r}: {e}")

    return installed


__all__ = [
    "discover_plugin_extensions",
    "load_plugins",
    "EXTENSION_ENTRY_POINT_GROUP",
]
