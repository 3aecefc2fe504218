# cannot/core/extensions/__init__.py
"""
Extension API for Cannot.

- registry: use / extend / curtail / hook / unhook
- plugins: entry-point discovery of third-party extensions
- bootstrap: installation of the built-in extensions
"""

from .contracts import Capability, ExtendOptions
from .registry import ExtensionRegistry, get_global_registry, reset_global_registry
from .plugins import discover_plugin_extensions, load_plugins, EXTENSION_ENTRY_POINT_GROUP
from .bootstrap import auto_register, is_bootstrapped

__all__ = [
    "Capability",
    "ExtendOptions",
    "ExtensionRegistry",
    "get_global_registry",
    "reset_global_registry",
    "discover_plugin_extensions",
    "load_plugins",
    "EXTENSION_ENTRY_POINT_GROUP",
    "auto_register",
    "is_bootstrapped",
]
