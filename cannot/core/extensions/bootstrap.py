# cannot/core/extensions/bootstrap.py
"""
Bootstrap: install the built-in extensions.

Called when the `cannot` package is imported. Installation goes through
use(), so calling it again is harmless.
"""

from __future__ import annotations

from typing import List
import logging

from .registry import ExtensionFn, get_global_registry

logger = logging.getLogger(__name__)


def builtin_extensions() -> List[ExtensionFn]:
    """Built-in extensions in installation order"""
    from cannot.builtin.handling import handling_extension
    from cannot.builtin.handlor import handlor_extension
    return [handling_extension, handlor_extension]


def auto_register() -> int:
    """
    Install the built-in extensions into the global registry.

    Returns:
        Number of extensions installed by this call
    """
    registry = get_global_registry()
    installed = sum(1 for extension in builtin_extensions() if registry.use(extension))
    if installed:
        logger.debug(f"Installed {installed} built-in extension(s)")
    return installed


def is_bootstrapped() -> bool:
    registry = get_global_registry()
    return all(registry.is_installed(extension) for extension in builtin_extensions())


__all__ = [
    "builtin_extensions",
    "auto_register",
    "is_bootstrapped",
]
