# cannot/core/extensions/registry.py
"""
Extension Registry: add capabilities to Cannot without touching its source.

The registry provides:
- Extension installation (use), idempotent by function identity
- Capability registration on the type or a single instance (extend)
- Capability removal (curtail), limited to names the registry added
- Lifecycle hooks (hook, unhook, execute_hook)

Design principles:
- Extensions receive the error type and call extend/hook themselves
- Misuse is reported with the library's own error types
- Capabilities are installed on the error type, so resetting the
  registry also removes them from the type
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional
import logging
import threading

from pydantic import ValidationError

from ..errors import codes
from ..errors.cannot import Cannot
from ..errors.exceptions import (
    ExtensionConflictError,
    InvalidGetterError,
    InvalidHandlerError,
    InvalidOptionsError,
    UnknownHookError,
)
from ..hooks import HookFn
from .contracts import Capability, ExtendOptions

logger = logging.getLogger(__name__)

ExtensionFn = Callable[[type], Any]


class ExtensionRegistry:
    """
    Central registry for extensions, capabilities and hooks of an error type.

    Usage:
    ```python
    registry = get_global_registry()

    def timestamps(Cannot):
        Cannot.extend("age", lambda err: time.time() - err.created_at.timestamp(), type="get")

    registry.use(timestamps)      # True, extension called once
    registry.use(timestamps)      # False, already installed
    registry.hook("create", lambda err: print(err.code))
    ```
    """

    def __init__(self, target: type = Cannot) -> None:
        self.target = target
        self._extensions: List[ExtensionFn] = []
        self._capabilities: Dict[str, Capability] = {}
        # Re-entrant: extensions call extend/hook while use() is running
        self._lock = threading.RLock()

    # ---------------------------
    # Extensions
    # ---------------------------

    def use(self, extension: ExtensionFn) -> bool:
        """
        Install an extension once.

        Returns:
            True if the extension was installed now, False if it already was
        """
        with self._lock:
            if self.is_installed(extension):
                return False
            self._extensions.append(extension)
            try:
                extension(self.target)
            except Exception:
                self._extensions.remove(extension)
                raise

        logger.debug(f"Installed extension {_name_of(extension)}")
        return True

    def is_installed(self, extension: ExtensionFn) -> bool:
        return any(e is extension for e in self._extensions)

    def list_extensions(self) -> List[ExtensionFn]:
        return list(self._extensions)

    # ---------------------------
    # Capabilities
    # ---------------------------

    def extend(self, name: str, value: Any, type: str = "proto") -> None:
        """
        Add a capability to every instance of the error type.

        Raises:
            ExtensionConflictError: If the type already has that attribute
            InvalidGetterError: If type="get" and value is not callable
            InvalidOptionsError: If the name or the extension type is invalid
        """
        options = _parse_options(name, type)

        with self._lock:
            if options.type == "proto":
                if hasattr(self.target, name):
                    raise ExtensionConflictError(codes.EXTEND, codes.PROTOTYPE)
                setattr(self.target, name, value)
            else:
                if hasattr(self.target, name):
                    raise ExtensionConflictError(codes.EXTEND, codes.PROTOTYPE_WITH_GETTER)
                if not callable(value):
                    raise InvalidGetterError()
                setattr(self.target, name, property(value))

            self._capabilities[name] = Capability(name=name, kind=options.type, value=value)

        logger.debug(f"Extended {self.target.__name__} with {options.type} '{name}'")

    def extend_instance(self, instance: Cannot, name: str, value: Any, type: str = "proto") -> None:
        """
        Add a capability to a single instance.

        Plain values are stored on the instance, getters in its getter table
        (read-only, resolved by Cannot.__getattr__).
        """
        options = _parse_options(name, type)

        if options.type == "proto":
            if _instance_has(instance, name):
                raise ExtensionConflictError(codes.EXTEND, codes.INSTANCE)
            instance.__dict__[name] = value
        else:
            if _instance_has(instance, name):
                raise ExtensionConflictError(codes.EXTEND, codes.INSTANCE_WITH_GETTER)
            if not callable(value):
                raise InvalidGetterError(codes.EXTEND, codes.INSTANCE_WITH_GETTER)
            instance._getters[name] = value

    def curtail(self, name: str) -> bool:
        """
        Remove a capability previously added with extend().

        Returns:
            True if removed, False if the registry never added that name
        """
        with self._lock:
            capability = self._capabilities.pop(name, None)
            if capability is None:
                return False
            if name in vars(self.target):
                delattr(self.target, name)

        logger.debug(f"Curtailed '{name}' from {self.target.__name__}")
        return True

    def get_capability(self, name: str) -> Optional[Capability]:
        return self._capabilities.get(name)

    def list_capabilities(self) -> List[Capability]:
        return list(self._capabilities.values())

    # ---------------------------
    # Hooks
    # ---------------------------

    def hook(self, name: str, fn: HookFn) -> None:
        """
        Register fn for a lifecycle event ("create").

        Raises:
            UnknownHookError: If the event does not exist
            ExtensionConflictError: If fn is already registered for the event
        """
        hooks = self.target._hooks
        with self._lock:
            if not hooks.has_event(name):
                raise UnknownHookError(codes.HOOK_INTO, _hook_object(name))
            if hooks.contains(name, fn):
                raise ExtensionConflictError(codes.HOOK_INTO, name, codes.HOOK_EXISTS)
            if not callable(fn):
                raise InvalidHandlerError(codes.HOOK_INTO, name)
            hooks.add(name, fn)

        logger.debug(f"Hooked {_name_of(fn)} into '{name}'")

    def unhook(self, name: str, fn: HookFn) -> None:
        """
        Remove fn from a lifecycle event. Removing an unregistered fn does nothing.

        Raises:
            UnknownHookError: If the event does not exist
        """
        hooks = self.target._hooks
        with self._lock:
            if not hooks.has_event(name):
                raise UnknownHookError(codes.UNHOOK, _hook_object(name))
            removed = hooks.remove(name, fn)

        if removed:
            logger.debug(f"Unhooked {_name_of(fn)} from '{name}'")

    def execute_hook(self, name: str, *args: Any) -> None:
        """Call the hooks of an event synchronously, in registration order"""
        hooks = self.target._hooks
        if not hooks.has_event(name):
            raise UnknownHookError(codes.EXECUTE_HOOK, _hook_object(name))
        hooks.execute(name, *args)

    def list_hooks(self, name: str) -> List[HookFn]:
        return self.target._hooks.get(name)

    # ---------------------------

    def clear(self) -> None:
        """Remove every capability, hook and installed extension (useful for testing)"""
        with self._lock:
            for name in list(self._capabilities):
                self.curtail(name)
            self.target._hooks.clear()
            self._extensions.clear()

    def __repr__(self) -> str:
        return (
            f"ExtensionRegistry("
            f"target={self.target.__name__}, "
            f"extensions={len(self._extensions)}, "
            f"capabilities={sorted(self._capabilities)})"
        )


def _parse_options(name: Any, type: str) -> ExtendOptions:
    if not isinstance(name, str) or not name.isidentifier():
        raise InvalidOptionsError(codes.EXTEND, codes.CAPABILITY, codes.INVALID_NAME)
    try:
        return ExtendOptions(type=type)
    except ValidationError as e:
        raise InvalidOptionsError(codes.EXTEND, name) from e


def _instance_has(instance: Cannot, name: str) -> bool:
    # Checks without evaluating getters
    return (
        hasattr(type(instance), name)
        or name in instance.__dict__
        or name in instance._getters
    )


def _hook_object(name: Any) -> str:
    return str(name) if name else "unnamed hook"


def _name_of(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


# Global registry instance
_global_registry: Optional[ExtensionRegistry] = None
_global_registry_lock = threading.Lock()


def get_global_registry() -> ExtensionRegistry:
    """
    Get the global extension registry.

    The global registry is lazily initialized on first access.
    """
    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = ExtensionRegistry(Cannot)

    return _global_registry


def reset_global_registry() -> None:
    """
    Reset the global registry.

    Useful for testing. Removes every capability and hook from Cannot;
    built-in extensions need to be installed again (bootstrap.auto_register).
    """
    global _global_registry
    with _global_registry_lock:
        if _global_registry is not None:
            _global_registry.clear()
        _global_registry = None


__all__ = [
    "ExtensionRegistry",
    "ExtensionFn",
    "get_global_registry",
    "reset_global_registry",
]
