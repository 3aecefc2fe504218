# cannot/core/hooks.py
"""
Hook table: named lifecycle events mapped to ordered callback lists.

The table knows nothing about error reporting. Misuse (unknown event,
duplicate callback) is detected here and reported by the registry.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

HookFn = Callable[..., Any]

# Built-in lifecycle events
CREATE = "create"
BUILTIN_EVENTS = (CREATE,)


class HookTable:
    """Ordered callbacks per event name"""

    def __init__(self, events: Iterable[str] = BUILTIN_EVENTS) -> None:
        self._hooks: Dict[str, List[HookFn]] = {name: [] for name in events}

    def has_event(self, name: str) -> bool:
        return name in self._hooks

    def contains(self, name: str, fn: HookFn) -> bool:
        return any(h is fn for h in self._hooks.get(name, ()))

    def add(self, name: str, fn: HookFn) -> None:
        self._hooks[name].append(fn)

    def remove(self, name: str, fn: HookFn) -> bool:
        hooks = self._hooks[name]
        for index, h in enumerate(hooks):
            if h is fn:
                del hooks[index]
                return True
        return False

    def get(self, name: str) -> List[HookFn]:
        return list(self._hooks.get(name, ()))

    def execute(self, name: str, *args: Any) -> None:
        """Call every hook registered for name, in registration order"""
        # Snapshot so a hook may unhook itself while running
        for fn in list(self._hooks[name]):
            fn(*args)

    def clear(self) -> None:
        for hooks in self._hooks.values():
            hooks.clear()


__all__ = ["HookTable", "HookFn", "CREATE", "BUILTIN_EVENTS"]
