# cannot/builtin/handlor.py
"""
Handlor extension: run a handler when an error matches.

    err.handle("load", "user", lambda reason: retry())
    err.handle("load", "user", on_down, reason="database is down")

When the error does not match, a HandlingChain is returned:

    err.handle("load", "user", on_load) \
       .otherwise(lambda err: err.matches("save", "user") and on_save()) \
       .otherwise(log_and_drop)

Each .otherwise() handler runs until one returns a truthy value.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from cannot.core.codify import codify
from cannot.core.errors.cannot import Cannot
from cannot.core.errors.exceptions import InvalidHandlerError
from .handling import is_cannot


class HandlingChain:
    """Fallback handlers for an error that no specific handler matched"""

    def __init__(self, err: Cannot) -> None:
        self._err = err
        self.handled = False

    def otherwise(self, fn: Callable[[Cannot], Any]) -> "HandlingChain":
        if not callable(fn):
            raise InvalidHandlerError()
        if not self.handled:
            self.handled = bool(fn(self._err))
        return self


def _reason_matches(err: Cannot, reason: Optional[Any]) -> bool:
    if reason is None:
        return True
    return isinstance(reason, str) and err.reason == codify(reason)


def handle(
    self: Cannot,
    verb: Any,
    obj: Any,
    handler: Callable[[str], Any],
    reason: Optional[Any] = None,
) -> Any:
    """
    Call handler(err.reason) if verb/obj (and reason, when given) match.

    Returns:
        The handler's result, or a HandlingChain if nothing matched

    Raises:
        InvalidHandlerError: If handler is not callable
    """
    if not callable(handler):
        raise InvalidHandlerError()
    if is_cannot(self, verb, obj, allow_code=False) and _reason_matches(self, reason):
        return handler(self.reason)
    return HandlingChain(self)


def handlor_extension(cls: type) -> None:
    cls.extend("handle", handle)
    cls.extend("handlor", handle)


__all__ = ["handlor_extension", "handle", "HandlingChain"]
