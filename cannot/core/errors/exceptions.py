# cannot/core/errors/exceptions.py
"""
The library reports its own misuse with its own error type.

Every failure here is a Cannot, so a caller already handling Cannot
errors handles these too. Each class carries a default verb/object/reason;
callers may narrow the object (e.g. the hook name) when raising.
"""

from __future__ import annotations

from typing import Any

from . import codes
from .cannot import Cannot


class UsageError(Cannot):
    """Base class for misuse of the library itself."""


class InvalidArgumentsError(UsageError):
    """An error was created without a verb or an object."""

    def __init__(
        self,
        verb: Any = codes.CREATE,
        obj: Any = codes.ERROR,
        reason: Any = codes.MISSING_VERB_OR_OBJECT,
    ) -> None:
        super().__init__(verb, obj, reason)


class ReasonAlreadySetError(UsageError):
    """The reason of an error can only be set once."""

    def __init__(self, verb: Any = codes.OVERWRITE, obj: Any = codes.REASON, reason: Any = None) -> None:
        super().__init__(verb, obj, reason)


class SubjectAlreadySetError(UsageError):
    """The subject of an error can only be set once."""

    def __init__(self, verb: Any = codes.OVERWRITE, obj: Any = codes.SUBJECT, reason: Any = None) -> None:
        super().__init__(verb, obj, reason)


class InvalidReasonTypeError(UsageError):
    """Reason is neither a string, a code-bearing value nor an exception."""

    def __init__(
        self,
        verb: Any = codes.SET,
        obj: Any = codes.REASON,
        reason: Any = codes.UNSUPPORTED_REASON,
    ) -> None:
        super().__init__(verb, obj, reason)


class ExtensionConflictError(UsageError):
    """A capability or hook with that name/function is already registered."""

    def __init__(
        self,
        verb: Any = codes.EXTEND,
        obj: Any = codes.PROTOTYPE,
        reason: Any = codes.PROPERTY_EXISTS,
    ) -> None:
        super().__init__(verb, obj, reason)


class UnknownHookError(UsageError):
    """hook()/unhook() referenced an event that does not exist."""

    def __init__(self, verb: Any = codes.HOOK_INTO, obj: Any = "hook", reason: Any = codes.HOOK_UNKNOWN) -> None:
        super().__init__(verb, obj, reason)


class InvalidGetterError(UsageError):
    """extend(type="get") was given a value that is not callable."""

    def __init__(
        self,
        verb: Any = codes.EXTEND,
        obj: Any = codes.PROTOTYPE_WITH_GETTER,
        reason: Any = codes.GETTER_NOT_CALLABLE,
    ) -> None:
        super().__init__(verb, obj, reason)


class InvalidOptionsError(UsageError):
    """extend() was given an unknown extension type."""

    def __init__(
        self,
        verb: Any = codes.EXTEND,
        obj: Any = codes.CAPABILITY,
        reason: Any = codes.UNKNOWN_EXTENSION_TYPE,
    ) -> None:
        super().__init__(verb, obj, reason)


class InvalidHandlerError(UsageError):
    """A handler passed to err.handle() is not callable."""

    def __init__(
        self,
        verb: Any = codes.REGISTER,
        obj: Any = codes.HANDLER,
        reason: Any = codes.HANDLER_NOT_CALLABLE,
    ) -> None:
        super().__init__(verb, obj, reason)


class InvalidConfigError(UsageError):
    """A configuration value failed validation."""

    def __init__(self, verb: Any = codes.CONFIGURE, obj: Any = codes.LIBRARY, reason: Any = None) -> None:
        super().__init__(verb, obj, reason)


__all__ = [
    "UsageError",
    "InvalidArgumentsError",
    "ReasonAlreadySetError",
    "SubjectAlreadySetError",
    "InvalidReasonTypeError",
    "ExtensionConflictError",
    "UnknownHookError",
    "InvalidGetterError",
    "InvalidOptionsError",
    "InvalidHandlerError",
    "InvalidConfigError",
]
