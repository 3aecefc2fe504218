# cannot/core/errors/__init__.py
"""
Core error types for Cannot.

This package defines:
- The structured error type (Cannot)
- The failure kinds the library raises for its own misuse
- The verb/object/reason constants behind those kinds

No side effects on import.
"""

from .cannot import Cannot, cannot
from .exceptions import (
    UsageError,
    InvalidArgumentsError,
    ReasonAlreadySetError,
    SubjectAlreadySetError,
    InvalidReasonTypeError,
    ExtensionConflictError,
    UnknownHookError,
    InvalidGetterError,
    InvalidOptionsError,
    InvalidHandlerError,
    InvalidConfigError,
)

__all__ = [
    "Cannot",
    "cannot",
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
