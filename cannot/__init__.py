# cannot/__init__.py
"""
Cannot - human readable, machine comparable errors

Build an error from what could not be done, to what, and why:

    >>> from cannot import Cannot, cannot
    >>> err = cannot("load", "user").because("the connection was lost")
    >>> err.message
    'I could not load user, because the connection was lost.'
    >>> err.code
    'cannot_load_user'
    >>> err.reason
    'the_connection_was_lost'

Chain errors to keep the causal story readable:

    >>> try:
    ...     raise cannot("connect to", "database", {"code": "timeout"})
    ... except Cannot as e:
    ...     err = cannot("load", "user").because(e)
    >>> err.message
    'I could not load user, because I could not connect to database, because timeout.'

Configuration:
    >>> _ = Cannot.config(prefix="", subject="Database")

Extensions:
    >>> def http_status(cls):
    ...     cls.extend("status", lambda err: 503 if err.reason else 500, type="get")
    >>> Cannot.use(http_status)
    True
"""

__version__ = "0.1.0"

from .config import (
    CannotConfig,
    get_config,
    configure,
    reset_config,
    load_config,
)
from .core.codify import codify
from .core.errors import (
    Cannot,
    cannot,
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
from .core.extensions import (
    ExtensionRegistry,
    get_global_registry,
    load_plugins,
    auto_register,
)

# Static surface, mirrored as module functions
use = Cannot.use
extend = Cannot.extend
curtail = Cannot.curtail
hook = Cannot.hook
unhook = Cannot.unhook

# Built-in extensions
auto_register()

__all__ = [
    # Version
    "__version__",

    # Error type
    "Cannot",
    "cannot",
    "codify",

    # Configuration
    "CannotConfig",
    "configure",
    "get_config",
    "reset_config",
    "load_config",

    # Extension API
    "use",
    "extend",
    "curtail",
    "hook",
    "unhook",
    "load_plugins",
    "ExtensionRegistry",
    "get_global_registry",

    # Failure kinds
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
