# cannot/config/__init__.py
"""
Cannot Configuration

Process-wide settings read by error instances.

Design principles:
1. Code has defaults, YAML is optional input
2. Configuration objects are frozen; reconfiguring installs a new object
3. Each error reads a setting at most once (on first use of the derived field)
"""

from .loader import (
    CannotConfig,
    DEFAULT_PREFIX,
    DEFAULT_SUBJECT,
    get_config,
    set_config,
    configure,
    reset_config,
    load_config,
)
from .validator import validate_config, ConfigIssue

__all__ = [
    "CannotConfig",
    "DEFAULT_PREFIX",
    "DEFAULT_SUBJECT",
    "get_config",
    "set_config",
    "configure",
    "reset_config",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
