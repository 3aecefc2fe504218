# cannot/config/loader.py
"""
Configuration Loader

Process-wide configuration for error construction, with YAML as optional input.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
- Config instances are frozen; configure() swaps in a new instance

Instances read the configuration lazily and only once per derived field:
`code` reads `prefix` on first access, `subject` reads the default subject
on first access. Reconfiguring never alters values already computed.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "cannot"
DEFAULT_SUBJECT = "I"

# Top-level YAML section holding the options (a flat mapping also works)
YAML_SECTION = "cannot"


@dataclass(frozen=True)
class CannotConfig:
    """
    Error construction configuration.

    prefix: Leading segment of every error code ("" drops the segment)
    subject: Default grammatical subject of messages ("I could not ...")
    """

    prefix: str = DEFAULT_PREFIX
    subject: str = DEFAULT_SUBJECT

    @classmethod
    def default(cls) -> "CannotConfig":
        """Default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def field_names(cls) -> frozenset:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "CannotConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.cannot/config.yml

        Returns:
            CannotConfig instance (always has code defaults as fallback)
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        section = yaml_data.get(YAML_SECTION, yaml_data)
        if not isinstance(section, Mapping):
            logger.warning(f"Ignoring config section '{YAML_SECTION}': expected a mapping")
            return config

        return config.merge(section)

    def merge(self, options: Mapping[str, Any]) -> "CannotConfig":
        """Return a copy with the recognized keys of options applied"""
        known = self.field_names()
        updates = {}
        for key, value in options.items():
            if key in known:
                updates[key] = value
            else:
                logger.warning(f"Ignoring unknown config option '{key}'")
        if not updates:
            return self
        return replace(self, **updates)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "prefix": self.prefix,
            "subject": self.subject,
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = [Path.home() / ".cannot" / "config.yml"]

    for path in paths:
        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
            if data is not None and not isinstance(data, dict):
                logger.warning(f"Ignoring config file {path}: top level is not a mapping")
                return None
            return data

    return None


# ---------------------------
# Process-wide state
# ---------------------------

_config: CannotConfig = CannotConfig.default()
_config_lock = threading.Lock()


def get_config() -> CannotConfig:
    """Current process-wide configuration (immutable)"""
    return _config


def set_config(config: CannotConfig) -> CannotConfig:
    """
    Install a configuration after validating it.

    Raises:
        InvalidConfigError: If validation reports an error-level issue
    """
    global _config
    from .validator import validate_config

    issues = validate_config(config)
    errors = [issue for issue in issues if issue.level == "error"]
    if errors:
        from cannot.core.errors.exceptions import InvalidConfigError
        raise InvalidConfigError(reason=errors[0].message)

    for issue in issues:
        logger.warning(str(issue))

    with _config_lock:
        _config = config
    return config


def configure(options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> CannotConfig:
    """
    Merge options into the process-wide configuration.

    Unspecified keys are untouched. Unknown keys are ignored with a warning.

    Example:
        configure({"prefix": ""})
        configure(subject="Database")
    """
    merged: Dict[str, Any] = dict(options or {})
    merged.update(kwargs)
    return set_config(get_config().merge(merged))


def reset_config() -> CannotConfig:
    """Restore the code defaults (useful for testing)"""
    global _config
    with _config_lock:
        _config = CannotConfig.default()
    return _config


def load_config(config_path: Optional[Path] = None) -> CannotConfig:
    """
    Load configuration from YAML and install it process-wide.

    Note:
        - If no YAML file is found, code defaults are installed
        - Already computed codes/subjects on existing errors are unaffected
    """
    return set_config(CannotConfig.from_yaml(config_path))


__all__ = [
    "CannotConfig",
    "DEFAULT_PREFIX",
    "DEFAULT_SUBJECT",
    "get_config",
    "set_config",
    "configure",
    "reset_config",
    "load_config",
]
