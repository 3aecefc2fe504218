# cannot/config/validator.py
"""
Configuration Validator

Validates configuration values before they are installed.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, TYPE_CHECKING

if TYPE_CHECKING:
    from .loader import CannotConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging and error reasons.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "cannot.prefix"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"[{self.level}] {self.path}: {self.message}{hint_str}"


def validate_config(config: "CannotConfig") -> List[ConfigIssue]:
    """
    Validate configuration values.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(config.prefix, str):
        issues.append(ConfigIssue(
            level="error",
            path="cannot.prefix",
            message="prefix must be a string",
            hint="Use an empty string to drop the prefix from codes",
        ))

    if not isinstance(config.subject, str):
        issues.append(ConfigIssue(
            level="error",
            path="cannot.subject",
            message="subject must be a string",
        ))
    elif not config.subject.strip():
        issues.append(ConfigIssue(
            level="warn",
            path="cannot.subject",
            message="an empty subject produces messages starting with ' could not'",
            hint="Set a subject such as 'I' or the name of your component",
        ))

    return issues


__all__ = ["ConfigIssue", "validate_config"]
