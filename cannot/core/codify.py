# cannot/core/codify.py
"""
Codifier: reduce free text to a canonical token.

"Could not connect to the Internet!" -> "could_not_connect_to_the_internet_"

Used for verbs, objects, string reasons and the configured prefix so that
error codes stay comparable regardless of casing and spacing.
"""

from __future__ import annotations

import re
from typing import Any

# Every maximal run of characters outside [A-Za-z0-9] collapses to one underscore
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def codify(value: Any) -> str:
    """
    Codify a string.

    Falsy input returns an empty string. Non-string input is stringified first.
    The result is idempotent: codify(codify(s)) == codify(s).
    """
    if not value:
        return ""
    return _NON_ALNUM.sub("_", str(value)).lower()


__all__ = ["codify"]
