# cannot/builtin/handling.py
"""
Handling extension: compare errors by verb, object and reason.

    err = cannot("load", "user").because(cannot("connect to", "database"))

    err.matches("load", "user")                      # True
    err.matches("cannot load user")                  # True (compares the code)
    err.assert_cannot("load", "user").because.cannot("connect to", "database")  # truthy
    err.check.cannot("save", "user").false()         # True

Comparisons are made on codified text, so they ignore case and spacing.
"""

from __future__ import annotations

from typing import Any, Optional

from cannot.core.codify import codify
from cannot.core.errors.cannot import Cannot


def is_cannot(err: Cannot, verb: Any, obj: Optional[Any] = None, allow_code: bool = True) -> bool:
    """
    True if err was raised for verb/obj.

    With obj omitted and allow_code set, verb is compared to the full code instead.
    """
    if isinstance(obj, str):
        return codify(verb) == err.verb and codify(obj) == err.object
    if obj is None and allow_code:
        return codify(verb) == err.code
    return False


class _BecauseClause:
    """err.assert_cannot(...).because: callable, with a .cannot() variant"""

    def __init__(self, matched: bool, err: Cannot) -> None:
        self._matched = matched
        self._err = err

    def __call__(self, reason: Any) -> bool:
        return self._matched and isinstance(reason, str) and self._err.reason == codify(reason)

    def cannot(self, verb: Any, obj: Optional[Any] = None) -> bool:
        cause = self._err.cause
        return self._matched and isinstance(cause, Cannot) and is_cannot(cause, verb, obj)


class BecauseCheck:
    """
    Result of assert_cannot(): truthy when verb/object matched.

    Narrow further with .because(reason) or .because.cannot(verb, obj).
    """

    def __init__(self, matched: bool, err: Cannot) -> None:
        self.value = matched
        self.because = _BecauseClause(matched, err)

    def true(self) -> bool:
        return self.value

    def false(self) -> bool:
        return not self.value

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, bool):
            return self.value is other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"BecauseCheck({self.value})"


class Matcher:
    """Bound err.matches: callable, with a .cannot() variant returning a BecauseCheck"""

    def __init__(self, err: Cannot) -> None:
        self._err = err

    def __call__(self, verb: Any, obj: Optional[Any] = None) -> bool:
        return is_cannot(self._err, verb, obj)

    def cannot(self, verb: Any, obj: Optional[Any] = None) -> BecauseCheck:
        return self._err.assert_cannot(verb, obj)


class _Check:
    def __init__(self, err: Cannot) -> None:
        self._err = err

    def cannot(self, verb: Any, obj: Optional[Any] = None) -> BecauseCheck:
        return self._err.assert_cannot(verb, obj)


def assert_cannot(self: Cannot, verb: Any, obj: Optional[Any] = None) -> BecauseCheck:
    return BecauseCheck(is_cannot(self, verb, obj), self)


def _attach_matcher(err: Cannot) -> None:
    # A type-level "matches" added with Cannot.extend takes precedence
    if hasattr(type(err), "matches"):
        return
    err.extend("matches", Matcher(err))


def handling_extension(cls: type) -> None:
    cls.extend("assert_cannot", assert_cannot)
    cls.extend("check", _Check, type="get")
    cls.hook("create", _attach_matcher)


__all__ = ["handling_extension", "is_cannot", "BecauseCheck", "Matcher"]
