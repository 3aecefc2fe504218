# cannot/core/slots.py
"""
Write-once value cells.

A WriteOnce starts empty and accepts exactly one non-empty value.
The cell itself never raises; callers decide the policy on conflict
(reason/subject fail loudly, data/info keep the first value).
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class WriteOnce(Generic[T]):
    """Option-like cell that can be filled once"""

    __slots__ = ("_value", "_is_set")

    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._is_set = False

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def value(self) -> Optional[T]:
        return self._value

    def try_set(self, value: Any) -> bool:
        """
        Store value if the cell is still empty.

        Returns:
            True if the value was stored, False if the cell was already filled

        Falsy values never fill the cell and report True (nothing to conflict with).
        """
        if not value:
            return True
        if self._is_set:
            return False
        self._value = value
        self._is_set = True
        return True

    def get(self, default: Optional[T] = None) -> Optional[T]:
        return self._value if self._is_set else default

    def __bool__(self) -> bool:
        return self._is_set

    def __repr__(self) -> str:
        if not self._is_set:
            return "WriteOnce(<unset>)"
        return f"WriteOnce({self._value!r})"


__all__ = ["WriteOnce"]
