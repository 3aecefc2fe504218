# cannot/core/errors/cannot.py
"""
Cannot: the structured error type.

An error is built from a verb, an object and an optional reason:

    >>> err = Cannot("load", "user").because("the connection was lost")
    >>> err.message
    'I could not load user, because the connection was lost.'
    >>> err.code
    'cannot_load_user'
    >>> err.reason
    'the_connection_was_lost'

A reason may be another Cannot, which chains the messages:

    >>> Cannot("load", "user", Cannot("connect to", "database")).message
    'I could not load user, because I could not connect to database. (No reason)'

Derived fields (`code`, `message`, default `subject`) are computed on first
access and cached per instance. `reason` and `subject` can be set once,
`data` and info keep the first non-empty value.
"""

from __future__ import annotations

import functools
import itertools
import types
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable, ClassVar, Dict, Optional, Set

from cannot.config.loader import configure, get_config
from ..codify import codify
from ..hooks import CREATE, HookTable
from ..slots import WriteOnce

# Process-wide instance counter, ids are never reused
_counter = itertools.count(1)

# Instance attributes set by Cannot.__init__ (anything else came from extend)
_OWN_FIELDS = frozenset({
    "_getters", "_id", "_created_at", "_verb", "_object",
    "_reason", "_subject", "_data", "_info",
    "_default_subject", "_code", "_message",
})


def _get_attr(obj: Any, name: str, default: Any = None) -> Any:
    try:
        return getattr(obj, name)
    except Exception:
        return default


def _reason_field(reason: Any, name: str) -> Optional[str]:
    """Read a string field from a mapping or an attribute-bearing reason"""
    if isinstance(reason, str):
        return None
    if isinstance(reason, Mapping):
        value = reason.get(name)
    else:
        value = _get_attr(reason, name)
    return value if isinstance(value, str) and value else None


def _is_supported_reason(reason: Any) -> bool:
    if isinstance(reason, (str, BaseException)):
        return True
    return _reason_field(reason, "code") is not None


def _reason_text(reason: Any) -> str:
    """Readable text of a non-Cannot reason: code, then message, then str()"""
    text = _reason_field(reason, "code") or _reason_field(reason, "message")
    if text:
        return text
    text = str(reason)
    if not text and isinstance(reason, BaseException):
        return type(reason).__name__
    return text


class _dualmethod:
    """Bind to the instance when accessed through one, otherwise to the class"""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.fn = fn
        functools.update_wrapper(self, fn)

    def __get__(self, instance: Any, owner: type) -> Callable[..., Any]:
        return types.MethodType(self.fn, owner if instance is None else instance)


def _registry():
    from ..extensions.registry import get_global_registry
    return get_global_registry()


class Cannot(Exception):
    """
    A human readable, machine comparable error.

    Args:
        verb: The action that could not be performed ("load")
        obj: The target of the action ("user")
        reason: Optional cause: a string, a mapping/object with a string `code`,
            an exception, or another Cannot

    Raises:
        InvalidArgumentsError: If verb or object is missing
        InvalidReasonTypeError: If the reason has an unsupported type
    """

    is_error: ClassVar[bool] = True

    # Lifecycle hooks shared by all instances (managed through the registry)
    _hooks: ClassVar[HookTable] = HookTable()

    codify = staticmethod(codify)
    config = staticmethod(configure)

    def __init__(self, verb: Any, obj: Any, reason: Any = None) -> None:
        super().__init__(verb, obj, reason)

        self._getters: Dict[str, Callable[[Any], Any]] = {}
        self._id = next(_counter)
        self._created_at = datetime.now(timezone.utc)

        self._verb = verb
        self._object = obj
        self._reason: WriteOnce[Any] = WriteOnce()
        self._subject: WriteOnce[str] = WriteOnce()
        self._data: WriteOnce[Any] = WriteOnce()
        self._info: WriteOnce[str] = WriteOnce()

        self._default_subject: Optional[str] = None
        self._code: Optional[str] = None
        self._message: Optional[str] = None

        if not verb or not obj:
            from .exceptions import InvalidArgumentsError
            raise InvalidArgumentsError()

        self.reason = reason

        type(self)._hooks.execute(CREATE, self)

    # -------- dynamic capabilities --------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: instance-level getters live here
        getters = self.__dict__.get("_getters")
        if getters and name in getters:
            return getters[name](self)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        getters = self.__dict__.get("_getters")
        if getters and name in getters:
            raise AttributeError(f"'{name}' is a read-only getter")
        super().__setattr__(name, value)

    # -------- identity --------

    @property
    def id(self) -> int:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # -------- codified fields --------

    @property
    def verb(self) -> str:
        """Codified verb: Cannot("connect to", "db").verb -> "connect_to" """
        return codify(self._verb)

    @property
    def object(self) -> str:
        """Codified object: Cannot("load", "User").object -> "user" """
        return codify(self._object)

    @property
    def code(self) -> str:
        """
        prefix_verb_object, e.g. "cannot_load_user".

        The prefix is read from the configuration once, on first access.
        """
        if self._code is None:
            prefix = get_config().prefix
            parts = [codify(self._verb), codify(self._object)]
            if isinstance(prefix, str) and prefix:
                parts.insert(0, codify(prefix))
            self._code = "_".join(parts)
        return self._code

    # -------- reason --------

    @property
    def reason(self) -> str:
        """
        The reason as a token.

        Cannot reasons and reasons with a `code` give their code verbatim,
        other exceptions give codify("Error: <text>"), strings are codified.
        """
        if not self._reason:
            return ""
        reason = self._reason.value
        code = _reason_field(reason, "code")
        if code is not None:
            return code
        if isinstance(reason, BaseException):
            text = str(reason)
            return codify(f"Error: {text}" if text else "Error")
        return codify(reason)

    @reason.setter
    def reason(self, value: Any) -> None:
        if not value:
            return
        if self._reason:
            from .exceptions import ReasonAlreadySetError
            raise ReasonAlreadySetError()
        if not _is_supported_reason(value):
            from .exceptions import InvalidReasonTypeError
            raise InvalidReasonTypeError()

        self._reason.try_set(value)
        if isinstance(value, BaseException):
            self.__cause__ = value
        self._message = None

    @property
    def cause(self) -> Any:
        """The reason exactly as it was given (None if unset)"""
        return self._reason.get()

    def because(self, reason: Any) -> "Cannot":
        """
        Set the reason with method chaining.

        Example:
            err = Cannot("load", "user").because("connection was lost")
        """
        self.reason = reason
        return self

    # -------- subject --------

    @property
    def subject(self) -> str:
        if self._subject:
            return self._subject.value
        if self._default_subject is None:
            self._default_subject = get_config().subject
        return self._default_subject

    @subject.setter
    def subject(self, value: str) -> None:
        if not value:
            return
        if not self._subject.try_set(value):
            from .exceptions import SubjectAlreadySetError
            raise SubjectAlreadySetError()
        self._message = None

    # -------- info / data --------

    def add_info(self, text: str) -> "Cannot":
        """Attach supplementary text, rendered in parentheses after the reason"""
        if self._info.try_set(text):
            self._message = None
        return self

    info = add_info

    @property
    def info_text(self) -> Optional[str]:
        return self._info.get()

    def add_data(self, data: Any) -> "Cannot":
        """
        Attach a payload for programmatic consumers.

        Falsy data is ignored and the first payload wins.
        """
        self._data.try_set(data)
        return self

    @property
    def data(self) -> Any:
        return self._data.get()

    # -------- message --------

    @property
    def message(self) -> str:
        if self._message is None:
            self._message = self._render(set())
        return self._message

    def _render(self, seen: Set[int]) -> str:
        seen.add(self._id)
        build = [self.subject, " could not ", str(self._verb), " ", str(self._object)]

        if self._reason:
            reason = self._reason.value
            if isinstance(reason, Cannot):
                if reason._id in seen:
                    build.append(", because of a circular reason.")
                else:
                    build.extend([", because ", reason._render(seen)])
            else:
                build.extend([", because ", _reason_text(reason), "."])
        else:
            build.append(". (No reason)")

        if self._info:
            build.extend([" (", str(self._info.value), ")"])

        return "".join(build)

    def to_string(self) -> str:
        """'<TypeName>: <message>'"""
        return f"{type(self).__name__}: {self.message}"

    def __str__(self) -> str:
        return self.message

    # -------- copy / pickle --------

    def __reduce__(self):
        # Rebuild through __init__ so the copy gets its own option cells,
        # id and hook-attached capabilities, then restore the options.
        state = {
            "args": self.args,
            "created_at": self._created_at,
            "code": self._code,
            "default_subject": self._default_subject,
            "reason": self._reason.get(),
            "subject": self._subject.get(),
            "data": self._data.get(),
            "info": self._info.get(),
            "getters": dict(self._getters),
            "extras": {k: v for k, v in self.__dict__.items() if k not in _OWN_FIELDS},
        }
        return (type(self), (self._verb, self._object, None), state)

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.args = state["args"]
        self._created_at = state["created_at"]
        self._code = state["code"]
        self._default_subject = state["default_subject"]
        self.reason = state["reason"]
        self.subject = state["subject"]
        self.add_data(state["data"])
        self.add_info(state["info"])
        self._getters.update(state["getters"])
        for name, value in state["extras"].items():
            # Values attached by create hooks were rebuilt for this instance
            self.__dict__.setdefault(name, value)

    # -------- extension api --------

    @classmethod
    def use(cls, extension: Callable[[type], Any]) -> bool:
        return _registry().use(extension)

    @_dualmethod
    def extend(target, name: str, value: Any, type: str = "proto") -> None:
        """
        Add a capability to all errors (Cannot.extend) or one error (err.extend).

        type="proto" adds a plain attribute or method, type="get" a read-only getter.
        """
        if isinstance(target, Cannot):
            _registry().extend_instance(target, name, value, type=type)
        else:
            _registry().extend(name, value, type=type)

    @classmethod
    def curtail(cls, name: str) -> bool:
        return _registry().curtail(name)

    @classmethod
    def hook(cls, name: str, fn: Callable[..., Any]) -> None:
        _registry().hook(name, fn)

    @classmethod
    def unhook(cls, name: str, fn: Callable[..., Any]) -> None:
        _registry().unhook(name, fn)

    @classmethod
    def execute_hook(cls, name: str, *args: Any) -> None:
        _registry().execute_hook(name, *args)


def cannot(verb: Any, obj: Any, reason: Any = None) -> Cannot:
    """Function-call form of Cannot(verb, obj, reason)"""
    return Cannot(verb, obj, reason)


__all__ = ["Cannot", "cannot"]
