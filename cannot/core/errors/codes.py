# cannot/core/errors/codes.py
from __future__ import annotations

from typing import Final

# ---- verb/object/reason of the library's own failures (stable public contract) ----
# The resulting codes follow the configured prefix, e.g. "cannot_create_error".

# construction
CREATE: Final[str] = "create"
ERROR: Final[str] = "error"
MISSING_VERB_OR_OBJECT: Final[str] = "verb or object is missing"

# reason / subject
OVERWRITE: Final[str] = "overwrite"
SET: Final[str] = "set"
REASON: Final[str] = "reason"
SUBJECT: Final[str] = "subject"
UNSUPPORTED_REASON: Final[str] = "neither string nor error code"

# extension api
EXTEND: Final[str] = "extend"
PROTOTYPE: Final[str] = "prototype"
PROTOTYPE_WITH_GETTER: Final[str] = "prototype with getter"
INSTANCE: Final[str] = "instance"
INSTANCE_WITH_GETTER: Final[str] = "instance with getter"
PROPERTY_EXISTS: Final[str] = "the property already exists"
GETTER_NOT_CALLABLE: Final[str] = "value needs to be a function"
UNKNOWN_EXTENSION_TYPE: Final[str] = "the extension type is unknown"

# hooks
HOOK_INTO: Final[str] = "hook into"
UNHOOK: Final[str] = "unhook"
HOOK_UNKNOWN: Final[str] = "a hook with that name does not exist"
HOOK_EXISTS: Final[str] = "a hook for that function already exists"

# handling
REGISTER: Final[str] = "register"
HANDLER: Final[str] = "handler"
HANDLER_NOT_CALLABLE: Final[str] = "the handler is not callable"

# configuration
CONFIGURE: Final[str] = "configure"
LIBRARY: Final[str] = "cannot"


# names
CAPABILITY: Final[str] = "capability"
INVALID_NAME: Final[str] = "the name is not a valid identifier"
EXECUTE_HOOK: Final[str] = "execute hook"
