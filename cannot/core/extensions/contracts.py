# cannot/core/extensions/contracts.py
"""
Extension contracts: validated records passed through the registry.

ExtendOptions is the input of extend(); Capability is what the registry
remembers about every name it added, so curtail() can only remove those.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ExtensionType = Literal["proto", "get"]


class ExtendOptions(BaseModel):
    """
    Options for extend().

    Fields:
    - type: "proto" adds a plain attribute/method, "get" a read-only getter
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ExtensionType = Field(
        default="proto",
        description="Kind of capability to add",
    )


class Capability(BaseModel):
    """A capability added to the error type or to a single instance"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Attribute name")
    kind: ExtensionType = Field(description="proto or get")
    value: Any = Field(default=None, description="Attribute value or getter function")


__all__ = ["ExtensionType", "ExtendOptions", "Capability"]
