"""Type definitions for design-token values."""

from typing import Any, Literal

TokenValue = Any
TokenTree = dict[str, Any]

TokenVariant = Literal["node", "leaf", "array", "scalar"]

ChangeKind = Literal["added", "removed", "modified"]

CHANGE_KINDS: tuple[str, ...] = (
    "added",
    "removed",
    "modified",
)

VALUE_KEY = "$value"
