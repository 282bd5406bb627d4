"""Core token value model for TokenKit."""

from tokenpack.core.tokens import (
    classify_token_value,
    is_leaf_token,
    is_token_node,
    token_json,
    tokens_equal,
)
from tokenpack.core.types import (
    CHANGE_KINDS,
    VALUE_KEY,
    ChangeKind,
    TokenTree,
    TokenValue,
    TokenVariant,
)

__all__ = [
    "CHANGE_KINDS",
    "VALUE_KEY",
    "ChangeKind",
    "TokenTree",
    "TokenValue",
    "TokenVariant",
    "classify_token_value",
    "is_leaf_token",
    "is_token_node",
    "token_json",
    "tokens_equal",
]
