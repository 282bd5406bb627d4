"""Classification and structural comparison of design-token values."""

from __future__ import annotations

import json
import math
from typing import Any

from tokenpack.core.types import VALUE_KEY, TokenVariant


def classify_token_value(value: Any) -> TokenVariant:
    """Return the variant of a JSON-shaped token value.

    Mappings carrying a ``$value`` member are leaf tokens; any other mapping is
    a group node. Lists and tuples are arrays, everything else is a scalar.
    """
    if isinstance(value, dict):
        return "leaf" if VALUE_KEY in value else "node"
    if isinstance(value, (list, tuple)):
        return "array"
    return "scalar"


def is_leaf_token(value: Any) -> bool:
    return classify_token_value(value) == "leaf"


def is_token_node(value: Any) -> bool:
    return classify_token_value(value) == "node"


def tokens_equal(left: Any, right: Any) -> bool:
    """Deep structural equality for JSON-shaped values.

    Arrays compare element by element in order, mappings compare key sets and
    then values, scalars compare exactly. Booleans never equal numbers, while
    ``1`` and ``1.0`` are the same JSON number and two NaNs are equal.
    """
    pending: list[tuple[Any, Any]] = [(left, right)]
    while pending:
        left_value, right_value = pending.pop()

        if isinstance(left_value, dict) or isinstance(right_value, dict):
            if not (isinstance(left_value, dict) and isinstance(right_value, dict)):
                return False
            if left_value.keys() != right_value.keys():
                return False
            pending.extend((left_value[key], right_value[key]) for key in left_value)
            continue

        if isinstance(left_value, (list, tuple)) or isinstance(right_value, (list, tuple)):
            if not (
                isinstance(left_value, (list, tuple)) and isinstance(right_value, (list, tuple))
            ):
                return False
            if len(left_value) != len(right_value):
                return False
            pending.extend(zip(left_value, right_value))
            continue

        if not _scalars_equal(left_value, right_value):
            return False

    return True


def token_json(value: Any) -> str:
    """Serialize a token value as compact JSON, preserving member order."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _scalars_equal(left: Any, right: Any) -> bool:
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if _is_number(left) and _is_number(right):
        if isinstance(left, float) and isinstance(right, float):
            if math.isnan(left) and math.isnan(right):
                return True
        return left == right

    if type(left) is not type(right):
        return False

    return left == right


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
