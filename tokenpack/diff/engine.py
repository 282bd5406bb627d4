"""Depth-first token tree diff engine."""

from __future__ import annotations

from typing import Any

from tokenpack.core.tokens import is_token_node, tokens_equal
from tokenpack.diff.models import MISSING, TokenChange, TokenDiffResult


def diff_tokens(base: Any, head: Any) -> list[TokenChange]:
    """Diff two token trees into a flat, ordered list of changes.

    Group nodes present on both sides are recursed into, so changes land on
    the most specific differing path. A group missing from one side is reported
    once for the whole subtree. Leaf tokens (mappings with ``$value``), arrays
    and scalars are compared as a unit.

    Keys are visited in base order followed by keys only present in head.
    A ``None`` tree is treated as an empty group. Traversal uses an explicit
    stack, so nesting depth is not bounded by the interpreter recursion limit.
    """
    changes: list[TokenChange] = []
    pending: list[tuple[Any, Any, str]] = [
        ({} if base is None else base, {} if head is None else head, "")
    ]

    while pending:
        base_value, head_value, path = pending.pop()

        if is_token_node(base_value) and is_token_node(head_value):
            children = [
                (
                    base_value.get(key, MISSING),
                    head_value.get(key, MISSING),
                    _join_path(path, key),
                )
                for key in dict.fromkeys([*base_value.keys(), *head_value.keys()])
            ]
            pending.extend(reversed(children))
            continue

        if base_value is MISSING:
            changes.append(TokenChange.added(path, head_value))
        elif head_value is MISSING:
            changes.append(TokenChange.removed(path, base_value))
        elif not tokens_equal(base_value, head_value):
            changes.append(TokenChange.modified(path, base_value, head_value))

    return changes


def diff_token_trees(
    base: Any,
    head: Any,
    *,
    base_label: str = "base",
    head_label: str = "head",
) -> TokenDiffResult:
    """Diff two token trees and attach the labels used for reporting."""
    return TokenDiffResult(
        base_label=base_label,
        head_label=head_label,
        changes=diff_tokens(base, head),
    )


def _join_path(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)
