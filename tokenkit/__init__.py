"""Stable public API surface for TokenKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from tokenpack.diff import TokenChange, TokenDiffResult, diff_token_trees, diff_tokens
from tokenpack.diff import render_diff_report, render_token_report
from tokenpack.source import TokenSource, load_token_source

__version__ = "0.1.0"


def diff(
    base: Any,
    head: Any,
    *,
    base_label: str = "base",
    head_label: str = "head",
) -> TokenDiffResult:
    """Diff two in-memory token trees.

    Args:
        base: Base token tree. ``None`` is treated as an empty tree.
        head: Head token tree. ``None`` is treated as an empty tree.
        base_label: Label used for the base side in reports.
        head_label: Label used for the head side in reports.

    Returns:
        Structured token diff result.
    """
    return diff_token_trees(base, head, base_label=base_label, head_label=head_label)


def diff_files(base: str | Path, head: str | Path) -> TokenDiffResult:
    """Diff two token JSON files.

    Missing or unparsable files are compared as empty trees.
    """
    base_source = load_token_source(path=base)
    head_source = load_token_source(path=head)
    return diff_token_trees(
        base_source.tree,
        head_source.tree,
        base_label=base_source.label,
        head_label=head_source.label,
    )


def report(diff_result: TokenDiffResult, *, generated_at: datetime | str | None = None) -> str:
    """Render a Markdown change report for a diff result."""
    return render_diff_report(diff_result, generated_at=generated_at)


__all__ = [
    "__version__",
    "TokenChange",
    "TokenDiffResult",
    "TokenSource",
    "diff",
    "diff_files",
    "report",
    "diff_tokens",
    "diff_token_trees",
    "render_token_report",
    "load_token_source",
]
