"""Diff subsystem for TokenKit."""

from tokenpack.diff.engine import diff_token_trees, diff_tokens
from tokenpack.diff.formatting import (
    render_change_summary,
    render_diff_report,
    render_token_report,
)
from tokenpack.diff.models import MISSING, TokenChange, TokenDiffResult

__all__ = [
    "MISSING",
    "TokenChange",
    "TokenDiffResult",
    "diff_tokens",
    "diff_token_trees",
    "render_token_report",
    "render_diff_report",
    "render_change_summary",
]
