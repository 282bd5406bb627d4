"""Markdown and CLI-friendly rendering for token diffs."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from tokenpack.core.tokens import token_json
from tokenpack.diff.models import TokenChange, TokenDiffResult


def render_token_report(
    changes: Sequence[TokenChange],
    base_label: str,
    head_label: str,
    *,
    generated_at: datetime | str | None = None,
) -> str:
    """Render a Markdown change report.

    Sections are always ordered added, removed, modified, whatever the order
    of ``changes``. Empty sections are omitted.
    """
    lines: list[str] = [
        "# Design Token Changes",
        "",
        f"**Comparing:** `{base_label}` -> `{head_label}`",
        f"**Date:** {_format_timestamp(generated_at)}",
        "",
    ]

    if not changes:
        lines.append("No token changes detected.")
        return "\n".join(lines) + "\n"

    added = [change for change in changes if change.kind == "added"]
    removed = [change for change in changes if change.kind == "removed"]
    modified = [change for change in changes if change.kind == "modified"]

    lines.extend(
        [
            "## Summary",
            "",
            f"- Added: {len(added)}",
            f"- Removed: {len(removed)}",
            f"- Modified: {len(modified)}",
            f"- **Total Changes:** {len(changes)}",
            "",
        ]
    )

    if added:
        lines.append("## Added Tokens")
        lines.append("")
        for change in added:
            lines.append(f"- `{change.path}`: {token_json(change.new_value)}")
        lines.append("")

    if removed:
        lines.append("## Removed Tokens")
        lines.append("")
        for change in removed:
            lines.append(f"- `{change.path}`: {token_json(change.old_value)}")
        lines.append("")

    if modified:
        lines.append("## Modified Tokens")
        lines.append("")
        for change in modified:
            lines.append(f"- `{change.path}`:")
            lines.append(f"  - **Before:** {token_json(change.old_value)}")
            lines.append(f"  - **After:** {token_json(change.new_value)}")
        lines.append("")

    return "\n".join(lines)


def render_diff_report(
    diff: TokenDiffResult,
    *,
    generated_at: datetime | str | None = None,
) -> str:
    return render_token_report(
        diff.changes,
        diff.base_label,
        diff.head_label,
        generated_at=generated_at,
    )


def render_change_summary(diff: TokenDiffResult) -> str:
    summary = diff.summary()
    return (
        f"base={diff.base_label} head={diff.head_label} "
        f"added={summary['added']} removed={summary['removed']} "
        f"modified={summary['modified']} total={summary['total']}"
    )


def _format_timestamp(value: datetime | str | None) -> str:
    if isinstance(value, str):
        return value
    moment = value or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    as_utc = moment.astimezone(timezone.utc)
    return as_utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
