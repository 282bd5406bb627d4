"""Data models for token tree diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tokenpack.core.types import ChangeKind


class _Missing:
    """Marker for a side that has no value at a path."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class TokenChange:
    """A single token delta at a dotted path."""

    path: str
    kind: ChangeKind
    old_value: Any = MISSING
    new_value: Any = MISSING

    def __post_init__(self) -> None:
        has_old = self.old_value is not MISSING
        has_new = self.new_value is not MISSING
        expected = {
            "added": (False, True),
            "removed": (True, False),
            "modified": (True, True),
        }.get(self.kind)
        if expected is None:
            raise ValueError(f"Unsupported change kind: {self.kind}")
        if (has_old, has_new) != expected:
            raise ValueError(
                f"{self.kind} change at '{self.path}' has "
                f"old_value={'set' if has_old else 'missing'} "
                f"new_value={'set' if has_new else 'missing'}"
            )

    @classmethod
    def added(cls, path: str, value: Any) -> TokenChange:
        return cls(path=path, kind="added", new_value=value)

    @classmethod
    def removed(cls, path: str, value: Any) -> TokenChange:
        return cls(path=path, kind="removed", old_value=value)

    @classmethod
    def modified(cls, path: str, old_value: Any, new_value: Any) -> TokenChange:
        return cls(path=path, kind="modified", old_value=old_value, new_value=new_value)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"path": self.path, "kind": self.kind}
        if self.old_value is not MISSING:
            payload["oldValue"] = self.old_value
        if self.new_value is not MISSING:
            payload["newValue"] = self.new_value
        return payload


@dataclass(slots=True)
class TokenDiffResult:
    """Structured diff for two labelled token trees."""

    base_label: str
    head_label: str
    changes: list[TokenChange] = field(default_factory=list)

    @property
    def identical(self) -> bool:
        return not self.changes

    @property
    def added(self) -> list[TokenChange]:
        return [change for change in self.changes if change.kind == "added"]

    @property
    def removed(self) -> list[TokenChange]:
        return [change for change in self.changes if change.kind == "removed"]

    @property
    def modified(self) -> list[TokenChange]:
        return [change for change in self.changes if change.kind == "modified"]

    def summary(self) -> dict[str, int]:
        counts = {
            "added": 0,
            "removed": 0,
            "modified": 0,
        }
        for change in self.changes:
            counts[change.kind] += 1
        counts["total"] = len(self.changes)
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": self.base_label,
            "head": self.head_label,
            "identical": self.identical,
            "summary": self.summary(),
            "changes": [change.to_dict() for change in self.changes],
        }
