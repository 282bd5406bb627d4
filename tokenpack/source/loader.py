"""Read token trees from JSON files or git revisions."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
import subprocess
from typing import Any, Literal

from tokenpack.core.types import TokenTree
from tokenpack.source.exceptions import (
    TokenSourceError,
    TokenSourceFormatError,
    TokenSourceNotFoundError,
)

DEFAULT_TOKENS_PATH = "packages/design-tokens/tokens/base.json"
DEFAULT_BASE_REF = "main"
DEFAULT_HEAD_REF = "HEAD"
TOKENS_PATH_ENV_VAR = "TOKENKIT_TOKENS_PATH"

TokenOrigin = Literal["file", "git"]


@dataclass(slots=True)
class TokenSource:
    """A loaded token tree and where it came from.

    ``tree`` is always a mapping: sources that could not be read are replaced
    by an empty tree and ``error`` holds the reason.
    """

    label: str
    origin: TokenOrigin
    tree: TokenTree = field(default_factory=dict)
    error: str | None = None

    @property
    def loaded(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "origin": self.origin,
            "loaded": self.loaded,
            "error": self.error,
        }


def parse_token_document(raw_text: str, *, source: str) -> TokenTree:
    def _reject_constant(name: str) -> Any:
        raise TokenSourceFormatError(
            f"Token document contains non-finite number {name}: {source}"
        )

    try:
        document = json.loads(raw_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise TokenSourceFormatError(
            f"Token document is not valid JSON: {source} ({error})"
        ) from error

    if not isinstance(document, dict):
        raise TokenSourceFormatError(
            f"Token document must be a JSON object: {source} "
            f"(got {type(document).__name__})"
        )
    return document


def read_token_file(path: str | Path) -> TokenTree:
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise TokenSourceNotFoundError(f"Token file not found: {target}") from error
    except IsADirectoryError as error:
        raise TokenSourceNotFoundError(f"Token path is a directory: {target}") from error
    except UnicodeDecodeError as error:
        raise TokenSourceFormatError(
            f"Token file is not valid UTF-8 text: {target}"
        ) from error
    return parse_token_document(raw_text, source=str(target))


def read_git_token_file(
    ref: str,
    tokens_path: str | Path = DEFAULT_TOKENS_PATH,
    *,
    cwd: str | Path | None = None,
) -> TokenTree:
    """Read a token document as committed at ``ref`` via ``git show``."""
    object_name = f"{ref}:{Path(tokens_path).as_posix()}"
    command = ["git", "show", object_name]
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            cwd=cwd,
            check=False,
        )
    except OSError as error:
        raise TokenSourceNotFoundError(f"Unable to run git: {error}") from error

    if result.returncode != 0:
        detail = result.stderr.decode("utf-8", errors="replace").strip()
        raise TokenSourceNotFoundError(
            f"git show {object_name} failed ({result.returncode})"
            + (f": {detail}" if detail else "")
        )

    try:
        raw_text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as error:
        raise TokenSourceFormatError(f"Token file is not valid UTF-8 text: {object_name}") from error
    return parse_token_document(raw_text, source=object_name)


def load_token_source(
    *,
    path: str | Path | None = None,
    ref: str | None = None,
    tokens_path: str | Path = DEFAULT_TOKENS_PATH,
    cwd: str | Path | None = None,
    label: str | None = None,
) -> TokenSource:
    """Load a token tree from a file or a git ref.

    Exactly one of ``path`` or ``ref`` must be given. Missing or unparsable
    sources yield an empty tree so the result can always be diffed.

    Raises:
        ValueError: If neither or both of ``path`` and ``ref`` are provided.
    """
    if (path is None) == (ref is None):
        raise ValueError("Provide exactly one of path or ref.")

    if path is not None:
        source = TokenSource(label=label or str(path), origin="file")
        try:
            source.tree = read_token_file(path)
        except TokenSourceError as error:
            source.error = str(error)
        return source

    source = TokenSource(label=label or ref, origin="git")
    try:
        source.tree = read_git_token_file(ref, tokens_path, cwd=cwd)
    except TokenSourceError as error:
        source.error = str(error)
    return source
