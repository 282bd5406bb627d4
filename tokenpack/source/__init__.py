"""Token source loading for TokenKit."""

from tokenpack.source.exceptions import (
    TokenSourceError,
    TokenSourceFormatError,
    TokenSourceNotFoundError,
)
from tokenpack.source.loader import (
    DEFAULT_BASE_REF,
    DEFAULT_HEAD_REF,
    DEFAULT_TOKENS_PATH,
    TOKENS_PATH_ENV_VAR,
    TokenSource,
    load_token_source,
    parse_token_document,
    read_git_token_file,
    read_token_file,
)

__all__ = [
    "DEFAULT_BASE_REF",
    "DEFAULT_HEAD_REF",
    "DEFAULT_TOKENS_PATH",
    "TOKENS_PATH_ENV_VAR",
    "TokenSource",
    "TokenSourceError",
    "TokenSourceFormatError",
    "TokenSourceNotFoundError",
    "load_token_source",
    "parse_token_document",
    "read_git_token_file",
    "read_token_file",
]
