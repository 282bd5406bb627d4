"""Token source exceptions."""


class TokenSourceError(Exception):
    """Base class for token source errors."""


class TokenSourceNotFoundError(TokenSourceError):
    """Token document does not exist at the requested location."""


class TokenSourceFormatError(TokenSourceError):
    """Token document is not a JSON object."""
