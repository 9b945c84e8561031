"""Errors raised while extracting an API key from request headers."""

from constants import MALFORMED_AUTH_HEADER_MESSAGE, NO_AUTH_HEADER_MESSAGE


class AuthHeaderError(Exception):
    """Base class for authorization header errors.

    Both subclasses are client errors: retrying the same request cannot
    succeed. Callers usually answer them with HTTP 401 Unauthorized.
    """

    cause: str = ""

    def __init__(self, cause: str = "") -> None:
        """Initialize the error with its cause, defaulting to the class message."""
        self.cause = cause or self.cause
        super().__init__(self.cause)


class NoAuthHeaderError(AuthHeaderError):
    """The authorization header is missing or empty."""

    cause = NO_AUTH_HEADER_MESSAGE


class MalformedAuthHeaderError(AuthHeaderError):
    """The authorization header does not have the `<scheme> <key>` shape."""

    cause = MALFORMED_AUTH_HEADER_MESSAGE
