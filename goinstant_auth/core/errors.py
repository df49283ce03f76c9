"""Exception types raised while building signed tokens."""


class GoInstantAuthError(Exception):
    """Base exception for token construction failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(GoInstantAuthError, ValueError):
    """Caller-supplied key, user data or header was rejected."""


class EncodingError(GoInstantAuthError, RuntimeError):
    """A token segment could not be serialized."""
