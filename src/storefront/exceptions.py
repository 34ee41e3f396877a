"""Storefront error types.

Input problems are reported with ``protean.exceptions.ValidationError`` and
unknown identifiers with ``protean.exceptions.ObjectNotFoundError``; the
classes below cover what Protean has no equivalent for.
"""


class StorefrontError(Exception):
    """Base class for storefront errors that carry a human-readable reason."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(StorefrontError):
    """Missing or invalid credential."""


class PermissionDenied(AuthError):
    """The principal lacks the role an operation requires."""

    def __init__(self, message: str, role: str | None = None):
        super().__init__(message)
        self.role = role


class PersistenceError(StorefrontError):
    """The storage engine failed; a failed write leaves no partial rows."""


class NotificationError(StorefrontError):
    """An SMS or email could not be delivered. Logged, never raised to callers."""

    def __init__(self, message: str, channel: str | None = None):
        super().__init__(message)
        self.channel = channel
