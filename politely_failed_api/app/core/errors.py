"""
Exception types raised by the message store and service.

``LoadError`` is fatal at startup and recoverable on reload;
``NotFoundError`` is a request‑level failure.  The HTTP layer maps
both onto the JSON error envelope in ``main``.
"""


class PolitelyFailedError(Exception):
    """Base class for application‑specific exceptions."""


class LoadError(PolitelyFailedError):
    """Raised when the message database cannot be read, parsed or validated."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Failed to load messages: {cause}")


class NotFoundError(PolitelyFailedError):
    """Raised when a category/tone pair has no usable messages."""

    def __init__(self, category: str, tone: str):
        self.category = category
        self.tone = tone
        super().__init__(f"No messages found for category: {category}, tone: {tone}")


class ValidationError(PolitelyFailedError):
    """Raised by the HTTP layer for missing or malformed query parameters."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
