"""Domain types for the message database."""

from .message import Category, Tone, MessageDatabase  # noqa: F401
