"""
Query parameter parsing for the message routes.

Each helper performs the single string → enum conversion for one
parameter and raises ``ValidationError`` with the message returned to
the client.  Handlers call them in the order category, tone, format so
that the first failing check determines the response.
"""

from typing import Optional

from politely_failed_api.app.core.errors import ValidationError
from politely_failed_api.app.models.message import Category, Tone
from politely_failed_api.app.services.message_service import MessageService

FORMATS = ("json", "text")


def parse_category(value: Optional[str]) -> Category:
    if not value:
        raise ValidationError("Category is required")
    if not MessageService.is_valid_category(value):
        raise ValidationError("Invalid category")
    return Category(value)


def parse_tone(value: Optional[str]) -> Tone:
    if not value:
        raise ValidationError("Tone is required")
    if not MessageService.is_valid_tone(value):
        raise ValidationError("Invalid tone")
    return Tone(value)


def parse_format(value: Optional[str]) -> str:
    if value is None:
        return "json"
    if value not in FORMATS:
        raise ValidationError("Format must be either json or text")
    return value
