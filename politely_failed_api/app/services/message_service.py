"""
Query surface over the message store.

``MessageService`` holds no data of its own; every call reads the
store's cached ``MessageDatabase``.  The two lookup operations treat a
pair with an empty message list differently: ``get_random_message``
has nothing to pick from and raises ``NotFoundError``, while
``get_all_messages`` returns the empty list as a valid answer.
"""

import random
from typing import List, Optional

from fastapi import Request

from politely_failed_api.app.core.errors import NotFoundError
from politely_failed_api.app.models.message import Category, Tone
from politely_failed_api.app.services.message_store import MessageStore

_CATEGORY_VALUES = frozenset(c.value for c in Category)
_TONE_VALUES = frozenset(t.value for t in Tone)


class MessageService:
    """Service for retrieving polite failure messages."""

    def __init__(self, store: MessageStore, rng: Optional[random.Random] = None):
        self.store = store
        self._rng = rng or random

    def get_random_message(self, category: Category, tone: Tone) -> str:
        """Return one message for the pair, chosen uniformly at random."""
        messages = self.store.get_database().messages(category, tone)
        if not messages:
            raise NotFoundError(_value(category), _value(tone))
        return messages[self._rng.randrange(len(messages))]

    def get_all_messages(self, category: Category, tone: Tone) -> List[str]:
        """Return every message for the pair in stored order (possibly empty)."""
        messages = self.store.get_database().messages(category, tone)
        if messages is None:
            raise NotFoundError(_value(category), _value(tone))
        return list(messages)

    @staticmethod
    def get_categories() -> List[str]:
        return [c.value for c in Category]

    @staticmethod
    def get_tones() -> List[str]:
        return [t.value for t in Tone]

    @staticmethod
    def is_valid_category(value: object) -> bool:
        return isinstance(value, str) and value in _CATEGORY_VALUES

    @staticmethod
    def is_valid_tone(value: object) -> bool:
        return isinstance(value, str) and value in _TONE_VALUES

    def get_version(self) -> str:
        return self.store.get_database().version

    def get_message_count(self) -> int:
        return self.store.message_count()


def _value(member) -> str:
    return member.value if isinstance(member, (Category, Tone)) else str(member)


def get_message_service(request: Request) -> MessageService:
    """FastAPI dependency returning the service created by ``create_app``."""
    return request.app.state.message_service
