"""
Domain model for the message database.

``Category`` and ``Tone`` are closed enumerations whose values are the
lowercase strings used in the data file and in query parameters.
Because they subclass ``str`` an enum member and its value hash and
compare equal, so lookups keyed by either form behave the same.

``MessageDatabase`` is the validated, read‑only form of the data file.
It is only built by ``MessageStore`` after validation succeeds; once
built it is never mutated.  A reload replaces the whole object.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


class Category(str, Enum):
    NETWORK = "network"
    AUTH = "auth"
    DATABASE = "database"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    SERVER_ERROR = "server_error"
    NOT_IMPLEMENTED = "not_implemented"


class Tone(str, Enum):
    CASUAL = "casual"
    PROFESSIONAL = "professional"
    HUMOROUS = "humorous"


ToneMessages = Mapping[Tone, Tuple[str, ...]]


@dataclass(frozen=True)
class MessageDatabase:
    """Validated message database: ``categories[category][tone]`` is a tuple of messages."""

    version: str
    categories: Mapping[Category, ToneMessages]

    @classmethod
    def build(cls, version: str, categories: Dict[Category, Dict[Tone, List[str]]]) -> "MessageDatabase":
        """Freeze plain dictionaries and lists into a ``MessageDatabase``."""
        frozen = {
            category: MappingProxyType({tone: tuple(messages) for tone, messages in tones.items()})
            for category, tones in categories.items()
        }
        return cls(version=version, categories=MappingProxyType(frozen))

    def messages(self, category: str, tone: str) -> Optional[Tuple[str, ...]]:
        """Return the stored messages for a pair, or ``None`` if the pair is absent."""
        try:
            tones = self.categories.get(Category(category))
            tone = Tone(tone)
        except ValueError:
            return None
        if tones is None:
            return None
        return tones.get(tone)

    def total(self) -> int:
        return sum(len(messages) for tones in self.categories.values() for messages in tones.values())
