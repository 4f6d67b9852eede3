"""
Loading and caching of the message database.

The data file is JSON shaped like::

    {
      "version": "1.0.0",
      "categories": {
        "network": {"casual": [...], "professional": [...], "humorous": [...]},
        ...
      }
    }

Loading is a two‑phase process: the file is decoded into plain Python
values, then ``validate_document`` checks the shape and converts it
into a frozen ``MessageDatabase``.  Validation fails fast on the first
problem.  Every one of the seven categories and three tones must be
present; an empty message list is accepted but logged as a warning.

``MessageStore`` caches the result.  The load‑or‑return‑cached sequence
runs under a lock so that concurrent first requests trigger a single
read.  ``reload`` swaps in a freshly validated database only when the
new load succeeds; on failure the previous database stays active and
the ``LoadError`` is raised to the caller.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from politely_failed_api.app.core.errors import LoadError
from politely_failed_api.app.models.message import Category, MessageDatabase, Tone

logger = logging.getLogger(__name__)


def validate_document(data: Any) -> MessageDatabase:
    """Validate a decoded JSON document and convert it to a ``MessageDatabase``.

    Raises ``LoadError`` describing the first violation found.
    """
    if not isinstance(data, dict):
        raise LoadError("Message database must be a JSON object")

    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise LoadError("Message database missing version field")

    raw_categories = data.get("categories")
    if not isinstance(raw_categories, dict):
        raise LoadError("Message database missing categories field")

    categories: Dict[Category, Dict[Tone, List[str]]] = {}
    for category in Category:
        raw_tones = raw_categories.get(category.value)
        if not isinstance(raw_tones, dict):
            raise LoadError(f"Missing category: {category.value}")

        tones: Dict[Tone, List[str]] = {}
        for tone in Tone:
            messages = raw_tones.get(tone.value)
            if not isinstance(messages, list):
                raise LoadError(f"Category {category.value} missing tone: {tone.value}")
            if not all(isinstance(message, str) for message in messages):
                raise LoadError(f"Category {category.value}, tone {tone.value} contains a non-string message")
            if not messages:
                logger.warning("Category %s, tone %s has no messages", category.value, tone.value)
            tones[tone] = messages
        categories[category] = tones

    return MessageDatabase.build(version, categories)


class MessageStore:
    """Loads the message database once and serves it from memory."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._database: Optional[MessageDatabase] = None
        self._lock = threading.RLock()

    @property
    def is_loaded(self) -> bool:
        return self._database is not None

    def _read(self) -> MessageDatabase:
        """Read, decode and validate the data file without touching the cache."""
        resolved = self.path.resolve()
        if not resolved.is_file():
            raise LoadError(f"Messages file not found at: {resolved}")
        try:
            with open(resolved, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise LoadError(f"Invalid JSON in {resolved}: {exc}") from exc
        except OSError as exc:
            raise LoadError(f"Could not read {resolved}: {exc}") from exc
        return validate_document(data)

    def load(self) -> MessageDatabase:
        """Load and cache the database; return the cached copy if already loaded."""
        with self._lock:
            if self._database is not None:
                return self._database
            try:
                database = self._read()
            except LoadError as exc:
                logger.error("%s", exc)
                raise
            self._database = database
            logger.info(
                "Loaded message database version %s (%d messages) from %s",
                database.version,
                database.total(),
                self.path,
            )
            return database

    def get_database(self) -> MessageDatabase:
        """Return the cached database, loading it first if necessary."""
        database = self._database
        if database is not None:
            return database
        return self.load()

    def reload(self) -> MessageDatabase:
        """Re‑read the data file and replace the cached database.

        If the new file fails to load, the previously cached database
        (if any) remains in place and the ``LoadError`` propagates.
        """
        with self._lock:
            try:
                database = self._read()
            except LoadError as exc:
                if self._database is not None:
                    logger.error("Reload failed, keeping version %s: %s", self._database.version, exc)
                else:
                    logger.error("%s", exc)
                raise
            self._database = database
            logger.info("Reloaded message database version %s (%d messages)", database.version, database.total())
            return database

    def message_count(self) -> int:
        """Total number of messages across all category/tone pairs."""
        return self.get_database().total()
