"""Shared fixtures: temporary message files, stores, services and API clients."""

import json
from contextlib import ExitStack
from pathlib import Path
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from politely_failed_api.app.core.config import Settings
from politely_failed_api.app.main import create_app
from politely_failed_api.app.models.message import Category, Tone
from politely_failed_api.app.services.message_service import MessageService
from politely_failed_api.app.services.message_store import MessageStore


def build_document(version: str = "test-1") -> Dict[str, Any]:
    """A complete document with two messages for every category/tone pair."""
    return {
        "version": version,
        "categories": {
            category.value: {
                tone.value: [f"{category.value}-{tone.value}-1", f"{category.value}-{tone.value}-2"]
                for tone in Tone
            }
            for category in Category
        },
    }


def write_document(path: Path, document: Any) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def document() -> Dict[str, Any]:
    doc = build_document()
    doc["categories"]["network"]["humorous"] = ["a", "b"]
    doc["categories"]["auth"]["casual"] = []
    return doc


@pytest.fixture
def messages_file(tmp_path, document) -> Path:
    return write_document(tmp_path / "messages.json", document)


@pytest.fixture
def store(messages_file) -> MessageStore:
    return MessageStore(messages_file)


@pytest.fixture
def service(store) -> MessageService:
    return MessageService(store)


@pytest.fixture
def make_client(messages_file):
    """Factory building a started TestClient; extra keyword arguments override settings."""
    with ExitStack() as stack:

        def _make(**overrides) -> TestClient:
            options = {"messages_file_path": str(messages_file)}
            options.update(overrides)
            app = create_app(Settings(**options))
            return stack.enter_context(TestClient(app))

        yield _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
