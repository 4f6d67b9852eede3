"""
End-to-end tests for the HTTP routes using FastAPI's TestClient.
"""

import re

import pytest
from fastapi.testclient import TestClient

from politely_failed_api.app.core.config import Settings
from politely_failed_api.app.core.errors import LoadError
from politely_failed_api.app.main import create_app

from .conftest import build_document, write_document

TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def assert_error(response, status_code, error, message=None):
    assert response.status_code == status_code
    body = response.json()
    assert body["error"] == error
    assert TIMESTAMP.match(body["timestamp"])
    if message is not None:
        assert body["message"] == message
    return body


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "test-1", "messagesLoaded": 40}


def test_health_reports_store_failure(client, tmp_path):
    client.app.state.message_store.path = tmp_path / "gone.json"
    client.app.state.message_store._database = None
    response = client.get("/health")
    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert "Messages file not found" in body["message"]


def test_service_info(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["health"] == "/health"
    assert response.json()["api"] == "/api/v1"


def test_categories(client):
    response = client.get("/api/v1/categories")
    assert response.status_code == 200
    assert response.json() == {
        "categories": [
            "network",
            "auth",
            "database",
            "validation",
            "rate_limit",
            "server_error",
            "not_implemented",
        ],
        "tones": ["casual", "professional", "humorous"],
    }


def test_random_message_json(client):
    response = client.get("/api/v1/messages/random", params={"category": "network", "tone": "humorous"})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] in {"a", "b"}
    assert body["category"] == "network"
    assert body["tone"] == "humorous"
    assert TIMESTAMP.match(body["timestamp"])


def test_random_message_explicit_json_format(client):
    response = client.get(
        "/api/v1/messages/random", params={"category": "network", "tone": "humorous", "format": "json"}
    )
    assert response.status_code == 200
    assert response.json()["message"] in {"a", "b"}


def test_random_message_text(client):
    response = client.get(
        "/api/v1/messages/random", params={"category": "network", "tone": "humorous", "format": "text"}
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text in {"a", "b"}


def test_list_messages(client):
    response = client.get("/api/v1/messages", params={"category": "network", "tone": "humorous"})
    assert response.status_code == 200
    assert response.json() == {"category": "network", "tone": "humorous", "messages": ["a", "b"], "count": 2}


def test_empty_pair_random_is_server_error_but_list_is_empty(client):
    params = {"category": "auth", "tone": "casual"}
    assert_error(
        client.get("/api/v1/messages/random", params=params),
        500,
        "Internal Server Error",
        "No messages found for category: auth, tone: casual",
    )
    response = client.get("/api/v1/messages", params=params)
    assert response.status_code == 200
    assert response.json() == {"category": "auth", "tone": "casual", "messages": [], "count": 0}


@pytest.mark.parametrize(
    "params, message",
    [
        ({"tone": "humorous"}, "Category is required"),
        ({"category": "", "tone": "humorous"}, "Category is required"),
        ({"category": "bogus", "tone": "humorous"}, "Invalid category"),
        ({"category": "Network", "tone": "humorous"}, "Invalid category"),
        ({"category": "network"}, "Tone is required"),
        ({"category": "network", "tone": "angry"}, "Invalid tone"),
        ({"category": "bogus", "tone": "angry"}, "Invalid category"),
        ({}, "Category is required"),
    ],
)
def test_parameter_validation(client, params, message):
    assert_error(client.get("/api/v1/messages/random", params=params), 400, "Validation Error", message)
    assert_error(client.get("/api/v1/messages", params=params), 400, "Validation Error", message)


def test_invalid_format(client):
    response = client.get(
        "/api/v1/messages/random", params={"category": "network", "tone": "casual", "format": "xml"}
    )
    assert_error(response, 400, "Validation Error", "Format must be either json or text")


def test_invalid_category_reported_before_invalid_format(client):
    response = client.get("/api/v1/messages/random", params={"category": "bogus", "tone": "casual", "format": "xml"})
    assert_error(response, 400, "Validation Error", "Invalid category")


def test_unknown_route(client):
    response = client.get("/api/v2/nothing")
    assert_error(response, 404, "Not Found", "Cannot GET /api/v2/nothing")


def test_security_headers(client):
    response = client.get("/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    missing = client.get("/missing")
    assert missing.headers["x-content-type-options"] == "nosniff"


def test_cors_header(client):
    response = client.get("/health", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_unexpected_error_becomes_500_envelope(client, monkeypatch):
    service = client.app.state.message_service

    def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(service, "get_categories", boom)
    assert_error(client.get("/api/v1/categories"), 500, "Internal Server Error", "kaboom")


def test_startup_fails_without_messages(tmp_path):
    app = create_app(Settings(messages_file_path=str(tmp_path / "missing.json")))
    with pytest.raises(LoadError):
        with TestClient(app):
            pass


def test_reload_endpoint_disabled_by_default(client):
    assert_error(client.post("/api/v1/admin/reload"), 404, "Not Found")


def test_reload_endpoint(make_client, messages_file):
    client = make_client(enable_reload_endpoint=True)
    write_document(messages_file, build_document(version="test-2"))

    response = client.post("/api/v1/admin/reload")
    assert response.status_code == 200
    assert response.json() == {"status": "reloaded", "version": "test-2", "messagesLoaded": 42}
    assert client.get("/health").json()["version"] == "test-2"


def test_failed_reload_keeps_serving_previous_data(make_client, messages_file):
    client = make_client(enable_reload_endpoint=True)
    messages_file.write_text("not json", encoding="utf-8")

    body = assert_error(client.post("/api/v1/admin/reload"), 500, "Internal Server Error")
    assert body["message"].startswith("Failed to load messages:")

    response = client.get("/api/v1/messages", params={"category": "network", "tone": "humorous"})
    assert response.json()["messages"] == ["a", "b"]
    assert client.get("/health").json()["version"] == "test-1"
