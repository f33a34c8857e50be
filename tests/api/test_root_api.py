from __future__ import annotations

from fastapi.testclient import TestClient

from furniro.api.app import app
from furniro.api.dependencies import get_store
from furniro.db import StoreConnectionError


def test_root_returns_welcome_message(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"welcomeMessage": "Furniro server is running"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_document_count_covers_all_collections(client):
    client.post("/addUser", json={"email": "a@example.com"})
    client.post("/addProduct", json={"name": "Lolito"})
    client.post("/addProduct", json={"name": "Respira"})
    client.post("/addOrder", json={"status": "pending", "totalPrice": 1})
    client.post("/addBlog", json={"category": "Wood"})

    response = client.get("/documentCount")
    assert response.status_code == 200
    assert response.json() == {
        "users": 1,
        "products": 2,
        "orders": 1,
        "reviews": 0,
        "blogs": 1,
    }


def test_connection_failure_is_plain_text_500():
    def _unreachable():
        raise StoreConnectionError("Could not connect to MongoDB")

    app.dependency_overrides[get_store] = _unreachable
    try:
        response = TestClient(app).get("/allProducts")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Internal Server Error"


def test_health_does_not_need_the_store():
    def _unreachable():
        raise StoreConnectionError("Could not connect to MongoDB")

    app.dependency_overrides[get_store] = _unreachable
    try:
        response = TestClient(app).get("/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200


def test_shutdown_closes_cached_client(monkeypatch):
    class RecordingCache:
        resets = 0

        def reset(self) -> None:
            self.resets += 1

    cache = RecordingCache()
    monkeypatch.setattr("furniro.api.app.get_connection_cache", lambda: cache)

    with TestClient(app) as test_client:
        assert test_client.get("/health").status_code == 200
        assert cache.resets == 0

    assert cache.resets == 1
