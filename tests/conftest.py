from __future__ import annotations

from typing import Iterator

import mongomock
import pytest
from fastapi.testclient import TestClient

from furniro.api.app import app
from furniro.api.dependencies import get_store
from furniro.db import MongoStore


@pytest.fixture
def store() -> MongoStore:
    """In-memory store so API tests never open a real MongoDB connection."""
    mongo_client = mongomock.MongoClient()
    return MongoStore(mongo_client["furniroDB"], client=mongo_client)


@pytest.fixture
def client(store: MongoStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
