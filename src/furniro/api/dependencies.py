from __future__ import annotations

from furniro.db import MongoStore, get_connection


def get_store() -> MongoStore:
    """Provide the cached MongoStore for FastAPI routes via Depends."""
    return get_connection()
