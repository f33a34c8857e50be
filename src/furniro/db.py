"""Furniro MongoDB store and process-wide connection cache."""

from __future__ import annotations

import threading
from typing import Callable

from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from furniro.config.settings import (
    COLLECTION_BLOGS,
    COLLECTION_ORDERS,
    COLLECTION_PRODUCTS,
    COLLECTION_REVIEWS,
    COLLECTION_USERS,
    DB_NAME,
    MONGODB_CONNECT_TIMEOUT_MS,
    MONGODB_MAX_POOL_SIZE,
    MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    MONGODB_SOCKET_TIMEOUT_MS,
    MONGODB_URI,
)
from furniro.logging import get_logger

logger = get_logger(__name__)

ClientFactory = Callable[[str], MongoClient]


class StoreConnectionError(RuntimeError):
    """Raised when the document store cannot be reached or is misconfigured."""


def create_client(uri: str) -> MongoClient:
    """Build a client with a bounded pool and explicit timeouts."""
    return MongoClient(
        uri,
        maxPoolSize=MONGODB_MAX_POOL_SIZE,
        connectTimeoutMS=MONGODB_CONNECT_TIMEOUT_MS,
        socketTimeoutMS=MONGODB_SOCKET_TIMEOUT_MS,
        serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


class MongoStore:
    """Database handle plus the storefront collections."""

    def __init__(self, db: Database, client: MongoClient | None = None) -> None:
        self.client = client
        self.db = db

        self.users: Collection = db[COLLECTION_USERS]
        self.products: Collection = db[COLLECTION_PRODUCTS]
        self.orders: Collection = db[COLLECTION_ORDERS]
        self.reviews: Collection = db[COLLECTION_REVIEWS]
        self.blogs: Collection = db[COLLECTION_BLOGS]

    def collection(self, name: str) -> Collection:
        return self.db[name]

    @staticmethod
    def object_id(value: str) -> ObjectId:
        """Parse a path identifier; raises bson.errors.InvalidId when malformed."""
        return ObjectId(value)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


class ConnectionCache:
    """
    Lazily connect once per process and hand out the same store afterwards.

    Population is serialized by a lock, so concurrent cold starts build a
    single client. Failed attempts are not remembered: the next call starts
    from scratch.
    """

    def __init__(
        self,
        uri: str = MONGODB_URI,
        db_name: str = DB_NAME,
        client_factory: ClientFactory = create_client,
    ) -> None:
        self.uri = uri
        self.db_name = db_name
        self._client_factory = client_factory
        self._store: MongoStore | None = None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._store is not None

    def get(self) -> MongoStore:
        store = self._store
        if store is not None:
            return store

        with self._lock:
            if self._store is None:
                self._store = self._connect()
            return self._store

    def _connect(self) -> MongoStore:
        client: MongoClient | None = None
        try:
            client = self._client_factory(self.uri)
            client.admin.command("ping")
        except PyMongoError as err:
            logger.error("MongoDB connection failed: %s", err)
            if client is not None:
                client.close()
            raise StoreConnectionError("Could not connect to MongoDB") from err

        logger.info("Connected to MongoDB database %s", self.db_name)
        return MongoStore(client[self.db_name], client=client)

    def reset(self) -> None:
        """Close and forget the cached client."""
        with self._lock:
            store, self._store = self._store, None
        if store is not None:
            store.close()


_connection_cache = ConnectionCache()


def get_connection() -> MongoStore:
    """Return the process-wide store, connecting on first use."""
    return _connection_cache.get()


def get_connection_cache() -> ConnectionCache:
    return _connection_cache
