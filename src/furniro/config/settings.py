"""Furniro runtime configuration helpers.

Every tunable is read from the environment once at import time; a local
``.env`` file is honoured so development setups need no exported variables.
"""

from __future__ import annotations

import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    return int(raw_value)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUE_VALUES


def _env_list(name: str, default: tuple[str, ...]) -> list[str]:
    """Return a cleaned list for a comma-separated env variable, falling back to default."""
    raw_value = os.getenv(name)
    if raw_value:
        return [segment.strip() for segment in raw_value.split(",") if segment.strip()]
    return list(default)


def build_mongodb_uri(
    *,
    uri: str | None,
    user: str | None,
    password: str | None,
    cluster: str,
) -> str:
    """
    Resolve the connection string.

    An explicit URI wins; otherwise user/password are combined with the SRV
    cluster host. Without any of them the local default server is used.
    """
    if uri:
        return uri
    if user and password:
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{cluster}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )
    return DEFAULT_MONGODB_URI


DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

PORT = _env_int("PORT", DEFAULT_PORT)
HOST = os.getenv("HOST", DEFAULT_HOST)

# Set by the serverless platform; the launcher must not bind a port there.
SERVERLESS = _env_flag("VERCEL")

DEFAULT_MONGODB_URI = "mongodb://localhost:27017"
DEFAULT_MONGODB_CLUSTER = "cluster0.8eefy.mongodb.net"
DEFAULT_DB_NAME = "furniroDB"

MONGODB_URI = build_mongodb_uri(
    uri=os.getenv("MONGODB_URI"),
    user=os.getenv("DB_USER"),
    password=os.getenv("DB_PASSWORD"),
    cluster=os.getenv("MONGODB_CLUSTER", DEFAULT_MONGODB_CLUSTER),
)
DB_NAME = os.getenv("FURNIRO_DB_NAME", DEFAULT_DB_NAME)

MONGODB_MAX_POOL_SIZE = _env_int("FURNIRO_MONGODB_MAX_POOL_SIZE", 10)
MONGODB_CONNECT_TIMEOUT_MS = _env_int("FURNIRO_MONGODB_CONNECT_TIMEOUT_MS", 5000)
MONGODB_SOCKET_TIMEOUT_MS = _env_int("FURNIRO_MONGODB_SOCKET_TIMEOUT_MS", 30000)
MONGODB_SERVER_SELECTION_TIMEOUT_MS = _env_int(
    "FURNIRO_MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5000
)

CORS_ORIGINS: list[str] = _env_list("FURNIRO_CORS_ORIGINS", ("*",))

COLLECTION_PRODUCTS = "products"
COLLECTION_USERS = "users"
COLLECTION_ORDERS = "orders"
COLLECTION_REVIEWS = "reviews"
COLLECTION_BLOGS = "blogs"

DOCUMENT_COLLECTIONS: tuple[str, ...] = (
    COLLECTION_USERS,
    COLLECTION_PRODUCTS,
    COLLECTION_ORDERS,
    COLLECTION_REVIEWS,
    COLLECTION_BLOGS,
)

ORDER_STATUS_PENDING = "pending"
ORDER_STATUS_COMPLETED = "completed"
ORDER_STATUS_CANCELLED = "cancelled"

ORDER_STATUSES: tuple[str, ...] = (
    ORDER_STATUS_PENDING,
    ORDER_STATUS_COMPLETED,
    ORDER_STATUS_CANCELLED,
)

WELCOME_MESSAGE = "Furniro server is running"
SERVER_ERROR_MESSAGE = "Internal Server Error"
