"""Store operations used by the FastAPI layer.

Each helper issues exactly one driver call (``count_documents_per_collection``
issues one per collection) and returns the driver's raw answer.
"""

from __future__ import annotations

from typing import Any

from pymongo.collection import Collection
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from furniro.config.settings import DOCUMENT_COLLECTIONS
from furniro.db import MongoStore

Document = dict[str, Any]


def list_documents(collection: Collection, query: Document | None = None) -> list[Document]:
    """Return every document matching ``query`` (all documents when omitted)."""
    return list(collection.find(query or {}))


def find_document(collection: Collection, query: Document) -> Document | None:
    return collection.find_one(query)


def find_document_by_id(collection: Collection, document_id: str) -> Document | None:
    """Look a document up by its ObjectId; malformed ids raise InvalidId."""
    return collection.find_one({"_id": MongoStore.object_id(document_id)})


def insert_document(collection: Collection, document: Document) -> InsertOneResult:
    return collection.insert_one(document)


def delete_document_by_id(collection: Collection, document_id: str) -> DeleteResult:
    return collection.delete_one({"_id": MongoStore.object_id(document_id)})


def set_document_field(
    collection: Collection,
    document_id: str,
    field: str,
    value: Any,
) -> UpdateResult:
    """Overwrite a single top-level field of the document with the given id."""
    return collection.update_one(
        {"_id": MongoStore.object_id(document_id)},
        {"$set": {field: value}},
    )


def count_grouped_by(collection: Collection, field: str) -> list[Document]:
    """Return ``[{"_id": value, "count": n}, ...]`` for each distinct ``field`` value."""
    pipeline = [{"$group": {"_id": f"${field}", "count": {"$sum": 1}}}]
    return list(collection.aggregate(pipeline))


def sum_grouped_by(
    collection: Collection,
    field: str,
    amount_field: str,
    *,
    output_field: str = "totalAmount",
) -> list[Document]:
    """Return ``[{"_id": value, output_field: total}, ...]`` summing ``amount_field``."""
    pipeline = [
        {"$group": {"_id": f"${field}", output_field: {"$sum": f"${amount_field}"}}}
    ]
    return list(collection.aggregate(pipeline))


def count_documents_per_collection(store: MongoStore) -> dict[str, int]:
    return {
        name: store.collection(name).count_documents({})
        for name in DOCUMENT_COLLECTIONS
    }
