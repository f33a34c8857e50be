from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response

from furniro.api.dependencies import get_store
from furniro.api.queries import insert_document, list_documents
from furniro.api.responses import json_response, server_error_response
from furniro.api.schemas import InsertResultDTO
from furniro.db import MongoStore
from furniro.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/addReview", summary="Store a product review", tags=["reviews"])
def add_review(
    store: Annotated[MongoStore, Depends(get_store)],
    review: Annotated[dict[str, Any] | None, Body()] = None,
) -> Response:
    try:
        result = insert_document(store.reviews, review or {})
        return json_response(InsertResultDTO.from_result(result))
    except Exception:
        logger.exception("Inserting review failed")
        return server_error_response()


@router.get(
    "/reviews/{product_id}",
    summary="List the reviews of a product",
    description="Matches the review's `productId` field by value.",
    tags=["reviews"],
)
def list_reviews_for_product(
    product_id: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        reviews = list_documents(store.reviews, {"productId": product_id})
        return json_response(reviews)
    except Exception:
        logger.exception("Listing reviews for product %s failed", product_id)
        return server_error_response()
