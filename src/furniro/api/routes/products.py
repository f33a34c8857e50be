from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response

from furniro.api.dependencies import get_store
from furniro.api.queries import (
    delete_document_by_id,
    find_document_by_id,
    insert_document,
    list_documents,
)
from furniro.api.responses import json_response, server_error_response
from furniro.api.schemas import DeleteResultDTO, InsertResultDTO, NotFoundDTO
from furniro.db import MongoStore
from furniro.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/allProducts", summary="List every product", tags=["products"])
def list_products(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        products = list_documents(store.products)
        return json_response(products)
    except Exception:
        logger.exception("Listing products failed")
        return server_error_response()


@router.get(
    "/product/{product_id}",
    summary="Find a product by id",
    description="A missing product yields status 200 with an `error` marker.",
    tags=["products"],
)
def get_product(
    product_id: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        product = find_document_by_id(store.products, product_id)
        if product is None:
            return json_response(NotFoundDTO.for_entity("Product"))
        return json_response(product)
    except Exception:
        logger.exception("Fetching product %s failed", product_id)
        return server_error_response()


@router.post("/addProduct", summary="Store a product document", tags=["products"])
def add_product(
    store: Annotated[MongoStore, Depends(get_store)],
    product: Annotated[dict[str, Any] | None, Body()] = None,
) -> Response:
    try:
        result = insert_document(store.products, product or {})
        return json_response(InsertResultDTO.from_result(result))
    except Exception:
        logger.exception("Inserting product failed")
        return server_error_response()


@router.delete(
    "/deleteProduct/{product_id}",
    summary="Delete a product by id",
    tags=["products"],
)
def delete_product(
    product_id: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        result = delete_document_by_id(store.products, product_id)
        return json_response(DeleteResultDTO.from_result(result))
    except Exception:
        logger.exception("Deleting product %s failed", product_id)
        return server_error_response()
